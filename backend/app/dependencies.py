"""FastAPI dependency injection."""

from __future__ import annotations

from app.config import settings
from app.engine.config import NormalizerConfig


def get_normalizer_config() -> NormalizerConfig:
    return NormalizerConfig(scale=settings.mappath_default_scale)
