"""MapPath conversion engine."""

from app.engine.config import NormalizerConfig
from app.engine.context import ConversionContext
from app.engine.normalizer import round_paths
from app.engine.pipeline import Pipeline, convert_svg, create_pipeline

__all__ = [
    "NormalizerConfig",
    "ConversionContext",
    "round_paths",
    "Pipeline",
    "convert_svg",
    "create_pipeline",
]
