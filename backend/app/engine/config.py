"""Engine configuration — controls normalization of path collections."""

from __future__ import annotations

from dataclasses import dataclass

from app.utils.math_helpers import PATH_PRECISION


@dataclass
class NormalizerConfig:
    """Target box and precision for ``round_paths``."""

    # Larger side of the collection's bounding box maps to this many units
    scale: float = 999.0
    # Decimals kept after rescaling
    precision: int = PATH_PRECISION
    # Flip y so SVG's downward axis reads upward on a chart
    flip_y: bool = True
