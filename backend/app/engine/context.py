"""ConversionContext — the single mutable state object flowing through a conversion.

Per-shape results → ConversionContext.records
Per-shape failures → ConversionContext.errors (keyed by shape label)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.models.records import PathRecord, SerializedPathRecord
from app.svg.parser import ShapeSource


@dataclass
class ConversionContext:
    """Shared state for one SVG → map series conversion."""

    # Raw SVG code
    svg_raw: str = ""
    # Shapes found in the document, before interpretation
    shapes: list[ShapeSource] = field(default_factory=list)
    # Shapes that traced successfully, in document order
    records: list[PathRecord] = field(default_factory=list)
    # Filled by the serialize step only
    serialized: list[SerializedPathRecord] | None = None
    # Target box used by the normalizer
    scale: float = 999.0
    errors: dict[str, str] = field(default_factory=dict)
    processing_time_ms: float = 0.0

    @property
    def num_shapes(self) -> int:
        return len(self.shapes)

    def series_data(self) -> list[PathRecord] | list[SerializedPathRecord]:
        """Records in the form handed to the map series: strings if serialized."""
        return self.serialized if self.serialized is not None else self.records
