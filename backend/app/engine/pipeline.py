"""Conversion pipeline — SVG document → normalized map series records."""

from __future__ import annotations

import logging
import time

from app.engine.config import NormalizerConfig
from app.engine.context import ConversionContext
from app.engine.normalizer import round_paths
from app.models.records import PathRecord
from app.svg.errors import PathError
from app.svg.interpreter import ParsedPath, path_to_array
from app.svg.parser import ShapeSource, extract_shapes
from app.svg.serializer import path_to_string

logger = logging.getLogger(__name__)


def trace_shape(shape: ShapeSource) -> PathRecord:
    """Interpret every path of a shape and concatenate them into one record."""
    path: ParsedPath = []
    for d in shape.paths:
        path.extend(path_to_array(d, shape.translate))
    return PathRecord(name=shape.name, path=path, has_fill=shape.has_fill)


class Pipeline:
    """Runs extract → trace → normalize → (serialize) over one document."""

    def __init__(self, config: NormalizerConfig | None = None) -> None:
        self.config = config or NormalizerConfig()

    def run(self, ctx: ConversionContext, serialize: bool = False) -> ConversionContext:
        start = time.perf_counter()

        ctx.shapes = extract_shapes(ctx.svg_raw)
        self.trace(ctx)
        round_paths(ctx.records, ctx.scale, self.config)
        if serialize:
            ctx.serialized = path_to_string(ctx.records)

        ctx.processing_time_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Conversion complete: %d/%d shapes in %.0fms",
            len(ctx.records),
            ctx.num_shapes,
            ctx.processing_time_ms,
        )
        return ctx

    def trace(self, ctx: ConversionContext) -> ConversionContext:
        """Interpret each shape; a failing shape is recorded and skipped."""
        for shape in ctx.shapes:
            try:
                ctx.records.append(trace_shape(shape))
            except PathError as e:
                ctx.errors[shape.label] = str(e)
                logger.warning("  %s FAILED: %s", shape.label, e)
        return ctx


def create_pipeline(config: NormalizerConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)


def convert_svg(
    svg_text: str,
    scale: float | None = None,
    serialize: bool = False,
    config: NormalizerConfig | None = None,
) -> ConversionContext:
    """Convert a whole SVG document. Raises ``SvgDocumentError`` for unreadable XML."""
    pipeline = create_pipeline(config)
    ctx = ConversionContext(svg_raw=svg_text, scale=scale or pipeline.config.scale)
    return pipeline.run(ctx, serialize=serialize)
