"""POST /api/convert — SVG document → map series data."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends

from app.dependencies import get_normalizer_config
from app.engine.config import NormalizerConfig
from app.engine.pipeline import convert_svg
from app.models.requests import ConvertRequest
from app.models.responses import ConvertResponse, Series

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
async def convert(
    req: ConvertRequest,
    config: NormalizerConfig = Depends(get_normalizer_config),
) -> ConvertResponse:
    # Large maps take a while; keep the event loop free
    ctx = await asyncio.to_thread(convert_svg, req.svg, req.scale, req.serialize, config)

    return ConvertResponse(
        series=[Series(data=list(ctx.series_data()))],
        processing_time_ms=round(ctx.processing_time_ms, 1),
        shapes_converted=len(ctx.records),
        shapes_failed=len(ctx.errors),
        errors=ctx.errors,
    )
