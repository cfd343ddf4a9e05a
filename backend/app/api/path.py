"""POST /api/path/* and /api/paths/* — single-step access to the path core.

Path errors raised here are turned into 422 responses by the app's exception
handlers.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.dependencies import get_normalizer_config
from app.engine.config import NormalizerConfig
from app.engine.normalizer import round_paths
from app.models.requests import NormalizeRequest, ParsePathRequest, SerializeRequest
from app.models.responses import NormalizeResponse, ParsePathResponse, SerializeResponse
from app.svg.interpreter import path_to_array
from app.svg.serializer import path_to_string

router = APIRouter()


@router.post("/path/parse", response_model=ParsePathResponse)
async def parse_path(req: ParsePathRequest) -> ParsePathResponse:
    return ParsePathResponse(path=path_to_array(req.d, req.translate))


@router.post("/path/serialize", response_model=SerializeResponse)
async def serialize_paths(req: SerializeRequest) -> SerializeResponse:
    return SerializeResponse(records=path_to_string(req.records))


@router.post("/paths/normalize", response_model=NormalizeResponse)
async def normalize_paths(
    req: NormalizeRequest,
    config: NormalizerConfig = Depends(get_normalizer_config),
) -> NormalizeResponse:
    records = round_paths(req.records, req.scale, config)
    return NormalizeResponse(records=list(records))
