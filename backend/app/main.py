"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.svg.errors import PathError, SvgDocumentError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.mappath_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _path_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "kind": getattr(exc, "kind", "error")},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="MapPath",
        description="SVG path → normalized map path conversion",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PathError, _path_error_handler)
    app.add_exception_handler(SvgDocumentError, _path_error_handler)

    from app.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
