from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lyricsnap.api import create_api_router
from lyricsnap.config import AppSettings, get_settings
from lyricsnap.exceptions import LyricSnapError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def handle_lyricsnap_error(request: Request, exc: LyricSnapError) -> JSONResponse:
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error in %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred"})


def create_app(settings: AppSettings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="LyricSnap backend",
        description="Search Genius, scrape clean lyrics and prepare excerpts for image export",
        version=settings.version,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LyricSnapError, handle_lyricsnap_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(create_api_router())
    app.dependency_overrides[get_settings] = lambda: settings

    return app


app = create_app()
