"""FastAPI application issuing LiveKit room access tokens."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import Settings, get_settings
from .routers import meta, tokens

logger = logging.getLogger(__name__)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API around an immutable settings object."""

    settings = settings or get_settings()
    static_dir = Path(settings.static_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("LiveKit URL: %s", settings.livekit_url)
        if not static_dir.is_dir():
            logger.warning("Static directory %s not found; only API routes are served", static_dir)
        yield

    app = FastAPI(title="Room Token API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(tokens.router, tags=["tokens"])
    app.include_router(meta.router)

    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn on the configured port."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("API Server starting on http://localhost:%s", settings.api_port)
    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
