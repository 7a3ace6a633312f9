"""FastAPI application factory."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from tubeflow import __version__
from tubeflow.api.errors import register_exception_handlers
from tubeflow.api.routers import editing, videos
from tubeflow.config.settings import Settings
from tubeflow.services.aspects import AspectService
from tubeflow.services.video import VideoService

logger = logging.getLogger(__name__)


def create_app(settings: Settings, *, video_service: Optional[VideoService] = None) -> FastAPI:
    """Build the API around an explicit settings object."""

    app = FastAPI(title="Tubeflow", version=__version__)
    app.state.settings = settings
    app.state.video_service = video_service or VideoService(settings=settings)
    app.state.aspect_service = AspectService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    register_exception_handlers(app)
    app.include_router(videos.router)
    app.include_router(videos.categories_router)
    app.include_router(editing.router)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "time": datetime.now(timezone.utc).isoformat(timespec="seconds")}

    return app


__all__ = ["create_app"]
