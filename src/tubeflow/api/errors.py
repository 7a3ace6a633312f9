"""Mapping of domain exceptions onto JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tubeflow.services.aspects import AspectNotFoundError
from tubeflow.storage.yaml_store import StoreError, VideoAlreadyExistsError, VideoNotFoundError
from tubeflow.utils.validation import InvalidVideoKeyError

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, message: str = "") -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach handlers so every failure leaves the API as ``{"error", "message"}``."""

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(InvalidVideoKeyError)
    async def _invalid_key(request: Request, exc: InvalidVideoKeyError) -> JSONResponse:
        return error_response(400, "Invalid video key", str(exc))

    @app.exception_handler(ValidationError)
    async def _invalid_payload(request: Request, exc: ValidationError) -> JSONResponse:
        return error_response(422, "Invalid update", str(exc))

    @app.exception_handler(VideoNotFoundError)
    async def _not_found(request: Request, exc: VideoNotFoundError) -> JSONResponse:
        return error_response(404, "Video not found", str(exc))

    @app.exception_handler(AspectNotFoundError)
    async def _aspect_not_found(request: Request, exc: AspectNotFoundError) -> JSONResponse:
        return error_response(404, "Aspect not found", str(exc))

    @app.exception_handler(VideoAlreadyExistsError)
    async def _conflict(request: Request, exc: VideoAlreadyExistsError) -> JSONResponse:
        return error_response(409, "Video already exists", str(exc))

    @app.exception_handler(StoreError)
    async def _store_failure(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
        return error_response(500, "Storage failure", str(exc))


__all__ = ["error_response", "register_exception_handlers"]
