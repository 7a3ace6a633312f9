"""Request-scoped accessors for the services held on the application state."""

from __future__ import annotations

from fastapi import Request

from tubeflow.services.aspects import AspectService
from tubeflow.services.video import VideoService


def get_video_service(request: Request) -> VideoService:
    return request.app.state.video_service


def get_aspect_service(request: Request) -> AspectService:
    return request.app.state.aspect_service


__all__ = ["get_aspect_service", "get_video_service"]
