"""Service layer for the Tubeflow application."""

from tubeflow.services.aspects import AspectNotFoundError, AspectService
from tubeflow.services.video import PhaseCount, VideoService, VideoSummary

__all__ = ["AspectNotFoundError", "AspectService", "PhaseCount", "VideoService", "VideoSummary"]
