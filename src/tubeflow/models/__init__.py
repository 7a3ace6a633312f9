"""Domain models for Tubeflow."""

from tubeflow.models.video import Sponsorship, Tasks, TitleVariant, Video, VideoIndex

__all__ = ["Sponsorship", "Tasks", "TitleVariant", "Video", "VideoIndex"]
