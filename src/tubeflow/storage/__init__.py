"""Persistence for video records: one YAML file per video plus a flat index."""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol

from tubeflow.models.video import Video, VideoIndex
from tubeflow.storage.yaml_store import Category


class VideoStore(Protocol):
    """Operations the services need from a video record store."""

    def get_index(self) -> List[VideoIndex]:
        """Return every indexed video."""

    def write_index(self, entries: List[VideoIndex]) -> None:
        """Replace the index with ``entries``."""

    def load_video(self, name: str, category: str) -> Video:
        """Load the full record for ``(category, name)``."""

    def save_video(self, video: Video) -> Path:
        """Persist the full record and return the file it was written to."""

    def exists(self, name: str, category: str) -> bool:
        ...

    def script_path(self, name: str, category: str) -> Path:
        ...

    def write_script(self, name: str, category: str, content: str) -> Path:
        ...

    def delete_video_files(self, name: str, category: str) -> None:
        ...

    def list_categories(self) -> List[Category]:
        ...


__all__ = ["VideoStore"]
