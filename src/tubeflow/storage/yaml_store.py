"""YAML-file backed video store."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import ValidationError

from tubeflow.models.video import Video, VideoIndex
from tubeflow.utils.validation import category_slug, sanitize_name

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Base exception raised for store failures."""


class VideoNotFoundError(StoreError):
    """Raised when a requested video record does not exist."""


class VideoAlreadyExistsError(StoreError):
    """Raised when creating a video whose record already exists."""


@dataclass(slots=True)
class Category:
    """A manuscript directory grouping videos."""

    name: str
    path: str


def _atomic_write(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(payload, handle, sort_keys=False, allow_unicode=True)
        os.replace(tmp, path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise


def _read_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise StoreError(f"Malformed YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise StoreError(f"Failed to read {path}: {exc}") from exc


class YamlVideoStore:
    """Reads and writes ``{manuscript_dir}/{category}/{name}.yaml`` records and the index file."""

    def __init__(self, manuscript_dir: Path, index_path: Path) -> None:
        self._manuscript_dir = Path(manuscript_dir)
        self._index_path = Path(index_path)

    @property
    def manuscript_dir(self) -> Path:
        return self._manuscript_dir

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------
    def category_dir(self, category: str) -> Path:
        return self._manuscript_dir / category_slug(category)

    def video_path(self, name: str, category: str) -> Path:
        return self.category_dir(category) / f"{sanitize_name(name)}.yaml"

    def script_path(self, name: str, category: str) -> Path:
        return self.category_dir(category) / f"{sanitize_name(name)}.md"

    # ------------------------------------------------------------------
    # Index
    # ------------------------------------------------------------------
    def get_index(self) -> List[VideoIndex]:
        """Return the index entries; a missing index file is an empty index."""

        if not self._index_path.exists():
            return []

        raw_entries = _read_yaml(self._index_path) or []
        if not isinstance(raw_entries, list):
            raise StoreError(f"Index {self._index_path} must contain a list of entries.")
        try:
            return [VideoIndex.model_validate(entry) for entry in raw_entries]
        except ValidationError as exc:
            raise StoreError(f"Invalid entry in index {self._index_path}: {exc}") from exc

    def write_index(self, entries: List[VideoIndex]) -> None:
        _atomic_write(self._index_path, [entry.model_dump(mode="json") for entry in entries])

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------
    def load_video(self, name: str, category: str) -> Video:
        """Load a full record; ``name`` and ``category`` always reflect the lookup key."""

        path = self.video_path(name, category)
        if not path.exists():
            raise VideoNotFoundError(f"Video '{name}' not found in category '{category}'.")

        raw_video = _read_yaml(path) or {}
        if not isinstance(raw_video, dict):
            raise StoreError(f"Video file {path} must contain a mapping.")
        try:
            video = Video.model_validate(raw_video)
        except ValidationError as exc:
            raise StoreError(f"Invalid video data in {path}: {exc}") from exc
        return video.model_copy(update={"name": name, "category": category})

    def save_video(self, video: Video) -> Path:
        path = self.video_path(video.name, video.category)
        _atomic_write(path, video.model_dump(mode="json"))
        logger.debug("Saved video %s to %s", video.name, path)
        return path

    def exists(self, name: str, category: str) -> bool:
        return self.video_path(name, category).exists()

    def write_script(self, name: str, category: str, content: str) -> Path:
        """Create the manuscript file unless one is already there."""

        path = self.script_path(name, category)
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return path

    def delete_video_files(self, name: str, category: str) -> None:
        """Remove the record and its manuscript; files that are already gone are ignored."""

        failures = []
        for path in (self.video_path(name, category), self.script_path(name, category)):
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                failures.append(f"{path}: {exc}")
        if failures:
            raise StoreError(f"Errors during file deletion: {'; '.join(failures)}")

    def list_categories(self) -> List[Category]:
        """Return manuscript directories as display-named categories, sorted by name."""

        if not self._manuscript_dir.is_dir():
            return []
        categories = [
            Category(name=child.name.replace("-", " ").title(), path=str(child))
            for child in self._manuscript_dir.iterdir()
            if child.is_dir()
        ]
        return sorted(categories, key=lambda category: category.name)


__all__ = [
    "Category",
    "StoreError",
    "VideoAlreadyExistsError",
    "VideoNotFoundError",
    "YamlVideoStore",
]
