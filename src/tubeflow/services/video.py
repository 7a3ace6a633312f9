"""Video lifecycle operations on top of the YAML store."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from tubeflow.config.settings import Settings
from tubeflow.models.video import Video, VideoIndex
from tubeflow.services.patches import apply_patch, parse_patch
from tubeflow.storage import VideoStore
from tubeflow.storage.yaml_store import (
    Category,
    StoreError,
    VideoAlreadyExistsError,
    YamlVideoStore,
)
from tubeflow.utils.validation import InvalidVideoKeyError, category_slug, sanitize_name
from tubeflow.workflow.phases import DEFAULT_PHASE, Phase, classify_phase
from tubeflow.workflow.progress import SectionProgress, calculate_overall_progress, refresh_progress
from tubeflow.workflow.sections import get_section

logger = logging.getLogger(__name__)

PUBLISH_DATE_FORMAT = "%Y-%m-%dT%H:%M"

SCRIPT_TEMPLATE = """## Intro

FIXME: Shock

FIXME: Establish expectations

FIXME: What's the ending?

## Setup

FIXME:

## FIXME:

FIXME:

## FIXME: Pros and Cons

FIXME: Header: Cons; Items: FIXME:

FIXME: Header: Pros; Items: FIXME:

## Destroy

FIXME:
"""


@dataclass(slots=True)
class _KeyLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


@dataclass(slots=True)
class PhaseCount:
    """Number of videos currently in a phase."""

    phase: Phase
    count: int

    @property
    def name(self) -> str:
        return self.phase.display_name


@dataclass(slots=True)
class VideoSummary:
    """Lightweight listing entry for a video."""

    name: str
    category: str
    phase: Phase
    progress: SectionProgress


class VideoService:
    """Create, read, update and classify videos.

    Every mutation is a full read-modify-write of one record. Writes to the same
    ``(category, name)`` key are serialized with a per-key lock so concurrent requests cannot
    lose each other's updates; the index file has its own lock.
    """

    def __init__(self, *, settings: Settings, store: Optional[VideoStore] = None) -> None:
        self._settings = settings
        self._store = store or YamlVideoStore(settings.manuscript_dir, settings.index_path)
        self._key_locks: Dict[Tuple[str, str], _KeyLock] = {}
        self._key_locks_guard = threading.Lock()
        self._index_lock = threading.Lock()

    @property
    def store(self) -> VideoStore:
        return self._store

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def create_video(self, name: str, category: str) -> VideoIndex:
        """Create a fresh record, its manuscript skeleton and its index entry.

        Raises
        ------
        InvalidVideoKeyError
            If the name or category is blank or unusable as a path.
        VideoAlreadyExistsError
            If a record already exists for the key.
        """

        name, category = self._normalise_key(name, category)
        with self._locked(name, category):
            if self._store.exists(name, category):
                raise VideoAlreadyExistsError(f"Video '{name}' already exists in category '{category}'.")

            video = refresh_progress(Video(name=name, category=category))
            self._store.save_video(video)
            self._store.write_script(name, category, SCRIPT_TEMPLATE)

        entry = VideoIndex(name=name, category=category)
        with self._index_lock:
            index = self._store.get_index()
            if entry not in index:
                index.append(entry)
                self._store.write_index(index)

        logger.info("Created video %s in %s", name, category)
        return entry

    def get_video(self, name: str, category: str) -> Video:
        name, category = self._normalise_key(name, category)
        return self._store.load_video(name, category)

    def update_video(self, name: str, category: str, video: Video) -> Video:
        """Replace a record wholesale; the key comes from the URL, never from the payload."""

        name, category = self._normalise_key(name, category)
        with self._locked(name, category):
            self._store.load_video(name, category)
            updated = refresh_progress(video.model_copy(update={"name": name, "category": category}))
            self._store.save_video(updated)
        return updated

    def update_section(self, name: str, category: str, section_key: str, payload: Mapping[str, Any]) -> Video:
        """Apply a named-field patch to one section and persist the recomputed record.

        Raises
        ------
        KeyError
            If ``section_key`` is not a known section.
        pydantic.ValidationError
            If the payload holds unknown keys or values of the wrong type.
        """

        section = get_section(section_key)
        patch = parse_patch(section, payload)
        name, category = self._normalise_key(name, category)
        with self._locked(name, category):
            current = self._store.load_video(name, category)
            updated = refresh_progress(apply_patch(current, section, patch))
            self._store.save_video(updated)

        logger.info("Updated %s of video %s (%s)", section.key, name, ", ".join(sorted(patch.model_fields_set)))
        return updated

    def delete_video(self, name: str, category: str) -> None:
        name, category = self._normalise_key(name, category)
        with self._locked(name, category):
            self._store.delete_video_files(name, category)

        with self._index_lock:
            index = self._store.get_index()
            slug = category_slug(category)
            remaining = [
                entry for entry in index if (entry.name, category_slug(entry.category)) != (name, slug)
            ]
            self._store.write_index(remaining)
        logger.info("Deleted video %s from %s", name, category)

    def get_phase_counts(self) -> List[PhaseCount]:
        """Count indexed videos per phase, returning all eight phases in identifier order."""

        counts = {phase: 0 for phase in Phase}
        for _, phase in self._classified():
            counts[phase] += 1
        return [PhaseCount(phase=phase, count=count) for phase, count in counts.items()]

    def get_videos_by_phase(self, phase: Phase) -> List[Video]:
        """Return the videos in ``phase`` ordered by publish date, undated ones first."""

        videos = [video for video, video_phase in self._classified() if video_phase is phase]
        return sorted(videos, key=_publish_sort_key)

    def list_videos(self) -> List[VideoSummary]:
        return [
            VideoSummary(
                name=video.name,
                category=video.category,
                phase=phase,
                progress=calculate_overall_progress(video),
            )
            for video, phase in self._classified()
        ]

    def get_categories(self) -> List[Category]:
        return self._store.list_categories()

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    def _classified(self) -> Iterator[Tuple[Video, Phase]]:
        # An unreadable record carries no information yet, so it classifies as the default phase.
        for entry in self._store.get_index():
            try:
                video = self._store.load_video(entry.name, entry.category)
            except (StoreError, InvalidVideoKeyError, ValidationError) as exc:
                logger.warning(
                    "Treating unreadable video %s/%s as %s: %s",
                    entry.category,
                    entry.name,
                    DEFAULT_PHASE.display_name,
                    exc,
                )
                yield Video(name=entry.name, category=entry.category), DEFAULT_PHASE
                continue
            yield video, classify_phase(video)

    @contextmanager
    def _locked(self, name: str, category: str) -> Iterator[None]:
        # Entries live only while someone holds or waits for them.
        key = (category_slug(category), name)
        with self._key_locks_guard:
            entry = self._key_locks.get(key)
            if entry is None:
                entry = self._key_locks[key] = _KeyLock()
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._key_locks_guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._key_locks[key]

    @staticmethod
    def _normalise_key(name: str, category: str) -> Tuple[str, str]:
        if not name or not name.strip() or not category or not category.strip():
            raise InvalidVideoKeyError("Video name and category are required.")
        category_slug(category)
        return sanitize_name(name), category.strip()


def _publish_sort_key(video: Video) -> Tuple[int, datetime]:
    try:
        return (1, datetime.strptime(video.date, PUBLISH_DATE_FORMAT))
    except ValueError:
        return (0, datetime.min)


__all__ = ["PhaseCount", "SCRIPT_TEMPLATE", "VideoService", "VideoSummary"]
