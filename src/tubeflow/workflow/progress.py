"""Per-section and overall progress computation."""

from __future__ import annotations

from typing import Dict, NamedTuple

from tubeflow.models.video import Tasks, Video
from tubeflow.workflow.sections import (
    DEFINITION,
    INITIAL_DETAILS,
    POST_PRODUCTION,
    POST_PUBLISH,
    PUBLISHING,
    SECTIONS,
    WORK_PROGRESS,
    Section,
    get_section,
)


class SectionProgress(NamedTuple):
    """Completed and total item counts for a section."""

    completed: int
    total: int

    @property
    def percent(self) -> int:
        if self.total == 0:
            return 0
        return self.completed * 100 // self.total


def _count(section: Section, video: Video) -> SectionProgress:
    completed = sum(1 for item in section.items if item.check(video))
    return SectionProgress(completed, section.total)


def calculate_initial_details_progress(video: Video) -> SectionProgress:
    return _count(INITIAL_DETAILS, video)


def calculate_work_progress(video: Video) -> SectionProgress:
    return _count(WORK_PROGRESS, video)


def calculate_definition_progress(video: Video) -> SectionProgress:
    return _count(DEFINITION, video)


def calculate_post_production_progress(video: Video) -> SectionProgress:
    return _count(POST_PRODUCTION, video)


def calculate_publishing_progress(video: Video) -> SectionProgress:
    return _count(PUBLISHING, video)


def calculate_post_publish_progress(video: Video) -> SectionProgress:
    return _count(POST_PUBLISH, video)


def calculate_section_progress(section_key: str, video: Video) -> SectionProgress:
    """Return progress for the section registered under ``section_key``."""

    return _count(get_section(section_key), video)


def calculate_all_sections(video: Video) -> Dict[str, SectionProgress]:
    """Return progress for every section keyed by section key, in display order."""

    return {section.key: _count(section, video) for section in SECTIONS}


def calculate_overall_progress(video: Video) -> SectionProgress:
    """Sum every section's counts; each item weighs the same regardless of its section."""

    sections = calculate_all_sections(video).values()
    return SectionProgress(
        completed=sum(progress.completed for progress in sections),
        total=sum(progress.total for progress in sections),
    )


def refresh_progress(video: Video) -> Video:
    """Return a copy of ``video`` whose stored task counters match its current field values."""

    counters = {
        section.counter: Tasks(completed=progress.completed, total=progress.total)
        for section, progress in zip(SECTIONS, calculate_all_sections(video).values())
    }
    return video.model_copy(update=counters)


__all__ = [
    "SectionProgress",
    "calculate_all_sections",
    "calculate_definition_progress",
    "calculate_initial_details_progress",
    "calculate_overall_progress",
    "calculate_post_production_progress",
    "calculate_post_publish_progress",
    "calculate_publishing_progress",
    "calculate_section_progress",
    "calculate_work_progress",
    "refresh_progress",
]
