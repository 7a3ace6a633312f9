"""Lifecycle phase classification."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict

from tubeflow.models.video import Video


class Phase(IntEnum):
    """Mutually exclusive lifecycle phases.

    The numeric values are the identifiers exposed over the API; they do not follow the order in
    which :func:`classify_phase` checks the conditions.
    """

    PUBLISHED = 0
    PUBLISH_PENDING = 1
    EDIT_REQUESTED = 2
    MATERIAL_DONE = 3
    STARTED = 4
    DELAYED = 5
    SPONSORED_BLOCKED = 6
    IDEAS = 7

    @property
    def display_name(self) -> str:
        return PHASE_NAMES[self]


PHASE_NAMES: Dict[Phase, str] = {
    Phase.PUBLISHED: "Published",
    Phase.PUBLISH_PENDING: "Publish Pending",
    Phase.EDIT_REQUESTED: "Edit Requested",
    Phase.MATERIAL_DONE: "Material Done",
    Phase.STARTED: "Started",
    Phase.DELAYED: "Delayed",
    Phase.SPONSORED_BLOCKED: "Sponsored Blocked",
    Phase.IDEAS: "Ideas",
}

DEFAULT_PHASE = Phase.IDEAS


def classify_phase(video: Video) -> Phase:
    """Return the single phase a video is in.

    Conditions are evaluated in priority order and the first match wins. Composite conditions
    are all-or-nothing: a partially satisfied one never matches, and evaluation simply moves on.
    """

    if video.sponsorship.blocked:
        return Phase.SPONSORED_BLOCKED
    if video.delayed:
        return Phase.DELAYED
    if video.repo:
        return Phase.PUBLISHED
    if video.upload_video and video.tweet:
        return Phase.PUBLISH_PENDING
    if video.request_edit:
        return Phase.EDIT_REQUESTED
    if video.code and video.screen and video.head and video.diagrams:
        return Phase.MATERIAL_DONE
    if video.date:
        return Phase.STARTED
    return Phase.IDEAS


__all__ = ["DEFAULT_PHASE", "PHASE_NAMES", "Phase", "classify_phase"]
