"""Field completion predicate shared by every progress section."""

from __future__ import annotations

from functools import singledispatch
from typing import Any

from tubeflow.models.video import TitleVariant, Video

PLACEHOLDER = "-"
NO_SPONSORSHIP_VALUES = frozenset({"", "N/A", PLACEHOLDER})
FIXME_MARKER = "FIXME:"


@singledispatch
def is_field_complete(value: Any) -> bool:
    """Return whether a single field value counts as done.

    Strings must be non-blank after trimming and not the ``"-"`` placeholder, booleans count
    when ``True`` and lists count when they hold at least one complete entry. Anything else,
    ``None`` included, is incomplete.
    """

    return False


@is_field_complete.register
def _(value: str) -> bool:
    stripped = value.strip()
    return bool(stripped) and stripped != PLACEHOLDER


@is_field_complete.register
def _(value: bool) -> bool:
    return value


@is_field_complete.register
def _(value: TitleVariant) -> bool:
    return is_field_complete(value.text)


@is_field_complete.register(list)
@is_field_complete.register(tuple)
def _(value: list | tuple) -> bool:
    # Plain collections only need an entry; strings and title candidates must hold text.
    return any(
        is_field_complete(item) if isinstance(item, (str, TitleVariant)) else item is not None
        for item in value
    )


def has_no_sponsorship(video: Video) -> bool:
    """Return ``True`` when the video carries no sponsorship amount."""

    return video.sponsorship.amount.strip() in NO_SPONSORSHIP_VALUES


def timecodes_complete(timecodes: str) -> bool:
    """Timecodes are done once filled in and free of ``FIXME:`` markers."""

    return is_field_complete(timecodes) and FIXME_MARKER not in timecodes


__all__ = [
    "FIXME_MARKER",
    "NO_SPONSORSHIP_VALUES",
    "PLACEHOLDER",
    "has_no_sponsorship",
    "is_field_complete",
    "timecodes_complete",
]
