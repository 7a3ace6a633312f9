"""Validation helpers for video names and categories."""

from __future__ import annotations

import re


class InvalidVideoKeyError(ValueError):
    """Raised when a video name or category cannot identify a record."""


_FORBIDDEN_CHARACTERS = re.compile(r'[?*<>|"]')
_SEPARATORS = re.compile(r"[:/\\]")
_REPEATED_HYPHENS = re.compile(r"-+")


def category_slug(category: str) -> str:
    """Return the directory name used for a category."""

    slug = category.strip().lower().replace(" ", "-")
    if not slug or slug in {".", ".."} or _SEPARATORS.search(slug):
        raise InvalidVideoKeyError(f"Invalid category: {category!r}")
    return slug


def sanitize_name(name: str) -> str:
    """Normalise a video name into the base name of its files.

    Lower-cases the name, turns spaces and path separators into hyphens, drops characters
    most filesystems reject and collapses runs of hyphens.
    """

    sanitized = name.strip().lower().replace(" ", "-")
    sanitized = _SEPARATORS.sub("-", sanitized)
    sanitized = _FORBIDDEN_CHARACTERS.sub("", sanitized)
    sanitized = _REPEATED_HYPHENS.sub("-", sanitized)
    if not sanitized or sanitized in {".", ".."}:
        raise InvalidVideoKeyError(f"Invalid video name: {name!r}")
    return sanitized


__all__ = ["InvalidVideoKeyError", "category_slug", "sanitize_name"]
