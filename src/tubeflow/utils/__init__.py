"""Utility helpers shared across Tubeflow modules."""

from tubeflow.utils.log import setup_logging
from tubeflow.utils.validation import InvalidVideoKeyError, category_slug, sanitize_name

__all__ = ["InvalidVideoKeyError", "category_slug", "sanitize_name", "setup_logging"]
