"""Lifecycle and progress tracking for YouTube video production."""

__version__ = "0.1.0"

__all__ = ["__version__"]
