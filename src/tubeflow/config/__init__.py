"""Configuration package for Tubeflow."""

from pathlib import Path

SETTINGS_FILE = Path("settings.yaml")

__all__ = ["SETTINGS_FILE"]
