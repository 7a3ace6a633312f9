"""HTTP API exposing video lifecycle operations."""

from tubeflow.api.app import create_app

__all__ = ["create_app"]
