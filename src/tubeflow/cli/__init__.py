"""Command-line interface package for Tubeflow."""

from tubeflow.cli.main import CLIApplication, create_app

__all__ = ["CLIApplication", "create_app"]
