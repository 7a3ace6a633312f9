"""CLI entry point and application wiring."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from tubeflow.cli.commands import register_commands
from tubeflow.config.settings import Settings, get_settings
from tubeflow.utils.log import setup_logging


class CLIApplication:
    """Central orchestrator for the Tubeflow Typer application."""

    def __init__(self, console: Optional[Console] = None, settings: Optional[Settings] = None) -> None:
        self.console = console or Console()
        self.settings = settings or get_settings()
        setup_logging(self.settings.log_level)
        self._app = typer.Typer(add_completion=False, rich_markup_mode="rich")
        register_commands(self._app, self.console, self.settings)

    @property
    def app(self) -> typer.Typer:
        """Return the underlying Typer application instance."""

        return self._app

    def run(self, *, prog_name: Optional[str] = None, args: Optional[list[str]] = None) -> None:
        """Invoke the Typer application with optional overrides."""

        self._app(prog_name=prog_name, args=args)


def create_app(console: Optional[Console] = None, settings: Optional[Settings] = None) -> typer.Typer:
    """Factory helper that returns the configured Typer application."""

    return CLIApplication(console=console, settings=settings).app


def main() -> None:
    """Console script entry point for `python -m tubeflow` or the installed CLI."""

    CLIApplication().run()


__all__ = ["CLIApplication", "create_app", "main"]
