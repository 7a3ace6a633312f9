"""Command registration utilities for the Tubeflow CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from tubeflow.cli.commands import videos
from tubeflow.config.settings import Settings


def register_commands(app: typer.Typer, console: Console, settings: Settings) -> None:
    """Attach command groups to the provided Typer application."""

    videos.register(app, console, settings)

    @app.callback(invoke_without_command=True)
    def main_callback(ctx: typer.Context) -> None:
        """Display a default message when no subcommand is provided."""

        if ctx.invoked_subcommand is None:
            console.print("[bold green]Tubeflow CLI ready for commands.[/bold green]")


__all__ = ["register_commands"]
