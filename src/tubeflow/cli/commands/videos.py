"""CLI commands for serving the API and inspecting video progress."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from tubeflow.api.app import create_app
from tubeflow.config.settings import Settings
from tubeflow.services.video import VideoService
from tubeflow.storage.yaml_store import StoreError
from tubeflow.utils.validation import InvalidVideoKeyError
from tubeflow.workflow.phases import classify_phase
from tubeflow.workflow.progress import calculate_all_sections, calculate_overall_progress
from tubeflow.workflow.sections import SECTIONS_BY_KEY


class ExitCode:
    """Mapping of meaningful CLI exit codes."""

    SUCCESS = 0
    INVALID_INPUT = 1
    STORAGE_ERROR = 2


def register(app: typer.Typer, console: Console, settings: Settings) -> None:
    """Register CLI commands for the API server and progress reporting."""

    @lru_cache(maxsize=1)
    def get_video_service() -> VideoService:
        return VideoService(settings=settings)

    @app.command("serve")
    def serve(
        host: Optional[str] = typer.Option(None, "--host", help="Interface to bind; defaults to settings."),
        port: Optional[int] = typer.Option(None, "--port", help="Port to listen on; defaults to settings."),
    ) -> None:
        """Start the REST API server."""

        bind_host = host or settings.api.host
        bind_port = port or settings.api.port
        console.print(f"[bold green]Starting API server on {bind_host}:{bind_port}[/bold green]")
        uvicorn.run(
            create_app(settings, video_service=get_video_service()),
            host=bind_host,
            port=bind_port,
            log_level=settings.log_level.lower(),
        )

    @app.command("phases")
    def phases() -> None:
        """Show how many videos are in each lifecycle phase."""

        try:
            counts = get_video_service().get_phase_counts()
        except StoreError as exc:
            console.print(f"[red]Failed to read the video index:[/red] {exc}")
            raise typer.Exit(code=ExitCode.STORAGE_ERROR) from exc

        table = Table(title="Video Phases")
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Phase", style="magenta")
        table.add_column("Videos", justify="right", style="green")
        for item in counts:
            table.add_row(str(int(item.phase)), item.name, str(item.count))
        console.print(table)

    @app.command("progress")
    def progress(
        name: str = typer.Argument(..., help="Video name."),
        category: str = typer.Option(..., "--category", "-c", help="Video category."),
    ) -> None:
        """Show per-section completion for a single video."""

        try:
            video = get_video_service().get_video(name, category)
        except InvalidVideoKeyError as exc:
            console.print(f"[red]Invalid input:[/red] {exc}")
            raise typer.Exit(code=ExitCode.INVALID_INPUT) from exc
        except StoreError as exc:
            console.print(f"[red]{exc}[/red]")
            raise typer.Exit(code=ExitCode.STORAGE_ERROR) from exc

        table = Table(title=f"{video.name} ({classify_phase(video).display_name})")
        table.add_column("Section", style="cyan")
        table.add_column("Completed", justify="right", style="green")
        table.add_column("Total", justify="right")
        for key, section_progress in calculate_all_sections(video).items():
            table.add_row(SECTIONS_BY_KEY[key].title, str(section_progress.completed), str(section_progress.total))
        overall = calculate_overall_progress(video)
        table.add_row("[bold]Overall[/bold]", f"[bold]{overall.completed}[/bold]", f"[bold]{overall.total}[/bold]")
        console.print(table)


__all__ = ["ExitCode", "register"]
