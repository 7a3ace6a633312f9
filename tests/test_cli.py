from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console
from typer.testing import CliRunner

from tubeflow.cli.commands.videos import ExitCode
from tubeflow.cli.main import create_app
from tubeflow.services.video import VideoService

runner = CliRunner()


@pytest.fixture()
def console_output() -> StringIO:
    return StringIO()


@pytest.fixture()
def cli_app(settings, console_output):
    console = Console(file=console_output, width=200, force_terminal=False, color_system=None)
    return create_app(console=console, settings=settings)


def test_no_subcommand_prints_ready_message(cli_app, console_output):
    result = runner.invoke(cli_app, [])

    assert result.exit_code == ExitCode.SUCCESS
    assert "Tubeflow CLI ready for commands." in console_output.getvalue()


def test_phases_table(cli_app, console_output, settings):
    VideoService(settings=settings).create_video("cli-video", "devops")

    result = runner.invoke(cli_app, ["phases"])

    assert result.exit_code == ExitCode.SUCCESS
    output = console_output.getvalue()
    assert "Video Phases" in output
    assert "Sponsored Blocked" in output
    assert "Ideas" in output


def test_progress_table(cli_app, console_output, settings):
    service = VideoService(settings=settings)
    service.create_video("cli-video", "devops")
    service.update_section("cli-video", "devops", "work-progress", {"codeDone": True})

    result = runner.invoke(cli_app, ["progress", "cli-video", "--category", "devops"])

    assert result.exit_code == ExitCode.SUCCESS
    output = console_output.getvalue()
    assert "cli-video (Ideas)" in output
    assert "Work In Progress" in output
    assert "Overall" in output
    assert "46" in output


def test_progress_for_missing_video(cli_app, console_output):
    result = runner.invoke(cli_app, ["progress", "missing", "-c", "devops"])

    assert result.exit_code == ExitCode.STORAGE_ERROR
    assert "not found" in console_output.getvalue()


def test_progress_with_invalid_category(cli_app, console_output):
    result = runner.invoke(cli_app, ["progress", "video", "-c", "../etc"])

    assert result.exit_code == ExitCode.INVALID_INPUT
    assert "Invalid input" in console_output.getvalue()


def test_phases_with_corrupt_index(cli_app, console_output, settings):
    settings.index_path.write_text("not: a list\n", encoding="utf-8")

    result = runner.invoke(cli_app, ["phases"])

    assert result.exit_code == ExitCode.STORAGE_ERROR
    assert "Failed to read the video index" in console_output.getvalue()
