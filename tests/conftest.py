from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tubeflow.api.app import create_app
from tubeflow.config.settings import Settings
from tubeflow.models.video import Sponsorship, TitleVariant, Video
from tubeflow.services.video import VideoService


@pytest.fixture()
def settings(tmp_path, monkeypatch) -> Settings:
    # Keep settings.yaml/.env lookups away from the developer's working directory.
    monkeypatch.chdir(tmp_path)
    return Settings(
        MANUSCRIPT_DIR=str(tmp_path / "manuscript"),
        INDEX_PATH=str(tmp_path / "index.yaml"),
    )


@pytest.fixture()
def manuscript_dir(settings) -> Path:
    return settings.manuscript_dir


@pytest.fixture()
def video_service(settings) -> VideoService:
    return VideoService(settings=settings)


@pytest.fixture()
def client(settings, video_service) -> TestClient:
    return TestClient(create_app(settings, video_service=video_service))


@pytest.fixture()
def complete_video() -> Video:
    """A video with every tracked item done."""

    return Video(
        name="complete",
        category="devops",
        project_name="Crossplane",
        project_url="https://crossplane.io",
        sponsorship=Sponsorship(amount="1000", emails="sponsor@example.com", name="Acme", url="https://acme.io"),
        date="2024-05-01T16:00",
        gist="manuscript/devops/complete.md",
        code=True,
        head=True,
        screen=True,
        related_videos="https://youtu.be/abc",
        thumbnails=True,
        diagrams=True,
        screenshots=True,
        location="https://drive.google.com/x",
        tagline="Cloud native all the things",
        tagline_ideas="One; Two",
        other_logos="crossplane.svg",
        titles=[TitleVariant(index=1, text="Crossplane in 10 minutes", share=55.0)],
        description="Everything about Crossplane.",
        highlight="Compositions",
        tags="crossplane,kubernetes",
        description_tags="#crossplane",
        tweet="New video!",
        animations="Logo spin",
        request_thumbnail=True,
        thumbnail="thumb.png",
        members="Viktor",
        request_edit=True,
        timecodes="00:00 Intro\n02:30 Setup",
        movie=True,
        slides=True,
        upload_video="complete.mp4",
        hugo_path="content/complete.md",
        bluesky_posted=True,
        linkedin_posted=True,
        slack_posted=True,
        youtube_highlight=True,
        youtube_comment=True,
        youtube_comment_reply=True,
        gde=True,
        repo="https://github.com/vfarcic/complete",
        notified_sponsors=True,
    )
