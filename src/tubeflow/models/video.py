"""Pydantic models describing a video's production record."""

from __future__ import annotations

from typing import Any, List

from pydantic import ConfigDict, Field, model_validator

from tubeflow.models.base import TubeflowBaseModel


class StoredModel(TubeflowBaseModel):
    """Base for models persisted to YAML.

    Stored files are edited by hand, so unknown keys are ignored, explicit ``null`` values
    fall back to field defaults and bare numbers in text fields (``amount: 1000``) are read as
    strings instead of failing validation.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Tasks(StoredModel):
    """Completion counter stored for a single section."""

    completed: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)


class Sponsorship(StoredModel):
    """Sponsorship details attached to a video."""

    amount: str = ""
    emails: str = ""
    blocked: str = ""
    name: str = ""
    url: str = ""


class TitleVariant(StoredModel):
    """A title candidate and the share of impressions it received in A/B testing."""

    index: int = Field(default=1, ge=1)
    text: str = ""
    share: float = Field(default=0.0, ge=0.0, le=100.0)


class VideoIndex(StoredModel):
    """Entry in the flat index file that lists every tracked video."""

    name: str
    category: str


class Video(StoredModel):
    """Full production record of a single video.

    Every field is optional: an empty string, ``False`` or an empty list means "not done".
    The six :class:`Tasks` counters are derived data and are recomputed by
    :func:`tubeflow.workflow.progress.refresh_progress` before every save.
    """

    name: str = ""
    category: str = ""

    init: Tasks = Field(default_factory=Tasks)
    work: Tasks = Field(default_factory=Tasks)
    define: Tasks = Field(default_factory=Tasks)
    edit: Tasks = Field(default_factory=Tasks)
    publish: Tasks = Field(default_factory=Tasks)
    post_publish: Tasks = Field(default_factory=Tasks)

    # Initial details
    project_name: str = ""
    project_url: str = ""
    sponsorship: Sponsorship = Field(default_factory=Sponsorship)
    date: str = ""
    delayed: bool = False
    gist: str = ""

    # Work progress
    code: bool = False
    head: bool = False
    screen: bool = False
    related_videos: str = ""
    thumbnails: bool = False
    diagrams: bool = False
    screenshots: bool = False
    location: str = ""
    tagline: str = ""
    tagline_ideas: str = ""
    other_logos: str = ""

    # Definition
    titles: List[TitleVariant] = Field(default_factory=list)
    description: str = ""
    highlight: str = ""
    tags: str = ""
    description_tags: str = ""
    tweet: str = ""
    animations: str = ""
    request_thumbnail: bool = False

    # Post-production
    thumbnail: str = ""
    members: str = ""
    request_edit: bool = False
    timecodes: str = ""
    movie: bool = False
    slides: bool = False

    # Publishing
    upload_video: str = ""
    video_id: str = ""
    hugo_path: str = ""

    # Post-publish
    bluesky_posted: bool = False
    linkedin_posted: bool = False
    slack_posted: bool = False
    hn_posted: bool = False
    dot_posted: bool = False
    youtube_highlight: bool = False
    youtube_comment: bool = False
    youtube_comment_reply: bool = False
    gde: bool = False
    repo: str = ""
    notified_sponsors: bool = False

    # Localisation
    language: str = ""
    audio_language: str = ""
    applied_language: str = ""
    applied_audio_language: str = ""

    @property
    def key(self) -> tuple[str, str]:
        """Identity of the record in the store."""

        return (self.category, self.name)

    @property
    def primary_title(self) -> str:
        """Return the first non-blank title candidate, ordered by candidate index."""

        for variant in sorted(self.titles, key=lambda item: item.index):
            if variant.text.strip():
                return variant.text
        return ""


__all__ = ["Sponsorship", "Tasks", "TitleVariant", "Video", "VideoIndex"]
