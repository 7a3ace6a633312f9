"""Declarative registry of the six progress sections.

Each section lists the editable fields of its form and, separately, the completion items that
make up its progress bar. An item usually checks one field with the general predicate; the few
derived items (sponsorship emails, blocked reason, delayed flag, timecodes, notified sponsors)
carry their own rule. Section totals are the number of items, so they never depend on field
values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from tubeflow.models.video import Video
from tubeflow.workflow.completion import has_no_sponsorship, is_field_complete, timecodes_complete


class FieldKind(str, Enum):
    """Input widget a field is edited with."""

    STRING = "string"
    TEXT = "text"
    BOOLEAN = "boolean"
    DATE = "date"
    TITLES = "titles"


class Criterion(str, Enum):
    """Human-readable name of the rule that marks a field as done."""

    FILLED = "filled_only"
    TRUE = "true_only"
    EMPTY = "empty_only"
    FALSE = "false_only"
    NO_FIXME = "no_fixme"
    CONDITIONAL = "conditional"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """An editable video field as exposed over the API."""

    key: str
    attribute: str
    title: str
    kind: FieldKind
    description: str
    required: bool = False


@dataclass(frozen=True, slots=True)
class CompletionItem:
    """One unit of work counted towards a section's progress."""

    field: str
    criterion: Criterion
    check: Callable[[Video], bool]


@dataclass(frozen=True, slots=True)
class Section:
    """A named group of fields with its own progress counter."""

    key: str
    title: str
    description: str
    icon: str
    counter: str
    fields: Tuple[FieldSpec, ...]
    items: Tuple[CompletionItem, ...]

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def endpoint(self) -> str:
        return f"/api/videos/{{videoName}}/{self.key}"

    def field(self, key: str) -> FieldSpec:
        for spec in self.fields:
            if spec.key == key:
                return spec
        raise KeyError(key)

    def item_for(self, field_key: str) -> Optional[CompletionItem]:
        for item in self.items:
            if item.field == field_key:
                return item
        return None


def resolve_attribute(video: Video, path: str) -> Any:
    """Return the value at a dotted attribute path such as ``sponsorship.amount``."""

    value: Any = video
    for part in path.split("."):
        value = getattr(value, part)
    return value


def _string(key: str, attribute: str, title: str, description: str, *, required: bool = False) -> FieldSpec:
    return FieldSpec(key, attribute, title, FieldKind.STRING, description, required)


def _text(key: str, attribute: str, title: str, description: str) -> FieldSpec:
    return FieldSpec(key, attribute, title, FieldKind.TEXT, description)


def _flag(key: str, attribute: str, title: str, description: str) -> FieldSpec:
    return FieldSpec(key, attribute, title, FieldKind.BOOLEAN, description)


def _filled(spec: FieldSpec) -> CompletionItem:
    criterion = Criterion.TRUE if spec.kind is FieldKind.BOOLEAN else Criterion.FILLED
    return CompletionItem(spec.key, criterion, lambda video: is_field_complete(resolve_attribute(video, spec.attribute)))


def _tracked(*specs: FieldSpec) -> Tuple[CompletionItem, ...]:
    return tuple(_filled(spec) for spec in specs)


# Initial details -----------------------------------------------------------------------------
PROJECT_NAME = _string("projectName", "project_name", "Project Name", "Name of the related project")
PROJECT_URL = _string("projectURL", "project_url", "Project URL", "URL to the project repository or documentation")
SPONSORSHIP_AMOUNT = _string("sponsorshipAmount", "sponsorship.amount", "Sponsorship Amount", "Sponsorship amount if applicable")
SPONSORSHIP_NAME = _string("sponsorshipName", "sponsorship.name", "Sponsorship Name", "Name of the sponsor")
SPONSORSHIP_URL = _string("sponsorshipUrl", "sponsorship.url", "Sponsorship URL", "Link the sponsor wants promoted")
SPONSORSHIP_EMAILS = _string(
    "sponsorshipEmails", "sponsorship.emails", "Sponsorship Emails (comma separated)", "Sponsor contact emails"
)
SPONSORSHIP_BLOCKED = _string(
    "sponsorshipBlockedReason", "sponsorship.blocked", "Sponsorship Blocked Reason", "Why the sponsorship blocks the video"
)
PUBLISH_DATE = FieldSpec(
    "publishDate", "date", "Publish Date (YYYY-MM-DDTHH:MM)", FieldKind.DATE, "Scheduled publication date and time"
)
DELAYED = _flag("delayed", "delayed", "Delayed", "Whether the video is delayed")
GIST_PATH = _string("gistPath", "gist", "Gist Path (.md file)", "Path to the manuscript/gist file")

INITIAL_DETAILS = Section(
    key="initial-details",
    title="Initial Details",
    description="Initial video details and project information",
    icon="info",
    counter="init",
    fields=(
        PROJECT_NAME,
        PROJECT_URL,
        SPONSORSHIP_AMOUNT,
        SPONSORSHIP_NAME,
        SPONSORSHIP_URL,
        SPONSORSHIP_EMAILS,
        SPONSORSHIP_BLOCKED,
        PUBLISH_DATE,
        DELAYED,
        GIST_PATH,
    ),
    items=_tracked(PROJECT_NAME, PROJECT_URL, GIST_PATH, PUBLISH_DATE, SPONSORSHIP_AMOUNT, SPONSORSHIP_NAME, SPONSORSHIP_URL)
    + (
        CompletionItem(
            SPONSORSHIP_EMAILS.key,
            Criterion.CONDITIONAL,
            lambda video: has_no_sponsorship(video) or is_field_complete(video.sponsorship.emails),
        ),
        CompletionItem(SPONSORSHIP_BLOCKED.key, Criterion.EMPTY, lambda video: not video.sponsorship.blocked),
        CompletionItem(DELAYED.key, Criterion.FALSE, lambda video: not video.delayed),
    ),
)

# Work progress -------------------------------------------------------------------------------
WORK_FIELDS = (
    _flag("codeDone", "code", "Code Done", "Code/demonstration completed"),
    _flag("talkingHeadDone", "head", "Talking Head Done", "Talking head video recorded"),
    _flag("screenRecordingDone", "screen", "Screen Recording Done", "Screen recording completed"),
    _text("relatedVideos", "related_videos", "Related Videos (comma separated)", "List of related videos for reference"),
    _flag("thumbnailsDone", "thumbnails", "Thumbnails Done", "Thumbnail images prepared"),
    _flag("diagramsDone", "diagrams", "Diagrams Done", "Diagrams and visual aids created"),
    _flag("screenshotsDone", "screenshots", "Screenshots Done", "Screenshots captured"),
    _string("filesLocation", "location", "Files Location (e.g., Google Drive link)", "File storage location"),
    _string("tagline", "tagline", "Tagline", "Video tagline or subtitle"),
    _text("taglineIdeas", "tagline_ideas", "Tagline Ideas", "Alternative tagline options"),
    _string("otherLogosAssets", "other_logos", "Other Logos/Assets", "Additional logos or assets needed"),
)

WORK_PROGRESS = Section(
    key="work-progress",
    title="Work In Progress",
    description="Work progress and content creation status",
    icon="video",
    counter="work",
    fields=WORK_FIELDS,
    items=_tracked(*WORK_FIELDS),
)

# Definition ----------------------------------------------------------------------------------
DEFINITION_FIELDS = (
    FieldSpec("titles", "titles", "Titles", FieldKind.TITLES, "Title candidates with their A/B test share", True),
    _text("description", "description", "Description", "Video description text"),
    _string("highlight", "highlight", "Highlight", "Key highlight or main point"),
    _string("tags", "tags", "Tags", "Video tags for categorization"),
    _text("descriptionTags", "description_tags", "Description Tags", "Tags for video description"),
    _string("tweetText", "tweet", "Tweet", "Social media tweet text"),
    _text("animationsScript", "animations", "Animations Script", "Animation instructions or script"),
    _flag("requestThumbnailGeneration", "request_thumbnail", "Request Thumbnail", "Request custom thumbnail creation"),
)

DEFINITION = Section(
    key="definition",
    title="Definition",
    description="Video content definition and metadata",
    icon="edit",
    counter="define",
    fields=DEFINITION_FIELDS,
    items=_tracked(*DEFINITION_FIELDS),
)

# Post-production -----------------------------------------------------------------------------
TIMECODES = _text("timecodes", "timecodes", "Timecodes", "Important timestamp markers")
POST_PRODUCTION_TRACKED = (
    _string("thumbnailPath", "thumbnail", "Thumbnail Path", "Path to thumbnail image file"),
    _string("members", "members", "Members (comma separated)", "Team members involved"),
    _flag("requestEdit", "request_edit", "Edit Request", "Ask the editor to start editing"),
    _flag("movieDone", "movie", "Movie Done", "Video editing completed"),
    _flag("slidesDone", "slides", "Slides Done", "Presentation slides finalized"),
)

POST_PRODUCTION = Section(
    key="post-production",
    title="Post-Production",
    description="Post-production editing and review tasks",
    icon="scissors",
    counter="edit",
    fields=POST_PRODUCTION_TRACKED[:3] + (TIMECODES,) + POST_PRODUCTION_TRACKED[3:],
    items=_tracked(*POST_PRODUCTION_TRACKED)
    + (CompletionItem(TIMECODES.key, Criterion.NO_FIXME, lambda video: timecodes_complete(video.timecodes)),),
)

# Publishing ----------------------------------------------------------------------------------
VIDEO_FILE_PATH = _string("videoFilePath", "upload_video", "Video File Path", "Path to final video file")
YOUTUBE_VIDEO_ID = _string("youTubeVideoId", "video_id", "Current YouTube Video ID", "ID of the uploaded YouTube video")
HUGO_POST_PATH = _string("hugoPostPath", "hugo_path", "Hugo Post Path", "Path of the generated blog post")

PUBLISHING = Section(
    key="publishing",
    title="Publishing Details",
    description="Publishing settings and video upload",
    icon="upload",
    counter="publish",
    fields=(VIDEO_FILE_PATH, YOUTUBE_VIDEO_ID, HUGO_POST_PATH),
    items=_tracked(VIDEO_FILE_PATH, HUGO_POST_PATH),
)

# Post-publish --------------------------------------------------------------------------------
DOT_POSTED = _flag("devOpsToolkitPostSent", "dot_posted", "DevOpsToolkit Post Sent (manual)", "Posted to DevOpsToolkit")
HN_POSTED = _flag("hackerNewsPostSent", "hn_posted", "Hacker News Post Sent", "Posted to Hacker News")
NOTIFIED_SPONSORS = _flag("notifiedSponsors", "notified_sponsors", "Notify Sponsors", "Notify sponsors of publication")
POST_PUBLISH_TRACKED = (
    _flag("blueSkyPostSent", "bluesky_posted", "BlueSky Post Sent", "Posted to BlueSky social media"),
    _flag("linkedInPostSent", "linkedin_posted", "LinkedIn Post Sent (manual)", "Posted to LinkedIn"),
    _flag("slackPostSent", "slack_posted", "Slack Post Sent", "Posted to Slack channels"),
    _flag("youTubeHighlightCreated", "youtube_highlight", "YouTube Highlight Created (manual)", "YouTube highlight created"),
    _flag("youTubePinnedCommentAdded", "youtube_comment", "YouTube Pinned Comment Added (manual)", "Pinned comment added"),
    _flag("repliedToYouTubeComments", "youtube_comment_reply", "Replied to YouTube Comments (manual)", "Replied to comments"),
    _flag("gdeAdvocuPostSent", "gde", "GDE Advocu Post Sent (manual)", "Posted to GDE Advocu"),
    _string("codeRepositoryURL", "repo", "Code Repository URL", "Link to associated code repository"),
)

POST_PUBLISH = Section(
    key="post-publish",
    title="Post-Publish Details",
    description="Post-publication tasks and social media",
    icon="share",
    counter="post_publish",
    fields=(DOT_POSTED,) + POST_PUBLISH_TRACKED[:3] + (HN_POSTED,) + POST_PUBLISH_TRACKED[3:] + (NOTIFIED_SPONSORS,),
    items=_tracked(*POST_PUBLISH_TRACKED)
    + (
        CompletionItem(
            NOTIFIED_SPONSORS.key,
            Criterion.CONDITIONAL,
            lambda video: video.notified_sponsors or has_no_sponsorship(video),
        ),
    ),
)

SECTIONS: Tuple[Section, ...] = (
    INITIAL_DETAILS,
    WORK_PROGRESS,
    DEFINITION,
    POST_PRODUCTION,
    PUBLISHING,
    POST_PUBLISH,
)
SECTIONS_BY_KEY: Dict[str, Section] = {section.key: section for section in SECTIONS}


def get_section(key: str) -> Section:
    """Return the section registered under ``key``; raises :class:`KeyError` when unknown."""

    return SECTIONS_BY_KEY[key]


__all__ = [
    "CompletionItem",
    "Criterion",
    "DEFINITION",
    "FieldKind",
    "FieldSpec",
    "INITIAL_DETAILS",
    "POST_PRODUCTION",
    "POST_PUBLISH",
    "PUBLISHING",
    "SECTIONS",
    "SECTIONS_BY_KEY",
    "Section",
    "WORK_PROGRESS",
    "get_section",
    "resolve_attribute",
]
