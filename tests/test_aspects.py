from __future__ import annotations

import pytest

from tubeflow.models.video import Sponsorship, Video
from tubeflow.services.aspects import AspectNotFoundError, AspectService


@pytest.fixture()
def service() -> AspectService:
    return AspectService()


def test_overview_lists_sections_in_order(service):
    overview = service.get_aspects_overview()

    assert [aspect.key for aspect in overview] == [
        "initial-details",
        "work-progress",
        "definition",
        "post-production",
        "publishing",
        "post-publish",
    ]
    assert [aspect.order for aspect in overview] == [1, 2, 3, 4, 5, 6]
    assert all(aspect.completed_field_count is None for aspect in overview)
    assert overview[0].endpoint == "/api/videos/{videoName}/initial-details"


def test_overview_separates_editable_and_tracked_fields(service):
    counts = {aspect.key: (aspect.field_count, aspect.tracked_field_count) for aspect in service.get_aspects_overview()}

    assert counts == {
        "initial-details": (10, 10),
        "work-progress": (11, 11),
        "definition": (8, 8),
        "post-production": (6, 6),
        "publishing": (3, 2),
        "post-publish": (11, 9),
    }


def test_overview_for_video_includes_completion(service):
    video = Video(project_name="Crossplane", code=True, sponsorship=Sponsorship(amount="500"))

    completed = {aspect.key: aspect.completed_field_count for aspect in service.get_aspects_overview(video)}

    assert completed["initial-details"] == 4
    assert completed["work-progress"] == 1
    assert completed["post-publish"] == 0


def test_aspect_fields(service):
    aspect = service.get_aspect_fields("publishing")

    assert aspect.aspect_title == "Publishing Details"
    by_key = {field.field_key: field for field in aspect.fields}
    assert list(by_key) == ["videoFilePath", "youTubeVideoId", "hugoPostPath"]
    assert by_key["videoFilePath"].completion_criteria == "filled_only"
    assert by_key["youTubeVideoId"].completion_criteria is None
    assert [field.order for field in aspect.fields] == [1, 2, 3]


def test_aspect_field_criteria_and_defaults(service):
    initial = {field.field_key: field for field in service.get_aspect_fields("initial-details").fields}
    definition = {field.field_key: field for field in service.get_aspect_fields("definition").fields}
    post_production = {field.field_key: field for field in service.get_aspect_fields("post-production").fields}

    assert initial["delayed"].completion_criteria == "false_only"
    assert initial["delayed"].default_value is False
    assert initial["sponsorshipBlockedReason"].completion_criteria == "empty_only"
    assert initial["sponsorshipEmails"].completion_criteria == "conditional"
    assert initial["publishDate"].type == "date"
    assert initial["projectName"].default_value is None
    assert definition["titles"].required is True
    assert definition["titles"].default_value == []
    assert post_production["timecodes"].completion_criteria == "no_fixme"


def test_unknown_aspect(service):
    with pytest.raises(AspectNotFoundError):
        service.get_aspect_fields("unknown")
