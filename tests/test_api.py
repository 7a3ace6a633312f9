from __future__ import annotations


def _create(client, name="My Video", category="devops"):
    response = client.post("/api/videos", json={"name": name, "category": category})
    assert response.status_code == 201
    return response.json()["video"]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_video(client):
    assert _create(client) == {"name": "my-video", "category": "devops"}


def test_create_duplicate_video(client):
    _create(client)

    response = client.post("/api/videos", json={"name": "my video", "category": "devops"})

    assert response.status_code == 409
    assert response.json()["error"] == "Video already exists"


def test_create_video_requires_name(client):
    response = client.post("/api/videos", json={"name": "", "category": "devops"})

    assert response.status_code == 422


def test_create_video_rejects_path_category(client):
    response = client.post("/api/videos", json={"name": "video", "category": "../etc"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid video key"


def test_get_video_uses_camel_case(client):
    _create(client)

    response = client.get("/api/videos/my-video", params={"category": "devops"})

    assert response.status_code == 200
    video = response.json()["video"]
    assert video["name"] == "my-video"
    assert video["init"] == {"completed": 3, "total": 10}
    assert video["postPublish"] == {"completed": 1, "total": 9}
    assert "projectName" in video


def test_get_missing_video(client):
    response = client.get("/api/videos/missing", params={"category": "devops"})

    assert response.status_code == 404
    assert response.json()["error"] == "Video not found"


def test_get_video_requires_category(client):
    assert client.get("/api/videos/my-video").status_code == 422


def test_phases(client):
    _create(client)

    phases = client.get("/api/videos/phases").json()["phases"]

    assert [phase["id"] for phase in phases] == list(range(8))
    assert phases[7] == {"id": 7, "name": "Ideas", "count": 1}
    assert sum(phase["count"] for phase in phases) == 1


def test_section_update(client):
    _create(client)

    response = client.put(
        "/api/videos/my-video/initial-details",
        params={"category": "devops"},
        json={"projectName": "Crossplane", "delayed": True},
    )

    assert response.status_code == 200
    video = response.json()["video"]
    assert video["projectName"] == "Crossplane"
    assert video["init"] == {"completed": 3, "total": 10}

    phases = {phase["name"]: phase["count"] for phase in client.get("/api/videos/phases").json()["phases"]}
    assert phases["Delayed"] == 1


def test_section_update_with_unknown_field(client):
    _create(client)

    response = client.put("/api/videos/my-video/definition", params={"category": "devops"}, json={"codeDone": True})

    assert response.status_code == 422
    assert response.json()["error"] == "Invalid update"


def test_section_update_with_wrong_type(client):
    _create(client)

    response = client.put(
        "/api/videos/my-video/initial-details", params={"category": "devops"}, json={"projectName": 5}
    )

    assert response.status_code == 422


def test_unknown_section(client):
    _create(client)

    response = client.put("/api/videos/my-video/bogus", params={"category": "devops"}, json={})

    assert response.status_code == 404
    assert response.json()["error"] == "Unknown section: bogus"


def test_full_update(client):
    _create(client)

    response = client.put(
        "/api/videos/my-video",
        params={"category": "devops"},
        json={
            "video": {
                "name": "ignored",
                "titles": [{"index": 1, "text": "Hello", "share": 0}],
                "repo": "https://github.com/vfarcic/demo",
            }
        },
    )

    assert response.status_code == 200
    video = response.json()["video"]
    assert video["name"] == "my-video"
    assert video["define"] == {"completed": 1, "total": 8}

    published = client.get("/api/videos", params={"phase": 0}).json()["videos"]
    assert [item["name"] for item in published] == ["my-video"]


def test_videos_by_phase_requires_valid_phase(client):
    assert client.get("/api/videos").status_code == 400
    assert client.get("/api/videos", params={"phase": "9"}).status_code == 400
    assert client.get("/api/videos", params={"phase": "ideas"}).status_code == 400
    assert client.get("/api/videos", params={"phase": "7"}).json() == {"videos": []}


def test_list_videos(client):
    _create(client)

    videos = client.get("/api/videos/list").json()["videos"]

    assert videos == [
        {
            "name": "my-video",
            "category": "devops",
            "phase": 7,
            "phaseName": "Ideas",
            "progress": {"completed": 4, "total": 46},
        }
    ]


def test_delete_video(client):
    _create(client)

    response = client.delete("/api/videos/my-video", params={"category": "devops"})

    assert response.status_code == 204
    assert client.get("/api/videos/my-video", params={"category": "devops"}).status_code == 404
    assert client.get("/api/videos/list").json() == {"videos": []}


def test_categories(client):
    _create(client, category="DevOps Tools")

    categories = client.get("/api/categories").json()["categories"]

    assert [category["name"] for category in categories] == ["Devops Tools"]


def test_aspects_overview(client):
    aspects = client.get("/api/editing/aspects").json()["aspects"]

    assert len(aspects) == 6
    assert aspects[0]["key"] == "initial-details"
    assert aspects[0]["fieldCount"] == 10
    assert aspects[0]["completedFieldCount"] is None


def test_aspects_overview_for_video(client):
    _create(client)

    aspects = client.get("/api/editing/aspects", params={"videoName": "my-video", "category": "devops"}).json()[
        "aspects"
    ]

    assert aspects[0]["completedFieldCount"] == 3
    assert aspects[-1]["completedFieldCount"] == 1


def test_aspects_overview_needs_both_parameters(client):
    response = client.get("/api/editing/aspects", params={"videoName": "my-video"})

    assert response.status_code == 400


def test_aspect_fields(client):
    response = client.get("/api/editing/aspects/definition/fields")

    assert response.status_code == 200
    body = response.json()
    assert body["aspectKey"] == "definition"
    assert body["fields"][0]["fieldKey"] == "titles"
    assert body["fields"][0]["completionCriteria"] == "filled_only"


def test_unknown_aspect_fields(client):
    response = client.get("/api/editing/aspects/unknown/fields")

    assert response.status_code == 404
    assert response.json()["error"] == "Aspect not found"
