from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response
from pydantic import BaseModel, Field

from tubeflow.api.dependencies import get_video_service
from tubeflow.models.video import Video
from tubeflow.services.video import VideoService
from tubeflow.workflow.phases import Phase
from tubeflow.workflow.sections import SECTIONS_BY_KEY

router = APIRouter(prefix="/api/videos", tags=["videos"])
categories_router = APIRouter(prefix="/api/categories", tags=["categories"])


class CreateVideoRequest(BaseModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)


class UpdateVideoRequest(BaseModel):
    video: Video


def _video_payload(video: Video) -> Dict[str, Any]:
    return video.model_dump(mode="json", by_alias=True)


def _parse_phase(raw: Optional[str]) -> Phase:
    if raw is None or raw == "":
        raise HTTPException(status_code=400, detail="phase parameter is required")
    try:
        return Phase(int(raw))
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid phase parameter: {raw!r}") from None


@router.post("", status_code=201)
def create_video(request: CreateVideoRequest, service: VideoService = Depends(get_video_service)):
    entry = service.create_video(request.name, request.category)
    return {"video": entry.model_dump(mode="json")}


@router.get("/phases")
def get_video_phases(service: VideoService = Depends(get_video_service)):
    return {
        "phases": [
            {"id": int(item.phase), "name": item.name, "count": item.count}
            for item in service.get_phase_counts()
        ]
    }


@router.get("/list")
def list_videos(service: VideoService = Depends(get_video_service)):
    return {
        "videos": [
            {
                "name": summary.name,
                "category": summary.category,
                "phase": int(summary.phase),
                "phaseName": summary.phase.display_name,
                "progress": {"completed": summary.progress.completed, "total": summary.progress.total},
            }
            for summary in service.list_videos()
        ]
    }


@router.get("")
def get_videos(
    phase: Optional[str] = Query(default=None, description="Phase identifier (0-7)"),
    service: VideoService = Depends(get_video_service),
):
    videos = service.get_videos_by_phase(_parse_phase(phase))
    return {"videos": [_video_payload(video) for video in videos]}


@router.get("/{video_name}")
def get_video(
    video_name: str,
    category: str = Query(..., min_length=1),
    service: VideoService = Depends(get_video_service),
):
    return {"video": _video_payload(service.get_video(video_name, category))}


@router.put("/{video_name}")
def update_video(
    video_name: str,
    request: UpdateVideoRequest,
    category: str = Query(..., min_length=1),
    service: VideoService = Depends(get_video_service),
):
    return {"video": _video_payload(service.update_video(video_name, category, request.video))}


@router.delete("/{video_name}", status_code=204)
def delete_video(
    video_name: str,
    category: str = Query(..., min_length=1),
    service: VideoService = Depends(get_video_service),
):
    service.delete_video(video_name, category)
    return Response(status_code=204)


@router.put("/{video_name}/{section_key}")
def update_video_section(
    video_name: str,
    section_key: str,
    payload: Dict[str, Any] = Body(...),
    category: str = Query(..., min_length=1),
    service: VideoService = Depends(get_video_service),
):
    if section_key not in SECTIONS_BY_KEY:
        raise HTTPException(status_code=404, detail=f"Unknown section: {section_key}")
    video = service.update_section(video_name, category, section_key, payload)
    return {"video": _video_payload(video)}


@categories_router.get("")
def get_categories(service: VideoService = Depends(get_video_service)):
    return {"categories": [{"name": category.name, "path": category.path} for category in service.get_categories()]}
