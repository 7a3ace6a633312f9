from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from tubeflow.api.dependencies import get_aspect_service, get_video_service
from tubeflow.services.aspects import AspectService
from tubeflow.services.video import VideoService

router = APIRouter(prefix="/api/editing", tags=["editing"])


@router.get("/aspects")
def get_aspects_overview(
    video_name: Optional[str] = Query(default=None, alias="videoName"),
    category: Optional[str] = Query(default=None),
    aspects: AspectService = Depends(get_aspect_service),
    videos: VideoService = Depends(get_video_service),
):
    if bool(video_name) != bool(category):
        raise HTTPException(status_code=400, detail="videoName and category must be provided together")

    video = videos.get_video(video_name, category) if video_name and category else None
    overview = aspects.get_aspects_overview(video)
    return {"aspects": [summary.model_dump(mode="json", by_alias=True) for summary in overview]}


@router.get("/aspects/{aspect_key}/fields")
def get_aspect_fields(aspect_key: str, aspects: AspectService = Depends(get_aspect_service)):
    return aspects.get_aspect_fields(aspect_key).model_dump(mode="json", by_alias=True)
