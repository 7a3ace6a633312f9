"""Models describing editing aspects served to the frontend."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field

from tubeflow.models.base import TubeflowBaseModel


class AspectField(TubeflowBaseModel):
    """A single editable field within an aspect."""

    name: str
    field_key: str
    type: str
    required: bool = False
    order: int = Field(ge=1)
    description: str = ""
    completion_criteria: Optional[str] = None
    default_value: Any = None


class AspectSummary(TubeflowBaseModel):
    """Aspect overview entry without field details.

    ``completed_field_count`` is only filled when the overview is requested for a specific video.
    """

    key: str
    title: str
    description: str
    endpoint: str
    icon: str
    order: int = Field(ge=1)
    field_count: int = Field(ge=0)
    tracked_field_count: int = Field(ge=0)
    completed_field_count: Optional[int] = Field(default=None, ge=0)


class AspectFields(TubeflowBaseModel):
    """Detailed field list for one aspect."""

    aspect_key: str
    aspect_title: str
    fields: List[AspectField] = Field(default_factory=list)


__all__ = ["AspectField", "AspectFields", "AspectSummary"]
