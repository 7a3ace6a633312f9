"""Shared base model definitions for Tubeflow domain objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TubeflowBaseModel(BaseModel):
    """Base model configured for Tubeflow-wide defaults.

    Attribute names stay snake_case in Python and on disk; the camelCase aliases are what
    the HTTP API speaks.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


__all__ = ["TubeflowBaseModel"]
