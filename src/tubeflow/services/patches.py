"""Validation and application of section-scoped field patches."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, create_model

from tubeflow.models.video import TitleVariant, Video
from tubeflow.workflow.sections import SECTIONS, FieldKind, Section

_FIELD_TYPES: Dict[FieldKind, Any] = {
    FieldKind.STRING: str,
    FieldKind.TEXT: str,
    FieldKind.DATE: str,
    FieldKind.BOOLEAN: bool,
    FieldKind.TITLES: List[TitleVariant],
}


class SectionPatch(BaseModel):
    """Base for the per-section patch models; every field is optional and unknown keys fail."""

    model_config = ConfigDict(extra="forbid")


def _build_patch_model(section: Section) -> Type[SectionPatch]:
    definitions: Dict[str, Tuple[Any, None]] = {
        spec.key: (Optional[_FIELD_TYPES[spec.kind]], None) for spec in section.fields
    }
    model_name = "".join(part.title() for part in section.key.split("-")) + "Patch"
    return create_model(model_name, __base__=SectionPatch, **definitions)  # type: ignore[call-overload]


PATCH_MODELS: Dict[str, Type[SectionPatch]] = {section.key: _build_patch_model(section) for section in SECTIONS}


def parse_patch(section: Section, payload: Mapping[str, Any]) -> SectionPatch:
    """Validate a raw JSON payload against the section's patch model."""

    return PATCH_MODELS[section.key].model_validate(payload)


def apply_patch(video: Video, section: Section, patch: SectionPatch) -> Video:
    """Return a copy of ``video`` with the fields present in ``patch`` replaced.

    Keys that were sent as ``null`` are left untouched.
    """

    updates: Dict[str, Any] = {}
    for key in patch.model_fields_set:
        value = getattr(patch, key)
        if value is None:
            continue
        updates[section.field(key).attribute] = value
    return set_attributes(video, updates)


def set_attributes(video: Video, updates: Mapping[str, Any]) -> Video:
    """Return a copy of ``video`` with dotted attribute paths replaced by new values."""

    top_level: Dict[str, Any] = {}
    nested: Dict[str, Dict[str, Any]] = {}
    for path, value in updates.items():
        head, _, tail = path.partition(".")
        if tail:
            nested.setdefault(head, {})[tail] = value
        else:
            top_level[head] = value

    for head, values in nested.items():
        top_level[head] = getattr(video, head).model_copy(update=values)
    return video.model_copy(update=top_level)


__all__ = ["PATCH_MODELS", "SectionPatch", "apply_patch", "parse_patch", "set_attributes"]
