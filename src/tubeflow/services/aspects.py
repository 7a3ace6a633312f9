"""Editing aspect metadata derived from the progress section registry."""

from __future__ import annotations

from typing import Any, List, Optional

from tubeflow.models.aspect import AspectField, AspectFields, AspectSummary
from tubeflow.models.video import Video
from tubeflow.workflow.progress import calculate_all_sections
from tubeflow.workflow.sections import SECTIONS, SECTIONS_BY_KEY, FieldKind, FieldSpec, Section


class AspectNotFoundError(LookupError):
    """Raised when an unknown aspect key is requested."""


def _default_value(spec: FieldSpec) -> Any:
    if spec.kind is FieldKind.BOOLEAN:
        return False
    if spec.kind is FieldKind.TITLES:
        return []
    return "" if spec.required else None


def _field(section: Section, spec: FieldSpec, order: int) -> AspectField:
    item = section.item_for(spec.key)
    return AspectField(
        name=spec.title,
        field_key=spec.key,
        type=spec.kind.value,
        required=spec.required,
        order=order,
        description=spec.description,
        completion_criteria=item.criterion.value if item else None,
        default_value=_default_value(spec),
    )


class AspectService:
    """Serve aspect overviews and field lists, optionally with a video's live completion counts."""

    def get_aspects_overview(self, video: Optional[Video] = None) -> List[AspectSummary]:
        progress = calculate_all_sections(video) if video is not None else {}
        return [
            AspectSummary(
                key=section.key,
                title=section.title,
                description=section.description,
                endpoint=section.endpoint,
                icon=section.icon,
                order=order,
                field_count=len(section.fields),
                tracked_field_count=section.total,
                completed_field_count=progress[section.key].completed if progress else None,
            )
            for order, section in enumerate(SECTIONS, start=1)
        ]

    def get_aspect_fields(self, aspect_key: str) -> AspectFields:
        section = SECTIONS_BY_KEY.get(aspect_key)
        if section is None:
            raise AspectNotFoundError(f"Aspect '{aspect_key}' not found.")
        return AspectFields(
            aspect_key=section.key,
            aspect_title=section.title,
            fields=[_field(section, spec, order) for order, spec in enumerate(section.fields, start=1)],
        )


__all__ = ["AspectNotFoundError", "AspectService"]
