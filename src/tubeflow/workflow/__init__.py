"""Pure phase and progress computations over :class:`tubeflow.models.video.Video`."""

from tubeflow.workflow.completion import is_field_complete
from tubeflow.workflow.phases import PHASE_NAMES, Phase, classify_phase
from tubeflow.workflow.progress import SectionProgress, calculate_overall_progress, refresh_progress

__all__ = [
    "PHASE_NAMES",
    "Phase",
    "SectionProgress",
    "calculate_overall_progress",
    "classify_phase",
    "is_field_complete",
    "refresh_progress",
]
