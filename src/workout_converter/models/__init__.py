"""Data models for the conversion core."""

from workout_converter.models.enums import (
    DiagnosticKind,
    EndConditionType,
    SportMode,
    StepKind,
    TargetType,
)
from workout_converter.models.plan import (
    Diagnostic,
    ParsedRow,
    PlanRows,
    SegmentSpec,
    WorkoutSpec,
)
from workout_converter.models.steps import (
    EndCondition,
    NoTarget,
    PowerZone,
    RepeatGroup,
    Step,
    TargetSpec,
    TimedStep,
    WorkoutDocument,
    WorkoutEstimate,
    iter_steps,
)

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "EndCondition",
    "EndConditionType",
    "NoTarget",
    "ParsedRow",
    "PlanRows",
    "PowerZone",
    "RepeatGroup",
    "SegmentSpec",
    "SportMode",
    "Step",
    "StepKind",
    "TargetSpec",
    "TargetType",
    "TimedStep",
    "WorkoutDocument",
    "WorkoutEstimate",
    "WorkoutSpec",
    "iter_steps",
]
