"""Garmin Connect JSON serialization for WorkoutDocument objects.

Converts a WorkoutDocument → the workout-service JSON accepted by
``POST /workout-service/workout``. Type ids and keys are fixed by
Garmin and mirror the enums in ``models.enums``.

All functions are pure (no I/O, no network calls).
"""

from __future__ import annotations

import json

from workout_converter.models.enums import EndConditionType, SportMode, StepKind, TargetType
from workout_converter.models.steps import (
    EndCondition,
    PowerZone,
    RepeatGroup,
    TargetSpec,
    TimedStep,
    WorkoutDocument,
)

# Garmin enforces limits on certain text fields.
_GARMIN_NAME_MAX = 32

_SPORT_TYPE_KEYS = {
    SportMode.RUNNING: "running",
    SportMode.CYCLING: "cycling",
}

_STEP_TYPE_KEYS = {
    StepKind.WARMUP: "warmup",
    StepKind.COOLDOWN: "cooldown",
    StepKind.INTERVAL: "interval",
    StepKind.RECOVERY: "recovery",
    StepKind.REPEAT: "repeat",
}

_END_CONDITION_KEYS = {
    EndConditionType.LAP_BUTTON: "lap.button",
    EndConditionType.TIME: "time",
    EndConditionType.ITERATIONS: "iterations",
}

_TARGET_TYPE_KEYS = {
    TargetType.NO_TARGET: "no.target",
    TargetType.POWER_ZONE: "power.zone",
}


def to_garmin_json(document: WorkoutDocument) -> dict:
    """Convert a WorkoutDocument to a Garmin Connect-compatible dict."""
    sport_type = _sport_type(document.sport_mode)
    steps = []
    for step in document.steps:
        if isinstance(step, RepeatGroup):
            steps.append(_convert_repeat_group(step))
        else:
            steps.append(_convert_step(step))

    return {
        "sportType": sport_type,
        "subSportType": None,
        "workoutName": document.name[:_GARMIN_NAME_MAX],
        "estimatedDistanceUnit": {"unitKey": None},
        "workoutSegments": [
            {
                "segmentOrder": 1,
                "sportType": dict(sport_type),
                "workoutSteps": steps,
            }
        ],
        "avgTrainingSpeed": document.avg_speed_m_per_s,
        "estimatedDurationInSecs": document.estimated_duration_sec,
        "estimatedDistanceInMeters": document.estimated_distance_m,
        "estimateType": document.estimate_type,
        "isWheelchair": False,
    }


def to_garmin_json_string(document: WorkoutDocument, indent: int = 2) -> str:
    """Convert a WorkoutDocument to a Garmin-compatible JSON string."""
    return json.dumps(to_garmin_json(document), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _sport_type(sport_mode: SportMode) -> dict:
    return {
        "sportTypeId": sport_mode.value,
        "sportTypeKey": _SPORT_TYPE_KEYS[sport_mode],
        "displayOrder": sport_mode.value,
    }


def _step_type(kind: StepKind) -> dict:
    return {
        "stepTypeId": kind.value,
        "stepTypeKey": _STEP_TYPE_KEYS[kind],
        "displayOrder": kind.value,
    }


def _end_condition(condition_type: EndConditionType) -> dict:
    return {
        "conditionTypeId": condition_type.value,
        "conditionTypeKey": _END_CONDITION_KEYS[condition_type],
        "displayOrder": condition_type.value,
        "displayable": condition_type != EndConditionType.ITERATIONS,
    }


def _convert_step(step: TimedStep) -> dict:
    """Build an ExecutableStepDTO for a timed step."""
    result = {
        "type": "ExecutableStepDTO",
        "stepId": step.step_id,
        "stepOrder": step.order,
        "stepType": _step_type(step.kind),
    }
    result.update(_build_end_condition(step.end_condition))
    result["description"] = step.description
    result["stepAudioNote"] = None
    if step.child_step_id is not None:
        result["childStepId"] = step.child_step_id
    result.update(_build_target(step.target))
    return result


def _convert_repeat_group(group: RepeatGroup) -> dict:
    """Build a RepeatGroupDTO with its interval and recovery children."""
    return {
        "type": "RepeatGroupDTO",
        "stepId": group.step_id,
        "stepOrder": group.order,
        "stepType": _step_type(StepKind.REPEAT),
        "numberOfIterations": group.iterations,
        "smartRepeat": False,
        "childStepId": group.first_child_id,
        "workoutSteps": [_convert_step(child) for child in group.children],
        "endCondition": _end_condition(EndConditionType.ITERATIONS),
        "endConditionValue": group.iterations,
        "skipLastRestStep": True,
    }


def _build_end_condition(end_condition: EndCondition) -> dict:
    """Time → seconds; lap button → value 0."""
    return {
        "endCondition": _end_condition(end_condition.condition_type),
        "endConditionValue": end_condition.value,
    }


def _build_target(target: TargetSpec) -> dict:
    """Build the target fields for a step.

    Power zones add ``zoneNumber``; no-target steps carry only the type.
    """
    result = {
        "targetType": {
            "workoutTargetTypeId": target.target_type.value,
            "workoutTargetTypeKey": _TARGET_TYPE_KEYS[target.target_type],
            "displayOrder": target.target_type.value,
        },
    }
    if isinstance(target, PowerZone):
        result["zoneNumber"] = target.zone_number
    return result
