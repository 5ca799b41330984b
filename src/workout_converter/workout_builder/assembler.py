"""Document assembler — packages a built workout into a WorkoutDocument."""

from __future__ import annotations

from workout_converter.models.enums import ESTIMATE_TYPE, SportMode
from workout_converter.models.plan import WorkoutSpec
from workout_converter.models.steps import WorkoutDocument, WorkoutEstimate


def assemble_document(
    workout: WorkoutSpec,
    sport_mode: SportMode,
    steps,
    estimate: WorkoutEstimate,
) -> WorkoutDocument:
    return WorkoutDocument(
        sport_mode=sport_mode,
        name=workout.name,
        steps=tuple(steps),
        estimated_duration_sec=estimate.duration_sec,
        estimated_distance_m=estimate.distance_m,
        avg_speed_m_per_s=estimate.avg_speed_m_per_s,
        estimate_type=ESTIMATE_TYPE,
    )
