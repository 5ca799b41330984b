"""Workout builder — WorkoutSpec → step tree → WorkoutDocument."""

from workout_converter.workout_builder.assembler import assemble_document
from workout_converter.workout_builder.builder import StepBuilder, StepCounter
from workout_converter.workout_builder.estimator import estimate_workout, planned_duration_sec
from workout_converter.workout_builder.target_resolver import find_zone_number, resolve_target

__all__ = [
    "StepBuilder",
    "StepCounter",
    "assemble_document",
    "estimate_workout",
    "find_zone_number",
    "planned_duration_sec",
    "resolve_target",
]
