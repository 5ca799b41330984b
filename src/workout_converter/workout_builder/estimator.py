"""Estimator — planned duration and distance of a step tree.

Lap-button steps have no planned length and contribute 0 s. A repeat
group contributes ``iterations × (interval + recovery)``.
"""

from __future__ import annotations

from workout_converter.dialects import COMMA_DIALECT, CsvDialect
from workout_converter.models.enums import SportMode
from workout_converter.models.steps import RepeatGroup, WorkoutEstimate


def planned_duration_sec(steps) -> int:
    """Total planned seconds of *steps*, repeat multiplicities included."""
    total = 0
    for step in steps:
        if isinstance(step, RepeatGroup):
            total += step.iterations * planned_duration_sec(step.children)
        else:
            total += step.end_condition.planned_seconds
    return total


def estimate_distance_m(duration_sec: int, speed_m_per_s: float) -> float:
    """Distance covered in *duration_sec* at *speed_m_per_s*, rounded to 0.1 m.

    Example: 1800 s at 2.94 m/s → 5292.0 m
    """
    return round(duration_sec * speed_m_per_s, 1)


def estimate_workout(
    steps,
    sport_mode: SportMode,
    dialect: CsvDialect = COMMA_DIALECT,
) -> WorkoutEstimate:
    """Estimate duration and distance using the dialect's default speed."""
    duration = planned_duration_sec(steps)
    speed = dialect.speed_for(sport_mode)
    return WorkoutEstimate(
        duration_sec=duration,
        distance_m=estimate_distance_m(duration, speed),
        avg_speed_m_per_s=speed,
    )
