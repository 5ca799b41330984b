"""Enumerations and wire constants for Garmin Connect workouts.

Numeric values are the workout-service type codes and must not change.
"""

from enum import IntEnum


class SportMode(IntEnum):
    """Sport of a workout (Garmin sportTypeId)."""

    RUNNING = 1
    CYCLING = 2


class StepKind(IntEnum):
    """Workout step types (Garmin stepTypeId)."""

    WARMUP = 1
    COOLDOWN = 2
    INTERVAL = 3     # Steady steps reuse the interval kind
    RECOVERY = 4
    REPEAT = 6       # Container for interval/recovery pairs


class EndConditionType(IntEnum):
    """How a step ends (Garmin conditionTypeId)."""

    LAP_BUTTON = 1
    TIME = 2
    ITERATIONS = 7


class TargetType(IntEnum):
    """Intensity target of a step (Garmin workoutTargetTypeId)."""

    NO_TARGET = 1
    POWER_ZONE = 2


class DiagnosticKind(IntEnum):
    """Category of a recoverable conversion problem."""

    EMPTY_INPUT = 1
    ROW_TOO_SHORT = 2
    SEGMENT_INCOMPLETE = 3
    ROW_FAILED = 4


# ---------------------------------------------------------------------------
# CSV layout
# ---------------------------------------------------------------------------
MIN_ROW_FIELDS = 4          # name, segment count, warmup, cooldown
SEGMENT_FIELDS = 4          # name, duration, pause, repeats
FIRST_SEGMENT_OFFSET = 4

# ---------------------------------------------------------------------------
# Step construction
# ---------------------------------------------------------------------------
# Warmup, cooldown and recovery steps are always described as easy zone 1.
EASY_STEP_DESCRIPTION = "Z1"
ZONE_NUMBER_MIN = 1
ZONE_NUMBER_MAX = 9

# ---------------------------------------------------------------------------
# Estimates — default average speeds (m/s)
# ---------------------------------------------------------------------------
DEFAULT_RUNNING_SPEED_M_PER_S = 2.94    # ~5:40/km
DEFAULT_CYCLING_SPEED_M_PER_S = 6.94    # ~25 km/h
ESTIMATE_TYPE = "TIME_ESTIMATED"
