"""Step tree models — the built workout, before wire serialization.

Steps are either a ``TimedStep`` or a ``RepeatGroup`` holding exactly two
timed children (interval then recovery). Ids and orders are assigned by
the step builder and are unique within one workout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from workout_converter.exceptions import InvalidStepTreeError
from workout_converter.models.enums import (
    ESTIMATE_TYPE,
    ZONE_NUMBER_MAX,
    ZONE_NUMBER_MIN,
    EndConditionType,
    SportMode,
    StepKind,
    TargetType,
)


# ---------------------------------------------------------------------------
# Targets
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NoTarget:
    """Step without an intensity target."""

    target_type = TargetType.NO_TARGET


@dataclass(frozen=True)
class PowerZone:
    """Cycling power-zone target."""

    zone_number: int

    target_type = TargetType.POWER_ZONE

    def __post_init__(self) -> None:
        if not ZONE_NUMBER_MIN <= self.zone_number <= ZONE_NUMBER_MAX:
            raise ValueError(
                f"zone_number must be {ZONE_NUMBER_MIN}-{ZONE_NUMBER_MAX}, "
                f"got {self.zone_number}"
            )


TargetSpec = Union[NoTarget, PowerZone]


# ---------------------------------------------------------------------------
# End conditions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EndCondition:
    """How a timed step ends: elapsed seconds, or a lap press (value 0)."""

    condition_type: EndConditionType
    value: int = 0

    @classmethod
    def time(cls, seconds: int) -> "EndCondition":
        return cls(EndConditionType.TIME, seconds)

    @classmethod
    def lap_button(cls) -> "EndCondition":
        return cls(EndConditionType.LAP_BUTTON, 0)

    @classmethod
    def time_or_lap(cls, seconds: int) -> "EndCondition":
        """Time-based when *seconds* is positive, otherwise lap button."""
        if seconds > 0:
            return cls.time(seconds)
        return cls.lap_button()

    @property
    def is_lap_button(self) -> bool:
        return self.condition_type == EndConditionType.LAP_BUTTON

    @property
    def planned_seconds(self) -> int:
        """Seconds this condition contributes to a time estimate."""
        if self.condition_type == EndConditionType.TIME:
            return self.value
        return 0


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimedStep:
    """An executable step ended by time or lap button.

    ``child_step_id`` is only set on the children of a repeat group and
    points at the group's first child.
    """

    step_id: int
    order: int
    kind: StepKind
    end_condition: EndCondition
    description: str
    target: TargetSpec = field(default_factory=NoTarget)
    child_step_id: int | None = None

    def __post_init__(self) -> None:
        if self.kind == StepKind.REPEAT:
            raise InvalidStepTreeError("TimedStep cannot have kind REPEAT")


@dataclass(frozen=True)
class RepeatGroup:
    """An interval/recovery pair repeated ``iterations`` times."""

    step_id: int
    order: int
    iterations: int
    children: tuple[TimedStep, TimedStep]
    first_child_id: int

    kind = StepKind.REPEAT

    def __post_init__(self) -> None:
        if self.iterations <= 0:
            raise InvalidStepTreeError(
                f"Repeat group {self.step_id} needs iterations > 0, got {self.iterations}"
            )
        if len(self.children) != 2:
            raise InvalidStepTreeError(
                f"Repeat group {self.step_id} needs exactly 2 children, got {len(self.children)}"
            )
        if self.first_child_id != self.children[0].step_id:
            raise InvalidStepTreeError(
                f"Repeat group {self.step_id} first child id {self.first_child_id} "
                f"does not match interval child id {self.children[0].step_id}"
            )

    @property
    def interval(self) -> TimedStep:
        return self.children[0]

    @property
    def recovery(self) -> TimedStep:
        return self.children[1]


Step = Union[TimedStep, RepeatGroup]


def iter_steps(steps):
    """Yield every step depth-first, repeat groups before their children."""
    for step in steps:
        yield step
        if isinstance(step, RepeatGroup):
            yield from iter_steps(step.children)


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WorkoutEstimate:
    """Planned duration (s) and distance (m) of a workout."""

    duration_sec: int
    distance_m: float
    avg_speed_m_per_s: float


@dataclass(frozen=True)
class WorkoutDocument:
    """A complete workout ready for serialization and submission."""

    sport_mode: SportMode
    name: str
    steps: tuple[Step, ...]
    estimated_duration_sec: int
    estimated_distance_m: float
    avg_speed_m_per_s: float
    estimate_type: str = ESTIMATE_TYPE
