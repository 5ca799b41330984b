"""StepBuilder — expands a WorkoutSpec into a Garmin step tree.

Ids and display orders come from one ``StepCounter`` per workout, so
every workout starts at 1 and numbering runs depth-first across the
whole tree (a repeat group is numbered before its children).
"""

from __future__ import annotations

from dataclasses import dataclass

from workout_converter.models.enums import EASY_STEP_DESCRIPTION, SportMode, StepKind
from workout_converter.models.plan import SegmentSpec, WorkoutSpec
from workout_converter.models.steps import (
    EndCondition,
    RepeatGroup,
    Step,
    TimedStep,
)
from workout_converter.workout_builder.target_resolver import resolve_target


@dataclass
class StepCounter:
    """Next step id and display order for one workout."""

    next_id: int = 1
    next_order: int = 1

    def allocate(self) -> tuple[int, int]:
        """Consume and return the next ``(step_id, order)`` pair."""
        allocated = (self.next_id, self.next_order)
        self.next_id += 1
        self.next_order += 1
        return allocated


class StepBuilder:
    """Builds the step tree for workouts of one sport mode.

    Usage::

        builder = StepBuilder(SportMode.CYCLING)
        steps = builder.build(workout_spec)
    """

    def __init__(self, sport_mode: SportMode = SportMode.RUNNING) -> None:
        self.sport_mode = sport_mode

    def build(self, workout: WorkoutSpec) -> tuple[Step, ...]:
        """Build the top-level steps of *workout*.

        Algorithm:
        1. Warmup step, if ``warmup_sec > 0``
        2. Per segment: a repeat group (``repeats > 0``) or one steady step
        3. Cooldown step, always: time-based, or lap button when ``cooldown_sec == 0``
        """
        counter = StepCounter()
        steps: list[Step] = []

        if workout.warmup_sec > 0:
            steps.append(self._easy_step(
                counter, StepKind.WARMUP, EndCondition.time(workout.warmup_sec),
            ))

        for segment in workout.segments:
            if segment.is_repeat:
                steps.append(self._build_repeat_group(counter, segment))
            else:
                steps.append(self._build_steady_step(counter, segment))

        steps.append(self._easy_step(
            counter, StepKind.COOLDOWN, EndCondition.time_or_lap(workout.cooldown_sec),
        ))
        return tuple(steps)

    def _easy_step(
        self,
        counter: StepCounter,
        kind: StepKind,
        end_condition: EndCondition,
        child_step_id: int | None = None,
    ) -> TimedStep:
        """Warmup, cooldown or recovery step described as zone 1."""
        step_id, order = counter.allocate()
        return TimedStep(
            step_id=step_id,
            order=order,
            kind=kind,
            end_condition=end_condition,
            description=EASY_STEP_DESCRIPTION,
            target=resolve_target(EASY_STEP_DESCRIPTION, self.sport_mode),
            child_step_id=child_step_id,
        )

    def _build_steady_step(self, counter: StepCounter, segment: SegmentSpec) -> TimedStep:
        step_id, order = counter.allocate()
        return TimedStep(
            step_id=step_id,
            order=order,
            kind=StepKind.INTERVAL,
            end_condition=EndCondition.time_or_lap(segment.duration_sec),
            description=segment.name,
            target=resolve_target(segment.name, self.sport_mode),
        )

    def _build_repeat_group(self, counter: StepCounter, segment: SegmentSpec) -> RepeatGroup:
        """Repeat group of [interval, recovery]; recovery is lap button without a pause."""
        group_id, group_order = counter.allocate()

        interval_id, interval_order = counter.allocate()
        interval = TimedStep(
            step_id=interval_id,
            order=interval_order,
            kind=StepKind.INTERVAL,
            end_condition=EndCondition.time_or_lap(segment.duration_sec),
            description=segment.name,
            target=resolve_target(segment.name, self.sport_mode),
            child_step_id=interval_id,
        )
        recovery = self._easy_step(
            counter,
            StepKind.RECOVERY,
            EndCondition.time_or_lap(segment.pause_sec),
            child_step_id=interval_id,
        )

        return RepeatGroup(
            step_id=group_id,
            order=group_order,
            iterations=segment.repeats,
            children=(interval, recovery),
            first_child_id=interval.step_id,
        )
