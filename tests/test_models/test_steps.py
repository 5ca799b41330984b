"""Tests for step tree models."""

from __future__ import annotations

import pytest

from workout_converter.exceptions import InvalidStepTreeError
from workout_converter.models.enums import EndConditionType, StepKind
from workout_converter.models.steps import EndCondition, RepeatGroup, TimedStep, iter_steps


class TestEndCondition:
    def test_time_or_lap(self):
        assert EndCondition.time_or_lap(90) == EndCondition(EndConditionType.TIME, 90)
        assert EndCondition.time_or_lap(0) == EndCondition(EndConditionType.LAP_BUTTON, 0)

    def test_planned_seconds(self):
        assert EndCondition.time(90).planned_seconds == 90
        assert EndCondition.lap_button().planned_seconds == 0


class TestTimedStep:
    def test_rejects_repeat_kind(self):
        with pytest.raises(InvalidStepTreeError):
            TimedStep(1, 1, StepKind.REPEAT, EndCondition.time(60), "x")


class TestIterSteps:
    def test_depth_first_group_before_children(self):
        interval = TimedStep(3, 3, StepKind.INTERVAL, EndCondition.time(60), "A", child_step_id=3)
        recovery = TimedStep(4, 4, StepKind.RECOVERY, EndCondition.lap_button(), "Z1", child_step_id=3)
        steps = (
            TimedStep(1, 1, StepKind.WARMUP, EndCondition.time(60), "Z1"),
            RepeatGroup(2, 2, 2, (interval, recovery), first_child_id=3),
            TimedStep(5, 5, StepKind.COOLDOWN, EndCondition.lap_button(), "Z1"),
        )
        assert [s.step_id for s in iter_steps(steps)] == [1, 2, 3, 4, 5]
