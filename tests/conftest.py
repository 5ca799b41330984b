"""Shared test fixtures: CSV plans, workout specs, built documents."""

from __future__ import annotations

import pytest

from workout_converter.models.enums import SportMode
from workout_converter.models.plan import SegmentSpec, WorkoutSpec
from workout_converter.pipeline import convert_row


@pytest.fixture
def morning_run_spec() -> WorkoutSpec:
    """Warmup 5 min, one steady 20 min segment, cooldown 5 min."""
    return WorkoutSpec(
        name="MorningRun",
        warmup_sec=300,
        cooldown_sec=300,
        segments=(SegmentSpec(name="Zone5", duration_sec=1200),),
    )


@pytest.fixture
def interval_spec() -> WorkoutSpec:
    """Steady Zone2 block, then 5x (2 min Zone5 + 30 s pause), lap-button cooldown."""
    return WorkoutSpec(
        name="Interval Training",
        warmup_sec=300,
        cooldown_sec=0,
        segments=(
            SegmentSpec(name="Zone2", duration_sec=300),
            SegmentSpec(name="Zone5", duration_sec=120, pause_sec=30, repeats=5),
        ),
    )


@pytest.fixture
def cycling_plan_csv() -> str:
    """Header + Bike marker + two cycling workouts."""
    return (
        "Name,Abschnitte,Warmup,Cooldown\n"
        "Bike\n"
        "Sweet Spot,2,600,300,Zone3 Push,900,0,0,Z4 Efforts,300,120,3\n"
        "Recovery Spin,1,0,0,Easy Z2,1800,0,0\n"
    )


@pytest.fixture
def interval_document():
    """Built running document for the interval training row."""
    fields = "Interval Training,2,300,0,Zone2,300,0,0,Zone5,120,30,5".split(",")
    return convert_row(fields, 1, SportMode.RUNNING).document
