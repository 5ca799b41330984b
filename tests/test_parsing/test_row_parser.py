"""Tests for the row parser and the zero-fallback integer policy."""

from __future__ import annotations

import pytest

from workout_converter.models.enums import DiagnosticKind
from workout_converter.models.plan import SegmentSpec
from workout_converter.parsing.row_parser import parse_int_or_zero, parse_row


class TestParseIntOrZero:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("300", 300),
            (" 42 ", 42),
            ("12s", 12),
            ("3.9", 3),
            ("-5", -5),
            ("+7", 7),
            ("", 0),
            ("abc", 0),
            ("s12", 0),
            ("\u0663\u0660\u0660", 0),
            ("\uff11\uff12", 0),
            (None, 0),
        ],
    )
    def test_policy(self, value, expected):
        assert parse_int_or_zero(value) == expected


class TestRowTooShort:
    def test_three_fields_skipped(self):
        parsed = parse_row(["Run", "1", "300"], row_number=4)
        assert parsed.workout is None
        assert len(parsed.diagnostics) == 1
        diag = parsed.diagnostics[0]
        assert diag.kind == DiagnosticKind.ROW_TOO_SHORT
        assert diag.row_number == 4

    def test_four_fields_is_enough(self):
        parsed = parse_row(["Run", "0", "300", "300"], row_number=1)
        assert parsed.workout is not None
        assert parsed.workout.segments == ()
        assert parsed.diagnostics == ()


class TestFields:
    def test_scenario_row(self):
        fields = "Interval Training,2,300,0,Zone2,300,0,0,Zone5,120,30,5".split(",")
        workout = parse_row(fields, 1).workout
        assert workout.name == "Interval Training"
        assert workout.warmup_sec == 300
        assert workout.cooldown_sec == 0
        assert workout.segments == (
            SegmentSpec("Zone2", 300, 0, 0),
            SegmentSpec("Zone5", 120, 30, 5),
        )

    def test_non_numeric_fields_default_to_zero(self):
        fields = ["Run", "1", "soon", "n/a", "Tempo", "long", "x", "many"]
        workout = parse_row(fields, 1).workout
        assert workout.warmup_sec == 0
        assert workout.cooldown_sec == 0
        assert workout.segments == (SegmentSpec("Tempo", 0, 0, 0),)

    def test_non_numeric_segment_count_means_no_segments(self):
        fields = ["Run", "two", "300", "300", "Tempo", "600", "0", "0"]
        workout = parse_row(fields, 1).workout
        assert workout.segments == ()

    def test_negative_values_clamped(self):
        fields = ["Run", "1", "-60", "300", "Tempo", "-1", "-2", "-3"]
        workout = parse_row(fields, 1).workout
        assert workout.warmup_sec == 0
        assert workout.segments == (SegmentSpec("Tempo", 0, 0, 0),)

    def test_empty_segment_name_gets_placeholder(self):
        fields = ["Run", "2", "0", "0", "A", "60", "0", "0", "", "60", "0", "0"]
        workout = parse_row(fields, 1).workout
        assert [s.name for s in workout.segments] == ["A", "Step2"]

    def test_empty_workout_name_gets_placeholder(self):
        workout = parse_row(["", "0", "0", "0"], row_number=3).workout
        assert workout.name == "Workout-2"

    def test_extra_fields_beyond_count_ignored(self):
        fields = ["Run", "1", "0", "0", "A", "60", "0", "0", "B", "60", "0", "0"]
        workout = parse_row(fields, 1).workout
        assert len(workout.segments) == 1


class TestIncompleteSegments:
    def test_incomplete_segment_skipped_with_diagnostic(self):
        fields = ["Run", "2", "300", "300", "Zone2", "600", "0", "0", "Zone4", "120"]
        parsed = parse_row(fields, row_number=2)
        assert parsed.workout.segments == (SegmentSpec("Zone2", 600, 0, 0),)
        assert len(parsed.diagnostics) == 1
        diag = parsed.diagnostics[0]
        assert diag.kind == DiagnosticKind.SEGMENT_INCOMPLETE
        assert diag.row_number == 2
        assert diag.segment_number == 2

    def test_every_missing_segment_reported(self):
        fields = ["Run", "3", "300", "300", "Zone2", "600", "0", "0"]
        parsed = parse_row(fields, row_number=1)
        assert len(parsed.workout.segments) == 1
        assert [d.segment_number for d in parsed.diagnostics] == [2, 3]

    def test_segment_needs_all_four_fields(self):
        fields = ["Run", "1", "0", "0", "Zone2", "600", "0"]
        parsed = parse_row(fields, row_number=1)
        assert parsed.workout.segments == ()
        assert parsed.diagnostics[0].kind == DiagnosticKind.SEGMENT_INCOMPLETE
