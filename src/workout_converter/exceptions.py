"""Exception hierarchy for the conversion core."""

from __future__ import annotations


class WorkoutConverterError(Exception):
    """Base exception for all workout_converter errors."""


class EmptyPlanError(WorkoutConverterError):
    """The CSV text contains no non-empty lines."""


class RowParseError(WorkoutConverterError):
    """A data row cannot be interpreted as a workout."""

    def __init__(self, message: str, row_number: int | None = None) -> None:
        super().__init__(message)
        self.row_number = row_number


class InvalidStepTreeError(WorkoutConverterError):
    """A step tree has inconsistent ids or a malformed repeat group."""
