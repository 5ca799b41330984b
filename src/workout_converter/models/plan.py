"""Plan models — what the CSV says, before any steps are built."""

from __future__ import annotations

from dataclasses import dataclass, field

from workout_converter.models.enums import DiagnosticKind, SportMode


@dataclass(frozen=True)
class SegmentSpec:
    """One training block from a CSV row.

    ``repeats == 0`` is a single steady step; ``repeats > 0`` is an
    interval/recovery pair repeated that many times.
    """

    name: str
    duration_sec: int = 0
    pause_sec: int = 0
    repeats: int = 0

    @property
    def is_repeat(self) -> bool:
        return self.repeats > 0


@dataclass(frozen=True)
class WorkoutSpec:
    """A parsed data row: name, warmup/cooldown and ordered segments."""

    name: str
    warmup_sec: int = 0
    cooldown_sec: int = 0
    segments: tuple[SegmentSpec, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable problem found while converting a plan.

    ``row_number`` is the 1-based position among non-empty lines;
    ``segment_number`` is 1-based and only set for segment problems.
    """

    kind: DiagnosticKind
    message: str
    row_number: int | None = None
    segment_number: int | None = None


@dataclass(frozen=True)
class ParsedRow:
    """Row parser output. ``workout`` is None when the row was skipped."""

    row_number: int
    workout: WorkoutSpec | None
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class PlanRows:
    """Plan reader output: tokenized data rows plus detected sport mode.

    ``start_index`` is the 0-based index (among non-empty lines) of the
    first data row; ``rows[i]`` belongs to line ``start_index + i``.
    """

    sport_mode: SportMode
    start_index: int
    rows: tuple[tuple[str, ...], ...]
    has_header: bool = False
    has_sport_marker: bool = False

    def numbered(self):
        """Yield ``(line_index, fields)`` for every data row."""
        for offset, fields in enumerate(self.rows):
            yield self.start_index + offset, fields
