"""Row parser — one tokenized CSV row → WorkoutSpec.

Row layout::

    Name,NumSegments,WarmupSec,CooldownSec,[SegName,DurationSec,PauseSec,Reps]*

Problems never abort the plan: a short row is skipped, an incomplete
segment block is skipped, and unparseable numbers read as 0.
"""

from __future__ import annotations

import logging
import re

from workout_converter.models.enums import (
    FIRST_SEGMENT_OFFSET,
    MIN_ROW_FIELDS,
    SEGMENT_FIELDS,
    DiagnosticKind,
)
from workout_converter.models.plan import Diagnostic, ParsedRow, SegmentSpec, WorkoutSpec

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int_or_zero(value: str | None) -> int:
    """Parse the leading integer of *value*; anything else is 0.

    ``"300"`` → 300, ``"12s"`` → 12, ``"3.9"`` → 3, ``""``/``"abc"``/None → 0.
    """
    if not value:
        return 0
    match = _LEADING_INT.match(value)
    if match is None:
        return 0
    return int(match.group(1))


def _non_negative(value: str | None) -> int:
    return max(parse_int_or_zero(value), 0)


def parse_row(fields, row_number: int) -> ParsedRow:
    """Parse *fields* (one tokenized row) into a WorkoutSpec.

    Args:
        fields: Tokenized row.
        row_number: 1-based line number among non-empty lines, used in
            diagnostics and for the fallback name ``Workout-<row_number - 1>``.
    """
    if len(fields) < MIN_ROW_FIELDS:
        message = f"Row {row_number}: too few columns ({len(fields)} < {MIN_ROW_FIELDS}), skipped"
        logger.warning(message)
        return ParsedRow(
            row_number=row_number,
            workout=None,
            diagnostics=(Diagnostic(DiagnosticKind.ROW_TOO_SHORT, message, row_number),),
        )

    name = fields[0] or f"Workout-{row_number - 1}"
    num_segments = _non_negative(fields[1])
    warmup_sec = _non_negative(fields[2])
    cooldown_sec = _non_negative(fields[3])

    segments: list[SegmentSpec] = []
    diagnostics: list[Diagnostic] = []
    for s in range(num_segments):
        base = FIRST_SEGMENT_OFFSET + s * SEGMENT_FIELDS
        if base + SEGMENT_FIELDS > len(fields):
            message = f"Row {row_number}: segment {s + 1} incomplete, skipped"
            logger.warning(message)
            diagnostics.append(
                Diagnostic(DiagnosticKind.SEGMENT_INCOMPLETE, message, row_number, s + 1)
            )
            continue
        segments.append(SegmentSpec(
            name=fields[base] or f"Step{s + 1}",
            duration_sec=_non_negative(fields[base + 1]),
            pause_sec=_non_negative(fields[base + 2]),
            repeats=_non_negative(fields[base + 3]),
        ))

    workout = WorkoutSpec(
        name=name,
        warmup_sec=warmup_sec,
        cooldown_sec=cooldown_sec,
        segments=tuple(segments),
    )
    return ParsedRow(row_number=row_number, workout=workout, diagnostics=tuple(diagnostics))
