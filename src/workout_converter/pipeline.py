"""Conversion pipeline: CSV text → one WorkoutDocument per valid row.

Rows are converted strictly in input order and in isolation: each row
gets fresh step counters, and a failure in one row is recorded as a
diagnostic without stopping the rows after it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from workout_converter.dialects import COMMA_DIALECT, CsvDialect
from workout_converter.exceptions import EmptyPlanError
from workout_converter.models.enums import DiagnosticKind, SportMode
from workout_converter.models.plan import Diagnostic, PlanRows
from workout_converter.models.steps import WorkoutDocument, iter_steps
from workout_converter.parsing.plan_reader import read_plan
from workout_converter.parsing.row_parser import parse_row
from workout_converter.workout_builder.assembler import assemble_document
from workout_converter.workout_builder.builder import StepBuilder
from workout_converter.workout_builder.estimator import estimate_workout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowConversion:
    """Outcome for one data row. ``document`` is None when the row was dropped."""

    row_number: int
    document: WorkoutDocument | None
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class ConversionResult:
    """All documents and diagnostics for one CSV text."""

    sport_mode: SportMode | None
    documents: tuple[WorkoutDocument, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.documents


def convert_row(
    fields,
    row_number: int,
    sport_mode: SportMode = SportMode.RUNNING,
    dialect: CsvDialect = COMMA_DIALECT,
) -> RowConversion:
    """Parse, build, estimate and assemble a single tokenized row."""
    parsed = parse_row(fields, row_number)
    if parsed.workout is None:
        return RowConversion(row_number, None, parsed.diagnostics)

    steps = StepBuilder(sport_mode).build(parsed.workout)
    estimate = estimate_workout(steps, sport_mode, dialect)
    document = assemble_document(parsed.workout, sport_mode, steps, estimate)
    logger.info(
        "Built workout %r (steps: %d, %d s)",
        document.name,
        sum(1 for _ in iter_steps(document.steps)),
        document.estimated_duration_sec,
    )
    return RowConversion(row_number, document, parsed.diagnostics)


def iter_conversions(
    text: str,
    dialect: CsvDialect = COMMA_DIALECT,
) -> Iterator[RowConversion]:
    """Lazily convert *text* row by row.

    Stop iterating to stop converting; nothing is built ahead of the caller.

    Raises:
        EmptyPlanError: on the first ``next()`` if *text* has no non-empty lines.
    """
    yield from _convert_plan(read_plan(text, dialect), dialect)


def _convert_plan(plan: PlanRows, dialect: CsvDialect) -> Iterator[RowConversion]:
    for line_index, fields in plan.numbered():
        row_number = line_index + 1
        try:
            outcome = convert_row(fields, row_number, plan.sport_mode, dialect)
        except Exception as exc:
            logger.exception("Row %d: conversion failed", row_number)
            outcome = RowConversion(
                row_number,
                None,
                (Diagnostic(
                    DiagnosticKind.ROW_FAILED,
                    f"Row {row_number}: conversion failed: {exc}",
                    row_number,
                ),),
            )
        yield outcome


def convert_csv_text(text: str, dialect: CsvDialect = COMMA_DIALECT) -> ConversionResult:
    """Convert a whole CSV text. Empty input yields an empty result with a diagnostic."""
    try:
        plan = read_plan(text, dialect)
    except EmptyPlanError as exc:
        logger.warning("Nothing to process: %s", exc)
        return ConversionResult(
            sport_mode=None,
            diagnostics=(Diagnostic(DiagnosticKind.EMPTY_INPUT, str(exc)),),
        )

    documents: list[WorkoutDocument] = []
    diagnostics: list[Diagnostic] = []
    for outcome in _convert_plan(plan, dialect):
        diagnostics.extend(outcome.diagnostics)
        if outcome.document is not None:
            documents.append(outcome.document)

    return ConversionResult(
        sport_mode=plan.sport_mode,
        documents=tuple(documents),
        diagnostics=tuple(diagnostics),
    )
