"""Plan reader — splits CSV text into data rows and detects the sport mode.

Layout:
    [header row]        first field contains "name", a field is "segments"/"abschnitte"
    [marker row]        first field contains "bike" → cycling
    data rows...
"""

from __future__ import annotations

import logging
import re

from workout_converter.dialects import COMMA_DIALECT, CsvDialect
from workout_converter.exceptions import EmptyPlanError
from workout_converter.models.enums import SportMode
from workout_converter.models.plan import PlanRows
from workout_converter.parsing.tokenizer import tokenize_line

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split on LF or CRLF only, trim, drop empty lines.

    Other Unicode line separators stay inside their field.
    """
    lines = (line.strip() for line in _LINE_BREAK.split(text))
    return [line for line in lines if line]


def is_header_row(fields: list[str], dialect: CsvDialect = COMMA_DIALECT) -> bool:
    if not fields:
        return False
    lowered = [f.lower() for f in fields]
    return "name" in lowered[0] and any(k in lowered for k in dialect.header_keywords)


def is_sport_marker_row(fields: list[str], dialect: CsvDialect = COMMA_DIALECT) -> bool:
    return bool(fields) and dialect.marker_keyword in fields[0].lower()


def read_plan(text: str, dialect: CsvDialect = COMMA_DIALECT) -> PlanRows:
    """Read CSV *text* into tokenized data rows.

    Raises:
        EmptyPlanError: if *text* has no non-empty lines.
    """
    lines = split_lines(text)
    if not lines:
        raise EmptyPlanError("No CSV lines found")

    start_index = 0
    has_header = is_header_row(tokenize_line(lines[0], dialect.delimiter), dialect)
    if has_header:
        logger.debug("Header row detected: %s", lines[0])
        start_index += 1

    sport_mode = dialect.default_sport
    has_marker = False
    if start_index < len(lines):
        fields = tokenize_line(lines[start_index], dialect.delimiter)
        if is_sport_marker_row(fields, dialect):
            logger.debug("Sport marker row detected: %s", lines[start_index])
            sport_mode = SportMode.CYCLING
            has_marker = True
            start_index += 1

    rows = tuple(
        tuple(tokenize_line(line, dialect.delimiter)) for line in lines[start_index:]
    )
    return PlanRows(
        sport_mode=sport_mode,
        start_index=start_index,
        rows=rows,
        has_header=has_header,
        has_sport_marker=has_marker,
    )
