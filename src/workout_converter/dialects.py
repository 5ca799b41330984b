"""CSV dialect presets.

The plan format exists in a comma-separated and a semicolon-separated
variant. The delimiter and the default speeds used for distance
estimates are configuration, not detected from the file.
"""

from __future__ import annotations

from dataclasses import dataclass

from workout_converter.models.enums import (
    DEFAULT_CYCLING_SPEED_M_PER_S,
    DEFAULT_RUNNING_SPEED_M_PER_S,
    SportMode,
)


@dataclass(frozen=True)
class CsvDialect:
    """Delimiter, header/marker keywords and default speeds for one CSV variant."""

    name: str
    delimiter: str = ","
    header_keywords: tuple[str, ...] = ("segments", "abschnitte")
    marker_keyword: str = "bike"
    running_speed_m_per_s: float = DEFAULT_RUNNING_SPEED_M_PER_S
    cycling_speed_m_per_s: float = DEFAULT_CYCLING_SPEED_M_PER_S
    default_sport: SportMode = SportMode.RUNNING

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1 or self.delimiter == '"':
            raise ValueError(f"Invalid delimiter: {self.delimiter!r}")

    def speed_for(self, sport_mode: SportMode) -> float:
        """Default average speed (m/s) for *sport_mode*."""
        if sport_mode == SportMode.CYCLING:
            return self.cycling_speed_m_per_s
        return self.running_speed_m_per_s


COMMA_DIALECT = CsvDialect(name="comma", delimiter=",")
SEMICOLON_DIALECT = CsvDialect(name="semicolon", delimiter=";")

_DIALECTS = {d.name: d for d in (COMMA_DIALECT, SEMICOLON_DIALECT)}


def get_dialect(name: str) -> CsvDialect:
    """Look up a preset by name (case-insensitive)."""
    try:
        return _DIALECTS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown CSV dialect {name!r}; expected one of {sorted(_DIALECTS)}"
        ) from None


def available_dialects() -> list[str]:
    return sorted(_DIALECTS)
