"""Target resolver — intensity target from a step's display name.

Matching rule (cycling only): a whole word ``z`` or ``zone``, optional
whitespace, then a single digit 1-9, case-insensitive. ``"Zone3 Push"``,
``"z 4"`` and ``"Easy Z1"`` match; ``"Zone10"`` and ``"Z0"`` do not.
Running workouts never get a target.
"""

from __future__ import annotations

import re

from workout_converter.models.enums import SportMode
from workout_converter.models.steps import NoTarget, PowerZone, TargetSpec

_ZONE_PATTERN = re.compile(r"\b(?:zone|z)\s*([1-9])\b", re.IGNORECASE)


def find_zone_number(name: str) -> int | None:
    """Return the first zone number named in *name*, or None."""
    match = _ZONE_PATTERN.search(name or "")
    if match is None:
        return None
    return int(match.group(1))


def resolve_target(name: str, sport_mode: SportMode) -> TargetSpec:
    """Map a step name to its target for *sport_mode*."""
    if sport_mode != SportMode.CYCLING:
        return NoTarget()
    zone = find_zone_number(name)
    if zone is None:
        return NoTarget()
    return PowerZone(zone)
