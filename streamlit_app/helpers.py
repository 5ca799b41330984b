"""Utility helpers bridging the Streamlit UI and the workout converter.

Pure formatting functions; no Streamlit calls here.
"""

from __future__ import annotations

from workout_converter.models.enums import StepKind
from workout_converter.models.steps import EndCondition, PowerZone, RepeatGroup, TimedStep

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: int) -> str:
    """Convert seconds to a human string. e.g. 5400 -> '1h 30m', 90 -> '1m 30s'."""
    if seconds <= 0:
        return "0s"
    h, rest = divmod(int(seconds), 3600)
    m, s = divmod(rest, 60)
    parts = []
    if h:
        parts.append(f"{h}h")
    if m:
        parts.append(f"{m}m")
    if s:
        parts.append(f"{s}s")
    return " ".join(parts)


def format_distance(meters: float) -> str:
    """e.g. 5292.0 -> '5.29 km'."""
    return f"{meters / 1000.0:.2f} km"


def format_end_condition(end_condition: EndCondition) -> str:
    if end_condition.is_lap_button:
        return "Lap button"
    return format_duration(end_condition.value)


def format_target(step: TimedStep) -> str:
    if isinstance(step.target, PowerZone):
        return f"Power zone {step.target.zone_number}"
    return ""


def describe_step(step) -> str:
    """One-line summary of a step, e.g. 'Interval | 2m | Zone5'."""
    if isinstance(step, RepeatGroup):
        return f"{STEP_LABELS[StepKind.REPEAT]} | {step.iterations}x"
    parts = [STEP_LABELS.get(step.kind, step.kind.name), format_end_condition(step.end_condition)]
    if step.description:
        parts.append(step.description)
    target = format_target(step)
    if target:
        parts.append(target)
    return " | ".join(parts)


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

STEP_COLORS: dict[StepKind, str] = {
    StepKind.WARMUP: "#FF8C00",     # orange
    StepKind.COOLDOWN: "#4A90D9",   # blue
    StepKind.INTERVAL: "#2ECC71",   # green
    StepKind.RECOVERY: "#AED6F1",   # pastel blue
    StepKind.REPEAT: "#D7BDE2",     # lavender
}

STEP_LABELS: dict[StepKind, str] = {
    StepKind.WARMUP: "Warmup",
    StepKind.COOLDOWN: "Cooldown",
    StepKind.INTERVAL: "Interval",
    StepKind.RECOVERY: "Recovery",
    StepKind.REPEAT: "Repeat",
}
