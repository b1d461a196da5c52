"""
Progress and percentage helpers.

A missing or zero target is a normal state (the user has not set a goal yet)
and always reads as 0% progress.
"""
import math

from services.decoding import ParseError, parse_number

WEIGHT_CATEGORY = "weight"


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_half_up_tenths(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def percentage_of_target(current: float | None, target: float | None) -> int:
    """min(100, round(current / target * 100)), 0 without a usable target."""
    if current is None or not target:
        return 0
    return round_half_up(clamp(current / target * 100))


def _to_number(raw: object) -> float | None:
    try:
        return parse_number(raw, "goal")
    except ParseError:
        return None


def goal_progress(
    current_value: object,
    target_value: object,
    category: str,
    initial_value: object = None,
) -> int:
    """
    Progress of a goal as an integer in [0, 100].

    Values may be numeric text. For the weight category progress runs from the
    initial value toward the target: (initial - current) / (initial - target).
    Without an explicit initial value, the larger of current/target is taken
    as the initial value and the smaller as the target.
    """
    current = _to_number(current_value)
    target = _to_number(target_value)
    if current is None or target is None or target == 0:
        return 0

    if category == WEIGHT_CATEGORY:
        initial = _to_number(initial_value)
        if initial is None:
            initial, target = max(current, target), min(current, target)
        span = initial - target
        if span == 0:
            return 0
        raw = (initial - current) / span * 100
    else:
        raw = current / target * 100
    return round_half_up(clamp(raw))


def progress_description(progress: float | None) -> str:
    value = progress or 0
    if value >= 80:
        return "Ahead of schedule"
    if value >= 60:
        return "On track"
    return "Slightly behind"
