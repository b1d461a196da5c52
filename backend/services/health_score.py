"""
Composite health score from weight, activity, sleep and nutrition.
Deterministic; every sub-score is clamped to [0, 100] before weighting and a
term with no data or no target contributes 0.
"""
from collections.abc import Iterable
from dataclasses import dataclass

from core.dates import DateRange
from schemas.health import MetricType
from schemas.reports import HealthScoreResponse
from services.bucketing import filter_by_range
from services.decoding import MetricRecord, numeric_readings
from services.exercise import ExerciseRecord
from services.nutrition import MealRecord, sum_meals
from services.progress import clamp, round_half_up

WEIGHTS = {"weight": 0.3, "activity": 0.2, "sleep": 0.2, "nutrition": 0.3}

ACTIVITY_CAPACITY_MINUTES = 7 * 30
PROTEIN_PER_KG = 1.2


@dataclass(frozen=True)
class Targets:
    target_weight: float | None = None
    target_sleep: float | None = None


def weight_score(latest_weight: float | None, target_weight: float | None) -> float:
    if latest_weight is None or not target_weight or target_weight <= 0:
        return 0.0
    return clamp(100 - abs(latest_weight - target_weight) / target_weight * 100)


def activity_score(total_minutes: float) -> float:
    return clamp(total_minutes / ACTIVITY_CAPACITY_MINUTES * 100)


def sleep_score(hours: list[float], target_sleep: float | None) -> float:
    if not hours or not target_sleep or target_sleep <= 0:
        return 0.0
    return clamp(sum(hours) / (len(hours) * target_sleep) * 100)


def nutrition_score(protein_grams: float, target_weight: float | None) -> float:
    if protein_grams <= 0 or not target_weight or target_weight <= 0:
        return 0.0
    return clamp(protein_grams / (PROTEIN_PER_KG * target_weight) * 100)


def composite(components: dict[str, float]) -> int:
    raw = sum(components.get(name, 0.0) * weight for name, weight in WEIGHTS.items())
    return int(clamp(round_half_up(raw)))


def compute_health_score(
    metrics: Iterable[MetricRecord],
    exercise_logs: Iterable[ExerciseRecord],
    meals: Iterable[MealRecord],
    targets: Targets,
    date_range: DateRange | None = None,
) -> HealthScoreResponse:
    metrics = list(metrics)
    weights = filter_by_range(
        numeric_readings(metrics, MetricType.WEIGHT.value), lambda r: r.date, date_range
    )
    sleeps = filter_by_range(
        numeric_readings(metrics, MetricType.SLEEP.value), lambda r: r.date, date_range
    )
    logs = filter_by_range(exercise_logs, lambda log: log.date, date_range)
    selected_meals = filter_by_range(meals, lambda m: m.date, date_range)

    components = {
        "weight": weight_score(
            weights[-1].value if weights else None, targets.target_weight
        ),
        "activity": activity_score(sum(log.duration for log in logs)),
        "sleep": sleep_score([r.value for r in sleeps], targets.target_sleep),
        "nutrition": nutrition_score(
            sum_meals(selected_meals).protein, targets.target_weight
        ),
    }
    return HealthScoreResponse(
        score=composite(components),
        components={name: round(value, 1) for name, value in components.items()},
        weights=dict(WEIGHTS),
    )
