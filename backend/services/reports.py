"""
Report assembly over the record store.

Records are listed once per type through the RecordStore protocol and handed
to the pure aggregators; nothing here writes.
"""
from dataclasses import dataclass
from datetime import date

from core.dates import DEFAULT_REPORT_RANGE, DateRange, report_range
from db.store import RecordStore
from models import ExerciseLog, HealthMetric, Meal, User
from schemas.reports import HealthScoreResponse, ReportOverview
from services.exercise import exercise_report
from services.health_score import Targets, compute_health_score
from services.nutrition import nutrition_report
from services.sleep import sleep_report
from services.vitals import blood_pressure_report, heart_rate_report, weight_report


@dataclass(frozen=True)
class ReportSources:
    metrics: RecordStore[HealthMetric]
    meals: RecordStore[Meal]
    exercise_logs: RecordStore[ExerciseLog]


@dataclass(frozen=True)
class ReportRecords:
    metrics: list[HealthMetric]
    meals: list[Meal]
    exercise_logs: list[ExerciseLog]


def resolve_range(
    preset: str | None,
    start_date: date | None,
    end_date: date | None,
    today: date,
) -> DateRange:
    """Explicit start/end win over a preset. Raises ValueError on bad input."""
    if start_date is not None or end_date is not None:
        if start_date is None or end_date is None:
            raise ValueError("start_date and end_date must be given together")
        return DateRange(start=start_date, end=end_date)
    return report_range(preset or DEFAULT_REPORT_RANGE, today)


def load_records(sources: ReportSources, user_id: int) -> ReportRecords:
    return ReportRecords(
        metrics=sources.metrics.list(user_id),
        meals=sources.meals.list(user_id),
        exercise_logs=sources.exercise_logs.list(user_id),
    )


def user_targets(user: User) -> Targets:
    return Targets(target_weight=user.target_weight, target_sleep=user.target_sleep)


def health_score(
    records: ReportRecords, user: User, date_range: DateRange
) -> HealthScoreResponse:
    return compute_health_score(
        records.metrics,
        records.exercise_logs,
        records.meals,
        user_targets(user),
        date_range,
    )


def report_overview(
    records: ReportRecords, user: User, date_range: DateRange, today: date
) -> ReportOverview:
    return ReportOverview(
        start_date=date_range.start.isoformat(),
        end_date=date_range.end.isoformat(),
        weight=weight_report(records.metrics, date_range),
        blood_pressure=blood_pressure_report(records.metrics, date_range),
        heart_rate=heart_rate_report(records.metrics, date_range),
        sleep=sleep_report(records.metrics, today, user.target_sleep, date_range),
        nutrition=nutrition_report(records.meals, today, date_range),
        exercise=exercise_report(records.exercise_logs, date_range),
        health_score=health_score(records, user, date_range),
    )
