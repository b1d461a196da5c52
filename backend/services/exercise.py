"""
Exercise aggregation: per-type totals, calories burned per day, weekday
activity and the number of active days.
"""
from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from core.dates import DateRange, as_date, day_label
from schemas.reports import (
    ExerciseReport,
    ExerciseTypeTotal,
    SeriesPoint,
    WeekdayActivity,
)
from services.bucketing import bucket, collect, filter_by_range, total

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class ExerciseRecord(Protocol):
    type: str
    duration: int
    distance: float | None
    calories: int | None
    date: datetime


def weekday_name(value: datetime) -> str:
    # datetime.weekday(): Monday == 0
    return WEEKDAYS[(value.weekday() + 1) % 7]


def active_days(logs: Iterable[ExerciseRecord]) -> int:
    return len({as_date(log.date) for log in logs})


def exercise_report(
    logs: Iterable[ExerciseRecord], date_range: DateRange | None = None
) -> ExerciseReport:
    selected = filter_by_range(logs, lambda log: log.date, date_range)

    by_type = bucket(
        selected,
        lambda log: log.date,
        lambda log: log.type.capitalize(),
        lambda log: log,
        collect,
    )
    calories_by_day = bucket(
        selected,
        lambda log: log.date,
        lambda log: as_date(log.date),
        lambda log: log.calories or 0,
        total,
        label=lambda log: day_label(log.date),
    )

    weekly = {day: WeekdayActivity(day=day, minutes=0, calories=0) for day in WEEKDAYS}
    for log in selected:
        slot = weekly[weekday_name(log.date)]
        slot.minutes += log.duration
        slot.calories += log.calories or 0

    return ExerciseReport(
        by_type=[
            ExerciseTypeTotal(
                type=name,
                minutes=sum(log.duration for log in type_logs),
                calories=sum(log.calories or 0 for log in type_logs),
                sessions=len(type_logs),
            )
            for name, type_logs in by_type
        ],
        calories_burned=[
            SeriesPoint(label=label, value=value) for label, value in calories_by_day
        ],
        weekly_activity=list(weekly.values()),
        total_minutes=sum(log.duration for log in selected),
        total_calories=sum(log.calories or 0 for log in selected),
        total_distance=round(sum(log.distance or 0 for log in selected), 1),
        active_days=active_days(selected),
    )
