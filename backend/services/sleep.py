"""
Sleep aggregation: nightly series, weekly average, monthly averages and the
quality distribution. Quality thresholds are fixed: <6h Poor, [6,7) Fair,
[7,8) Good, >=8h Excellent.
"""
from collections.abc import Iterable
from datetime import date

from core.dates import DateRange, day_label, last_days, month_label
from schemas.health import MetricType
from schemas.reports import QualityCount, SeriesPoint, SleepNight, SleepReport
from services.bucketing import bucket, count, filter_by_range, mean
from services.decoding import MetricRecord, NumericReading, numeric_readings
from services.progress import round_half_up_tenths

DEFAULT_SLEEP_TARGET = 8.0
MONTHS_SHOWN = 6
WEEK_DAYS = 7

_QUALITY_LABELS = {
    "Poor": "Poor (<6h)",
    "Fair": "Fair (6-7h)",
    "Good": "Good (7-8h)",
    "Excellent": "Excellent (>8h)",
}


def sleep_quality(hours: float) -> str:
    if hours < 6:
        return "Poor"
    if hours < 7:
        return "Fair"
    if hours < 8:
        return "Good"
    return "Excellent"


def weekly_average(readings: list[NumericReading], today: date) -> float | None:
    """Mean over the 7 calendar days ending today (inclusive), None if empty."""
    window = last_days(WEEK_DAYS, today)
    values = [r.value for r in readings if window.contains(r.date)]
    if not values:
        return None
    return sum(values) / len(values)


def format_hours(hours: float | None) -> str:
    if hours is None:
        return "No data"
    return f"{round_half_up_tenths(hours):.1f}h"


def sleep_report(
    records: Iterable[MetricRecord],
    today: date,
    target_sleep: float | None = None,
    date_range: DateRange | None = None,
) -> SleepReport:
    target = target_sleep or DEFAULT_SLEEP_TARGET
    all_readings = numeric_readings(records, MetricType.SLEEP.value)
    readings = filter_by_range(all_readings, lambda r: r.date, date_range)

    def night(r: NumericReading) -> SleepNight:
        return SleepNight(
            label=day_label(r.date),
            hours=r.value,
            target=target,
            quality=sleep_quality(r.value),
        )

    week = last_days(WEEK_DAYS, today)
    monthly = bucket(
        readings, lambda r: r.date, lambda r: month_label(r.date), lambda r: r.value, mean
    )
    quality = bucket(
        readings,
        lambda r: r.date,
        lambda r: _QUALITY_LABELS[sleep_quality(r.value)],
        lambda r: r,
        count,
    )
    last_night = all_readings[-1].value if all_readings else None
    weekly = weekly_average(all_readings, today)

    return SleepReport(
        nights=[night(r) for r in readings],
        last_week=[night(r) for r in all_readings if week.contains(r.date)],
        monthly_average=[
            SeriesPoint(label=label, value=round(value, 2))
            for label, value in monthly[-MONTHS_SHOWN:]
        ],
        quality_distribution=[
            QualityCount(quality=label, count=n) for label, n in quality
        ],
        last_night=last_night,
        achieved_target=last_night is not None and last_night >= target,
        weekly_average=weekly,
        weekly_average_display=format_hours(weekly),
        target=target,
    )
