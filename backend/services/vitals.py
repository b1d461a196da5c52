"""
Weight, blood pressure and heart rate series with headline statistics.
Pure functions over already-fetched HealthMetric records.
"""
from collections.abc import Iterable

from core.dates import DateRange, day_label
from schemas.health import MetricType
from schemas.reports import (
    BloodPressurePoint,
    BloodPressureReport,
    HeartRateReport,
    SeriesPoint,
    WeightReport,
)
from services.bucketing import filter_by_range
from services.decoding import (
    MetricRecord,
    blood_pressure_readings,
    numeric_readings,
)

HEART_RATE_NORMAL = (60.0, 100.0)  # bpm, display only
BP_SYSTOLIC_NORMAL = (90.0, 120.0)
BP_DIASTOLIC_NORMAL = (60.0, 80.0)


def weight_report(
    records: Iterable[MetricRecord], date_range: DateRange | None = None
) -> WeightReport:
    readings = filter_by_range(
        numeric_readings(records, MetricType.WEIGHT.value), lambda r: r.date, date_range
    )
    points = [SeriesPoint(label=day_label(r.date), value=r.value) for r in readings]
    if not readings:
        return WeightReport(points=[], latest=None, change_percent=0.0, delta=0.0)

    first = readings[0].value
    latest = readings[-1].value
    change = (latest - first) / first * 100 if first else 0.0
    return WeightReport(
        points=points,
        latest=latest,
        change_percent=round(change, 1),
        delta=round(latest - first, 1),
    )


def blood_pressure_trend(readings: list) -> str:
    """
    "rising"/"falling"/"stable" from the latest two readings only.
    Systolic decides; diastolic breaks a systolic tie.
    """
    if len(readings) < 2:
        return "stable"
    prev, last = readings[-2], readings[-1]
    for attr in ("systolic", "diastolic"):
        diff = getattr(last, attr) - getattr(prev, attr)
        if diff > 0:
            return "rising"
        if diff < 0:
            return "falling"
    return "stable"


def blood_pressure_report(
    records: Iterable[MetricRecord], date_range: DateRange | None = None
) -> BloodPressureReport:
    readings = filter_by_range(
        blood_pressure_readings(records), lambda r: r.date, date_range
    )
    points = [
        BloodPressurePoint(
            label=day_label(r.date), systolic=r.systolic, diastolic=r.diastolic
        )
        for r in readings
    ]
    latest = readings[-1] if readings else None
    return BloodPressureReport(
        points=points,
        latest_systolic=latest.systolic if latest else None,
        latest_diastolic=latest.diastolic if latest else None,
        trend=blood_pressure_trend(readings),
        normal_range=(
            f"{BP_SYSTOLIC_NORMAL[0]:g}-{BP_SYSTOLIC_NORMAL[1]:g}/"
            f"{BP_DIASTOLIC_NORMAL[0]:g}-{BP_DIASTOLIC_NORMAL[1]:g} mmHg"
        ),
    )


def heart_rate_status(bpm: float | None) -> str | None:
    if bpm is None:
        return None
    low, high = HEART_RATE_NORMAL
    if bpm < low:
        return "low"
    if bpm > high:
        return "high"
    return "normal"


def heart_rate_report(
    records: Iterable[MetricRecord], date_range: DateRange | None = None
) -> HeartRateReport:
    readings = filter_by_range(
        numeric_readings(records, MetricType.HEART_RATE.value),
        lambda r: r.date,
        date_range,
    )
    latest = readings[-1].value if readings else None
    return HeartRateReport(
        points=[SeriesPoint(label=day_label(r.date), value=r.value) for r in readings],
        latest=latest,
        status=heart_rate_status(latest),
        normal_range=f"{HEART_RATE_NORMAL[0]:g}-{HEART_RATE_NORMAL[1]:g} bpm",
    )
