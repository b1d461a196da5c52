from collections import defaultdict
from collections.abc import Iterable

from core.dates import DateRange, as_date
from schemas.health import TimelinePoint, TimelineResponse
from services.bucketing import bucket, collect
from services.decoding import (
    BloodPressureReading,
    MetricReading,
    MetricRecord,
    decode_metrics,
)


def _series_values(reading: MetricReading) -> list[tuple[str, float]]:
    if isinstance(reading, BloodPressureReading):
        return [("systolic", reading.systolic), ("diastolic", reading.diastolic)]
    return [(reading.type, reading.value)]


def get_timeline(
    records: Iterable[MetricRecord],
    date_range: DateRange,
) -> TimelineResponse:
    """
    Return daily-bucketed, time-aligned timeline points from HealthMetric records.
    Multiple readings per (day, series) are averaged. Date range inclusive.
    """
    by_day = bucket(
        decode_metrics(records),
        lambda r: r.date,
        lambda r: as_date(r.date).isoformat(),
        lambda r: r,
        collect,
        date_range=date_range,
    )

    points = []
    for day, readings in by_day:
        sums: dict[str, list[float]] = defaultdict(list)
        for reading in readings:
            for name, value in _series_values(reading):
                sums[name].append(value)
        points.append(
            TimelinePoint(
                date=day,
                metrics={name: sum(vals) / len(vals) for name, vals in sums.items()},
            )
        )
    return TimelineResponse(points=points)
