"""
Decoding of the free-text HealthMetric.value field.

Each metric type has its own value schema. Numeric types are parsed strictly
and signal ParseError; blood pressure is lenient and falls back to a default
because older records may carry an empty or malformed payload.
Everything here is pure: the same input always decodes to the same output.
"""
import json
import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from schemas.health import MetricType

logger = logging.getLogger(__name__)

NUMERIC_TYPES = frozenset(
    {
        MetricType.WEIGHT.value,
        MetricType.HEART_RATE.value,
        MetricType.SLEEP.value,
        MetricType.STEPS.value,
    }
)


class ParseError(ValueError):
    def __init__(self, metric_type: str, raw: object) -> None:
        super().__init__(f"Cannot parse {metric_type} value: {raw!r}")
        self.metric_type = metric_type
        self.raw = raw


class MetricRecord(Protocol):
    type: str
    value: str
    date: datetime


@dataclass(frozen=True)
class BloodPressure:
    systolic: float
    diastolic: float


BP_FALLBACK = BloodPressure(systolic=0.0, diastolic=0.0)


@dataclass(frozen=True)
class NumericReading:
    """weight, heart_rate, sleep or steps."""

    type: str
    date: datetime
    value: float


@dataclass(frozen=True)
class BloodPressureReading:
    date: datetime
    systolic: float
    diastolic: float
    type: str = MetricType.BLOOD_PRESSURE.value


MetricReading = NumericReading | BloodPressureReading


def parse_number(raw: object, metric_type: str = "numeric") -> float:
    """Parse a finite float from text. Raises ParseError otherwise."""
    if isinstance(raw, bool) or raw is None:
        raise ParseError(metric_type, raw)
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        try:
            value = float(str(raw).strip())
        except ValueError:
            raise ParseError(metric_type, raw) from None
    if not math.isfinite(value):
        raise ParseError(metric_type, raw)
    return value


def decode_blood_pressure(
    raw: object, fallback: BloodPressure = BP_FALLBACK
) -> BloodPressure:
    """Decode {"systolic": n, "diastolic": n}; anything else yields `fallback`."""
    try:
        payload = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    except ValueError:
        return fallback
    if not isinstance(payload, dict):
        return fallback
    try:
        return BloodPressure(
            systolic=parse_number(payload.get("systolic"), "systolic"),
            diastolic=parse_number(payload.get("diastolic"), "diastolic"),
        )
    except ParseError:
        return fallback


def encode_blood_pressure(systolic: float, diastolic: float) -> str:
    return json.dumps({"systolic": systolic, "diastolic": diastolic})


def decode_metric(
    record: MetricRecord, bp_fallback: BloodPressure = BP_FALLBACK
) -> MetricReading:
    """
    Decode one record into its typed reading.
    Raises ParseError for malformed numeric values and for unknown types.
    """
    if record.type == MetricType.BLOOD_PRESSURE.value:
        bp = decode_blood_pressure(record.value, bp_fallback)
        return BloodPressureReading(
            date=record.date, systolic=bp.systolic, diastolic=bp.diastolic
        )
    if record.type in NUMERIC_TYPES:
        return NumericReading(
            type=record.type,
            date=record.date,
            value=parse_number(record.value, record.type),
        )
    raise ParseError(record.type, record.value)


def decode_metrics(
    records: Iterable[MetricRecord], metric_type: str | None = None
) -> list[MetricReading]:
    """
    Decode records at the boundary, skipping undecodable ones.
    Result is sorted by date ascending (stable for equal dates).
    """
    readings: list[MetricReading] = []
    for record in records:
        if metric_type is not None and record.type != metric_type:
            continue
        try:
            readings.append(decode_metric(record))
        except ParseError as exc:
            logger.debug("Skipping metric: %s", exc)
    readings.sort(key=lambda r: r.date)
    return readings


def numeric_readings(
    records: Iterable[MetricRecord], metric_type: str
) -> list[NumericReading]:
    return [
        r for r in decode_metrics(records, metric_type) if isinstance(r, NumericReading)
    ]


def blood_pressure_readings(
    records: Iterable[MetricRecord],
) -> list[BloodPressureReading]:
    return [
        r
        for r in decode_metrics(records, MetricType.BLOOD_PRESSURE.value)
        if isinstance(r, BloodPressureReading)
    ]
