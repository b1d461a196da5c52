"""
Time bucketing for chart series.

Records are grouped under a label derived from their date. Buckets come out in
the chronological order of their first record, never in label order, so
"Feb 2024" follows "Jan 2024" even though it sorts before it.
"""
from collections.abc import Callable, Hashable, Iterable, Sequence
from datetime import date, datetime
from typing import TypeVar

from core.dates import DateRange

T = TypeVar("T")
V = TypeVar("V")
R = TypeVar("R")


def filter_by_range(
    records: Iterable[T],
    date_of: Callable[[T], date | datetime],
    date_range: DateRange | None,
) -> list[T]:
    if date_range is None:
        return list(records)
    return [r for r in records if date_range.contains(date_of(r))]


def bucket(
    records: Iterable[T],
    date_of: Callable[[T], date | datetime],
    key: Callable[[T], Hashable],
    value_of: Callable[[T], V],
    aggregate: Callable[[list[V]], R],
    date_range: DateRange | None = None,
    label: Callable[[T], str] | None = None,
) -> list[tuple[str, R]]:
    """
    Group records into (label, aggregate(values)) pairs.

    Records are ordered by date (stable) before grouping; a key seen for the
    first time opens a new bucket at the end. Empty input, or a range that
    excludes everything, gives an empty list.

    When `label` is given, records are grouped by `key` and each bucket is
    labelled from its first record, so two days that share a display label
    ("Oct 18" of different years) stay apart.
    """
    selected = filter_by_range(records, date_of, date_range)
    selected.sort(key=date_of)

    labels: dict[Hashable, str] = {}
    grouped: dict[Hashable, list[V]] = {}
    for record in selected:
        group = key(record)
        if group not in grouped:
            labels[group] = label(record) if label else group
            grouped[group] = []
        grouped[group].append(value_of(record))
    return [(labels[group], aggregate(values)) for group, values in grouped.items()]


def total(values: Sequence[float]) -> float:
    return float(sum(values))


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def count(values: Sequence[object]) -> int:
    return len(values)


def collect(values: Sequence[V]) -> list[V]:
    return list(values)
