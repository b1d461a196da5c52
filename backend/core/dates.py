"""
Calendar helpers shared by the record store and the aggregation services.
Date ranges are inclusive on both ends and compared by calendar date.
"""
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from dateutil.relativedelta import relativedelta

DAY_LABEL_FORMAT = "%b %d"
MONTH_LABEL_FORMAT = "%b %Y"
SHORT_MONTH_FORMAT = "%b"

DEFAULT_REPORT_RANGE = "month"
REPORT_RANGES = ("week", "month", "3months", "6months", "year")


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError("start must be <= end")

    def contains(self, value: date | datetime) -> bool:
        return self.start <= as_date(value) <= self.end

    def bounds(self) -> tuple[datetime, datetime]:
        """Half-open [start 00:00, end+1 00:00) datetimes for SQL filtering."""
        start_dt = datetime.combine(self.start, time.min)
        end_dt = datetime.combine(self.end, time.min) + timedelta(days=1)
        return start_dt, end_dt


def naive(value: datetime) -> datetime:
    """Drop tzinfo, keeping the wall-clock time as sent."""
    return value.replace(tzinfo=None) if value.tzinfo is not None else value


def as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def day_label(value: date | datetime) -> str:
    return value.strftime(DAY_LABEL_FORMAT)


def month_label(value: date | datetime) -> str:
    return value.strftime(MONTH_LABEL_FORMAT)


def short_month_label(value: date | datetime) -> str:
    return value.strftime(SHORT_MONTH_FORMAT)


def last_days(days: int, today: date) -> DateRange:
    """The `days` calendar days ending today, today included."""
    return DateRange(start=today - timedelta(days=days - 1), end=today)


def report_range(preset: str, today: date) -> DateRange:
    """
    Resolve a report preset to a date range ending today.
    week/month/3months count days back; 6months/year count calendar months back.
    """
    if preset == "week":
        start = today - timedelta(days=7)
    elif preset == "month":
        start = today - timedelta(days=30)
    elif preset == "3months":
        start = today - timedelta(days=90)
    elif preset == "6months":
        start = today - relativedelta(months=6)
    elif preset == "year":
        start = today - relativedelta(months=12)
    else:
        raise ValueError(
            f"Unknown report range: {preset!r}, expected one of {', '.join(REPORT_RANGES)}"
        )
    return DateRange(start=start, end=today)
