from datetime import date, datetime, timedelta

import pytest

from factories import metric
from services.decoding import numeric_readings
from services.sleep import format_hours, sleep_quality, sleep_report, weekly_average

TODAY = date(2024, 3, 10)


def _night(day: date, hours: float):
    return metric("sleep", str(hours), datetime.combine(day, datetime.min.time()))


@pytest.mark.parametrize(
    "hours, quality",
    [(5.99, "Poor"), (6.0, "Fair"), (6.99, "Fair"), (7.0, "Good"), (7.99, "Good"), (8.0, "Excellent")],
)
def test_quality_thresholds(hours, quality):
    assert sleep_quality(hours) == quality


def test_weekly_average_over_last_seven_days():
    hours = [6, 7, 8, 7, 6, 8, 9]
    records = [_night(TODAY - timedelta(days=6 - i), h) for i, h in enumerate(hours)]
    records.append(_night(TODAY - timedelta(days=7), 2))
    average = weekly_average(numeric_readings(records, "sleep"), TODAY)
    assert average == pytest.approx(7.2857, abs=1e-4)
    assert format_hours(average) == "7.3h"


def test_weekly_average_without_data():
    assert weekly_average([], TODAY) is None
    assert format_hours(None) == "No data"


@pytest.mark.parametrize(
    "hours, shown", [(7.25, "7.3h"), (5.75, "5.8h"), (7.24, "7.2h"), (8, "8.0h")]
)
def test_format_hours_rounds_halves_up(hours, shown):
    assert format_hours(hours) == shown


def test_sleep_report_defaults_target_and_flags_last_night():
    report = sleep_report([_night(TODAY, 8.5), _night(TODAY - timedelta(days=1), 6)], TODAY)
    assert report.target == 8
    assert report.last_night == 8.5
    assert report.achieved_target is True
    assert [n.quality for n in report.last_week] == ["Fair", "Excellent"]


def test_sleep_report_uses_user_target():
    report = sleep_report([_night(TODAY, 7.5)], TODAY, target_sleep=7)
    assert report.achieved_target is True
    assert report.nights[0].target == 7


def test_quality_distribution_in_first_seen_order():
    records = [
        _night(date(2024, 3, 1), 7.5),
        _night(date(2024, 3, 2), 5),
        _night(date(2024, 3, 3), 7.2),
    ]
    report = sleep_report(records, TODAY)
    assert [(q.quality, q.count) for q in report.quality_distribution] == [
        ("Good (7-8h)", 2),
        ("Poor (<6h)", 1),
    ]


def test_monthly_average_keeps_latest_six_months():
    records = [_night(date(2023, month, 15), 7) for month in range(5, 13)]
    records.append(_night(date(2023, 12, 20), 8))
    report = sleep_report(records, TODAY)
    assert [p.label for p in report.monthly_average] == [
        "Jul 2023",
        "Aug 2023",
        "Sep 2023",
        "Oct 2023",
        "Nov 2023",
        "Dec 2023",
    ]
    assert report.monthly_average[-1].value == 7.5


def test_sleep_report_empty():
    report = sleep_report([], TODAY)
    assert report.nights == []
    assert report.last_night is None
    assert report.achieved_target is False
    assert report.weekly_average_display == "No data"
