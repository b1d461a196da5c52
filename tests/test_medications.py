from datetime import date, datetime
from types import SimpleNamespace

import pytest

from core.dates import DateRange
from services.medications import (
    adherence,
    log_update_values,
    medication_reminders,
    parse_times,
    time_remaining,
)

NOW = datetime(2024, 3, 10, 8, 0)


def _medication(id, time='["08:30"]', instructions=None):
    return SimpleNamespace(
        id=id, name=f"Med {id}", dosage="1 pill", time=time, instructions=instructions
    )


def _log(medication_id, scheduled, taken=False):
    return SimpleNamespace(
        medication_id=medication_id, scheduled_time=scheduled, taken=taken
    )


@pytest.mark.parametrize(
    "raw, times",
    [('["08:00", "20:00"]', ["08:00", "20:00"]), ("not json", []), ('{"a": 1}', []), ("", []), (None, [])],
)
def test_parse_times(raw, times):
    assert parse_times(raw) == times


@pytest.mark.parametrize(
    "target, label", [("10:30", "2h 30m"), ("08:10", "10m"), ("07:00", "23h 0m"), ("08:00", "0m")]
)
def test_time_remaining_rolls_over_to_tomorrow(target, label):
    assert time_remaining(target, NOW) == label


def test_time_remaining_ignores_malformed_time():
    assert time_remaining("soon", NOW) == ""


def test_reminders_reflect_todays_logs():
    medications = [
        _medication(1, instructions="Take with food"),
        _medication(2, time="garbage"),
        _medication(3),
    ]
    logs = [
        _log(1, datetime(2024, 3, 10, 8, 30), taken=True),
        _log(2, datetime(2024, 3, 10, 12, 0)),
        _log(3, datetime(2024, 3, 9, 8, 30), taken=True),
    ]
    first, second, third = medication_reminders(medications, logs, NOW)

    assert first.instructions == "1 pill - Take with food"
    assert (first.is_upcoming, first.taken) == (True, True)
    assert first.time_remaining == "30m"
    assert second.time == "00:00"
    assert (second.is_upcoming, second.taken) == (True, False)
    assert (third.is_upcoming, third.taken) == (False, False)


def test_adherence_percentage_in_range():
    logs = [
        _log(1, datetime(2024, 3, 8), taken=True),
        _log(1, datetime(2024, 3, 9), taken=True),
        _log(1, datetime(2024, 3, 10), taken=False),
        _log(1, datetime(2024, 2, 1), taken=False),
    ]
    result = adherence(logs, DateRange(date(2024, 3, 1), date(2024, 3, 31)))
    assert (result.scheduled, result.taken, result.percentage) == (3, 2, 67)


def test_adherence_without_logs():
    assert adherence([]).percentage == 0


def test_marking_taken_stamps_current_time():
    assert log_update_values(True, None, NOW) == {"taken": True, "taken_time": NOW}
    earlier = datetime(2024, 3, 10, 7, 45)
    assert log_update_values(True, earlier, NOW)["taken_time"] == earlier
    assert log_update_values(False, None, NOW) == {"taken": False, "taken_time": None}
