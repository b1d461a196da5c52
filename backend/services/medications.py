"""
Medication reminders and adherence from medications and their dose logs.
"""
import json
import logging
from collections.abc import Iterable
from datetime import datetime, timedelta

from core.dates import DateRange, as_date
from models import Medication, MedicationLog
from schemas.medications import MedicationAdherence, MedicationReminder
from services.bucketing import filter_by_range
from services.progress import percentage_of_target

logger = logging.getLogger(__name__)

DEFAULT_TIME = "00:00"


def parse_times(raw: str | None) -> list[str]:
    """Decode the JSON list of "HH:MM" strings; malformed input gives []."""
    try:
        times = json.loads(raw) if raw else []
    except ValueError:
        logger.debug("Malformed medication time list: %r", raw)
        return []
    if not isinstance(times, list):
        return []
    return [str(t) for t in times]


def time_remaining(target_time: str, now: datetime) -> str:
    """Time until the next occurrence of HH:MM, as "3h 5m" or "5m"."""
    try:
        hours, minutes = (int(part) for part in target_time.split(":"))
        target = now.replace(hour=hours, minute=minutes, second=0, microsecond=0)
    except ValueError:
        return ""
    if target < now:
        target += timedelta(days=1)
    total_minutes = int((target - now).total_seconds() // 60)
    diff_hours, diff_minutes = divmod(total_minutes, 60)
    if diff_hours > 0:
        return f"{diff_hours}h {diff_minutes}m"
    return f"{diff_minutes}m"


def medication_reminders(
    medications: Iterable[Medication],
    logs: Iterable[MedicationLog],
    now: datetime,
) -> list[MedicationReminder]:
    today = now.date()
    todays_logs = [log for log in logs if as_date(log.scheduled_time) >= today]

    reminders = []
    for med in medications:
        times = parse_times(med.time)
        time = times[0] if times else DEFAULT_TIME
        log = next((l for l in todays_logs if l.medication_id == med.id), None)
        instructions = med.dosage
        if med.instructions:
            instructions += f" - {med.instructions}"
        reminders.append(
            MedicationReminder(
                id=med.id,
                name=med.name,
                time=time,
                time_remaining=time_remaining(time, now),
                instructions=instructions,
                is_upcoming=log is not None,
                taken=log.taken if log is not None else False,
            )
        )
    return reminders


def adherence(
    logs: Iterable[MedicationLog], date_range: DateRange | None = None
) -> MedicationAdherence:
    selected = filter_by_range(logs, lambda log: log.scheduled_time, date_range)
    taken = sum(1 for log in selected if log.taken)
    return MedicationAdherence(
        scheduled=len(selected),
        taken=taken,
        percentage=percentage_of_target(taken, len(selected)),
    )


def log_update_values(
    taken: bool, taken_time: datetime | None, now: datetime
) -> dict:
    """Values for marking a dose: taken without a time is stamped with `now`."""
    if not taken:
        return {"taken": False, "taken_time": taken_time}
    return {"taken": True, "taken_time": taken_time or now}
