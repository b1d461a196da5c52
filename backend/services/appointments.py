from collections.abc import Iterable
from datetime import datetime, timedelta

from models import Appointment
from schemas.appointments import AppointmentGroups, AppointmentOut, AppointmentView


def _clock(value: datetime) -> str:
    return value.strftime("%I:%M %p").lstrip("0")


def time_span(start: datetime, duration_minutes: int | None) -> str:
    """ "10:00 AM - 11:00 AM" for an appointment of the given length."""
    end = start + timedelta(minutes=duration_minutes or 0)
    return f"{_clock(start)} - {_clock(end)}"


def appointment_view(appointment: Appointment) -> AppointmentView:
    base = AppointmentOut.model_validate(appointment)
    return AppointmentView(
        **base.model_dump(),
        time_span=time_span(appointment.date, appointment.duration),
    )


def group_appointments(
    appointments: Iterable[Appointment], now: datetime
) -> AppointmentGroups:
    """Split into today / upcoming (after today) / past (before today), ascending."""
    today = now.date()
    ordered = sorted(appointments, key=lambda apt: apt.date)
    groups = AppointmentGroups(today=[], upcoming=[], past=[])
    for apt in ordered:
        day = apt.date.date()
        if day == today:
            groups.today.append(appointment_view(apt))
        elif day > today:
            groups.upcoming.append(appointment_view(apt))
        else:
            groups.past.append(appointment_view(apt))
    return groups


def upcoming(appointments: Iterable[Appointment], now: datetime) -> list[Appointment]:
    return sorted(
        (apt for apt in appointments if apt.date >= now), key=lambda apt: apt.date
    )
