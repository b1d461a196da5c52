from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from schemas.common import PartialUpdate

AppointmentStatus = Literal["scheduled", "confirmed", "completed", "cancelled"]


class AppointmentCreate(BaseModel):
    user_id: int
    title: str
    doctor: str | None = None
    location: str | None = None
    date: datetime
    duration: int | None = Field(default=None, ge=0)
    status: AppointmentStatus = "scheduled"
    notes: str | None = None


class AppointmentUpdate(PartialUpdate):
    not_null = ("title", "date", "status")

    title: str | None = None
    doctor: str | None = None
    location: str | None = None
    date: datetime | None = None
    duration: int | None = Field(default=None, ge=0)
    status: AppointmentStatus | None = None
    notes: str | None = None


class AppointmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    doctor: str | None = None
    location: str | None = None
    date: datetime
    duration: int | None = None
    status: str
    notes: str | None = None


class AppointmentView(AppointmentOut):
    time_span: str


class AppointmentGroups(BaseModel):
    today: list[AppointmentView]
    upcoming: list[AppointmentView]
    past: list[AppointmentView]
