from datetime import datetime

from pydantic import BaseModel, ConfigDict

from schemas.common import PartialUpdate


class MedicationCreate(BaseModel):
    user_id: int
    name: str
    dosage: str
    frequency: str
    time: str  # JSON list of "HH:MM"
    instructions: str | None = None
    start_date: datetime
    end_date: datetime | None = None
    active: bool = True


class MedicationUpdate(PartialUpdate):
    not_null = ("name", "dosage", "frequency", "time", "start_date", "active")

    name: str | None = None
    dosage: str | None = None
    frequency: str | None = None
    time: str | None = None
    instructions: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    active: bool | None = None


class MedicationOut(MedicationCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class MedicationLogCreate(BaseModel):
    medication_id: int
    user_id: int
    taken: bool
    scheduled_time: datetime
    taken_time: datetime | None = None
    notes: str | None = None


class MedicationLogUpdate(BaseModel):
    taken: bool
    taken_time: datetime | None = None


class MedicationLogOut(MedicationLogCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class MedicationReminder(BaseModel):
    id: int
    name: str
    time: str
    time_remaining: str
    instructions: str
    is_upcoming: bool
    taken: bool


class MedicationAdherence(BaseModel):
    scheduled: int
    taken: int
    percentage: int
