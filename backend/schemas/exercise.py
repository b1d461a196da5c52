from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from schemas.common import PartialUpdate


class ExerciseLogCreate(BaseModel):
    user_id: int
    type: str
    duration: int = Field(ge=0)
    distance: float | None = Field(default=None, ge=0)
    calories: int | None = Field(default=None, ge=0)
    date: datetime
    notes: str | None = None


class ExerciseLogUpdate(PartialUpdate):
    not_null = ("type", "duration", "date")

    type: str | None = None
    duration: int | None = Field(default=None, ge=0)
    distance: float | None = Field(default=None, ge=0)
    calories: int | None = Field(default=None, ge=0)
    date: datetime | None = None
    notes: str | None = None


class ExerciseLogOut(ExerciseLogCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
