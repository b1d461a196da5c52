from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class MetricType(str, Enum):
    WEIGHT = "weight"
    BLOOD_PRESSURE = "blood_pressure"
    HEART_RATE = "heart_rate"
    SLEEP = "sleep"
    STEPS = "steps"


class HealthMetricCreate(BaseModel):
    user_id: int
    type: MetricType
    value: str
    date: datetime
    notes: str | None = None


class HealthMetricOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: str
    value: str
    date: datetime
    notes: str | None = None


class TimelinePoint(BaseModel):
    date: str  # YYYY-MM-DD
    metrics: dict[str, float]


class TimelineResponse(BaseModel):
    points: list[TimelinePoint]
