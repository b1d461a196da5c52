from datetime import datetime

from pydantic import BaseModel, ConfigDict

from schemas.common import PartialUpdate


class GoalCreate(BaseModel):
    user_id: int
    title: str
    category: str
    target: str
    current_value: str
    initial_value: str | None = None
    start_date: datetime
    target_date: datetime | None = None
    completed: bool = False
    icon: str | None = None


class GoalUpdate(PartialUpdate):
    not_null = (
        "title", "category", "target", "current_value", "start_date", "completed"
    )

    title: str | None = None
    category: str | None = None
    target: str | None = None
    current_value: str | None = None
    initial_value: str | None = None
    start_date: datetime | None = None
    target_date: datetime | None = None
    completed: bool | None = None
    icon: str | None = None


class GoalOut(GoalCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    progress: float | None = None


class GoalView(GoalOut):
    progress_description: str
    start_days_ago: int
