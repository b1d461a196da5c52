from pydantic import BaseModel

from schemas.appointments import AppointmentView
from schemas.goals import GoalView
from schemas.health import HealthMetricOut
from schemas.medications import MedicationReminder
from schemas.reports import SeriesPoint


class ActivityBar(BaseModel):
    day: str
    steps: int


class MealCard(BaseModel):
    id: int
    type: str
    foods: list[str]
    calories: int | None


class LatestMetrics(BaseModel):
    weight: HealthMetricOut | None = None
    blood_pressure: HealthMetricOut | None = None
    heart_rate: HealthMetricOut | None = None
    sleep: HealthMetricOut | None = None


class DashboardResponse(BaseModel):
    latest: LatestMetrics
    weight_chart: list[SeriesPoint]
    activity: list[ActivityBar]
    medications: list[MedicationReminder]
    meals: list[MealCard]
    appointments: list[AppointmentView]
    goals: list[GoalView]
