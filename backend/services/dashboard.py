"""
Dashboard view: latest readings plus the small lists shown on the home page.
"""
from collections.abc import Sequence
from datetime import datetime

from core.dates import short_month_label
from models import (
    Appointment,
    ExerciseLog,
    Goal,
    HealthMetric,
    Meal,
    Medication,
    MedicationLog,
)
from schemas.dashboard import ActivityBar, DashboardResponse, LatestMetrics, MealCard
from schemas.health import HealthMetricOut, MetricType
from schemas.reports import SeriesPoint
from services.appointments import appointment_view, upcoming
from services.decoding import numeric_readings
from services.exercise import weekday_name
from services.goals import goal_view
from services.medications import medication_reminders

STEPS_PER_KM = 1250
ACTIVITY_BARS = 7
APPOINTMENTS_SHOWN = 2


def latest_metric(metrics: Sequence[HealthMetric], metric_type: str) -> HealthMetric | None:
    candidates = [m for m in metrics if m.type == metric_type]
    if not candidates:
        return None
    return max(candidates, key=lambda m: m.date)


def estimated_steps(log: ExerciseLog) -> int:
    if log.type != "walking" or not log.distance:
        return 0
    return round(log.distance * STEPS_PER_KM)


def build_dashboard(
    *,
    metrics: Sequence[HealthMetric],
    exercise_logs: Sequence[ExerciseLog],
    medications: Sequence[Medication],
    medication_logs: Sequence[MedicationLog],
    meals_today: Sequence[Meal],
    appointments: Sequence[Appointment],
    goals: Sequence[Goal],
    now: datetime,
) -> DashboardResponse:
    def out(metric: HealthMetric | None) -> HealthMetricOut | None:
        return HealthMetricOut.model_validate(metric) if metric is not None else None

    latest = LatestMetrics(
        **{
            t.value: out(latest_metric(metrics, t.value))
            for t in (
                MetricType.WEIGHT,
                MetricType.BLOOD_PRESSURE,
                MetricType.HEART_RATE,
                MetricType.SLEEP,
            )
        }
    )
    weights = numeric_readings(metrics, MetricType.WEIGHT.value)

    return DashboardResponse(
        latest=latest,
        weight_chart=[
            SeriesPoint(label=short_month_label(r.date), value=r.value) for r in weights
        ],
        activity=[
            ActivityBar(day=weekday_name(log.date), steps=estimated_steps(log))
            for log in exercise_logs[:ACTIVITY_BARS]
        ],
        medications=medication_reminders(medications, medication_logs, now),
        meals=[
            MealCard(
                id=meal.id,
                type=meal.type.capitalize(),
                foods=meal.foods or [],
                calories=meal.calories,
            )
            for meal in meals_today
        ],
        appointments=[
            appointment_view(apt)
            for apt in upcoming(appointments, now)[:APPOINTMENTS_SHOWN]
        ],
        goals=[goal_view(goal, now) for goal in goals],
    )
