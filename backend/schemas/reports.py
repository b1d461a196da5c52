from typing import Literal

from pydantic import BaseModel


class SeriesPoint(BaseModel):
    label: str
    value: float


class WeightReport(BaseModel):
    points: list[SeriesPoint]
    latest: float | None
    change_percent: float
    delta: float


class BloodPressurePoint(BaseModel):
    label: str
    systolic: float
    diastolic: float


class BloodPressureReport(BaseModel):
    points: list[BloodPressurePoint]
    latest_systolic: float | None
    latest_diastolic: float | None
    trend: Literal["stable", "rising", "falling"]
    normal_range: str


class HeartRateReport(BaseModel):
    points: list[SeriesPoint]
    latest: float | None
    status: Literal["low", "normal", "high"] | None
    normal_range: str


class SleepNight(BaseModel):
    label: str
    hours: float
    target: float
    quality: str


class QualityCount(BaseModel):
    quality: str
    count: int


class SleepReport(BaseModel):
    nights: list[SleepNight]
    last_week: list[SleepNight]
    monthly_average: list[SeriesPoint]
    quality_distribution: list[QualityCount]
    last_night: float | None
    achieved_target: bool
    weekly_average: float | None
    weekly_average_display: str
    target: float


class NutritionTotals(BaseModel):
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0


class DailyNutrition(NutritionTotals):
    label: str


class MacroShare(BaseModel):
    name: str
    grams: float
    percent: float


class MealTypeCalories(BaseModel):
    type: str
    calories: float


class TargetProgress(BaseModel):
    current: float
    target: float
    percentage: int


class NutritionReport(BaseModel):
    daily: list[DailyNutrition]
    totals: NutritionTotals
    macro_distribution: list[MacroShare]
    calories_by_meal_type: list[MealTypeCalories]
    today: NutritionTotals
    today_progress: dict[str, TargetProgress]


class ExerciseTypeTotal(BaseModel):
    type: str
    minutes: float
    calories: float
    sessions: int


class WeekdayActivity(BaseModel):
    day: str
    minutes: float
    calories: float


class ExerciseReport(BaseModel):
    by_type: list[ExerciseTypeTotal]
    calories_burned: list[SeriesPoint]
    weekly_activity: list[WeekdayActivity]
    total_minutes: float
    total_calories: float
    total_distance: float
    active_days: int


class HealthScoreResponse(BaseModel):
    score: int
    components: dict[str, float]
    weights: dict[str, float]


class ReportOverview(BaseModel):
    start_date: str
    end_date: str
    weight: WeightReport
    blood_pressure: BloodPressureReport
    heart_rate: HeartRateReport
    sleep: SleepReport
    nutrition: NutritionReport
    exercise: ExerciseReport
    health_score: HealthScoreResponse


class ReportSummaryResponse(BaseModel):
    text: str
    score: int
    weakest_component: str | None
    signals_used: dict
