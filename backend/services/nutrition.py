"""
Meal aggregation: daily macro totals, macro distribution and target progress.

Macro distribution is a share of grams (protein + carbs + fat), not of calories.
"""
from collections.abc import Iterable
from datetime import date, datetime
from typing import Protocol

from core.dates import DateRange, as_date, day_label
from schemas.reports import (
    DailyNutrition,
    MacroShare,
    MealTypeCalories,
    NutritionReport,
    NutritionTotals,
    TargetProgress,
)
from services.bucketing import bucket, collect, filter_by_range, total
from services.progress import percentage_of_target

DAILY_TARGETS = {
    "calories": 2000.0,
    "protein": 120.0,
    "carbs": 250.0,
    "fat": 65.0,
}


class MealRecord(Protocol):
    type: str
    date: datetime
    calories: int | None
    protein: float | None
    carbs: float | None
    fat: float | None


def sum_meals(meals: Iterable[MealRecord]) -> NutritionTotals:
    totals = NutritionTotals()
    for meal in meals:
        totals.calories += meal.calories or 0
        totals.protein += meal.protein or 0
        totals.carbs += meal.carbs or 0
        totals.fat += meal.fat or 0
    return totals


def macro_distribution(totals: NutritionTotals) -> list[MacroShare]:
    grams = {"Protein": totals.protein, "Carbs": totals.carbs, "Fat": totals.fat}
    denominator = sum(grams.values())
    return [
        MacroShare(
            name=name,
            grams=value,
            percent=round(value / denominator * 100, 1) if denominator else 0.0,
        )
        for name, value in grams.items()
    ]


def target_progress(totals: NutritionTotals) -> dict[str, TargetProgress]:
    out = {}
    for name, target in DAILY_TARGETS.items():
        current = getattr(totals, name)
        out[name] = TargetProgress(
            current=current,
            target=target,
            percentage=percentage_of_target(current, target),
        )
    return out


def nutrition_report(
    meals: Iterable[MealRecord],
    today: date,
    date_range: DateRange | None = None,
) -> NutritionReport:
    all_meals = list(meals)
    selected = filter_by_range(all_meals, lambda m: m.date, date_range)

    daily = bucket(
        selected,
        lambda m: m.date,
        lambda m: as_date(m.date),
        lambda m: m,
        collect,
        label=lambda m: day_label(m.date),
    )
    by_type = bucket(
        selected,
        lambda m: m.date,
        lambda m: m.type.capitalize(),
        lambda m: m.calories or 0,
        total,
    )
    totals = sum_meals(selected)
    today_totals = sum_meals(m for m in all_meals if as_date(m.date) == today)

    return NutritionReport(
        daily=[
            DailyNutrition(label=label, **sum_meals(day_meals).model_dump())
            for label, day_meals in daily
        ],
        totals=totals,
        macro_distribution=macro_distribution(totals),
        calories_by_meal_type=[
            MealTypeCalories(type=meal_type, calories=calories)
            for meal_type, calories in by_type
        ],
        today=today_totals,
        today_progress=target_progress(today_totals),
    )
