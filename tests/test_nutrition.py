from datetime import date, datetime

from core.dates import DateRange, report_range
from factories import meal
from schemas.reports import NutritionTotals
from services.nutrition import macro_distribution, nutrition_report, sum_meals

TODAY = date(2024, 3, 10)


def test_macro_distribution_is_share_of_grams():
    shares = macro_distribution(NutritionTotals(protein=30, carbs=50, fat=20))
    assert [(s.name, s.percent) for s in shares] == [
        ("Protein", 30.0),
        ("Carbs", 50.0),
        ("Fat", 20.0),
    ]


def test_macro_distribution_without_grams():
    assert all(s.percent == 0 for s in macro_distribution(NutritionTotals()))


def test_sum_meals_treats_missing_values_as_zero():
    totals = sum_meals(
        [
            meal(datetime(2024, 3, 1), calories=None, protein=None),
            meal(datetime(2024, 3, 1), calories=400, protein=20),
        ]
    )
    assert (totals.calories, totals.protein) == (400, 20)


def test_nutrition_report():
    meals = [
        meal(datetime(2024, 3, 9, 19), type="dinner", calories=700, protein=40),
        meal(datetime(2024, 3, 10, 8), type="breakfast", calories=400, protein=15),
        meal(datetime(2024, 3, 10, 12), type="lunch", calories=600, protein=35),
        meal(datetime(2024, 3, 1, 12), type="lunch", calories=900),
    ]
    window = DateRange(start=date(2024, 3, 9), end=TODAY)
    report = nutrition_report(meals, TODAY, window)

    assert [(d.label, d.calories) for d in report.daily] == [
        ("Mar 09", 700),
        ("Mar 10", 1000),
    ]
    assert report.totals.calories == 1700
    assert [(t.type, t.calories) for t in report.calories_by_meal_type] == [
        ("Dinner", 700),
        ("Breakfast", 400),
        ("Lunch", 600),
    ]
    assert report.today.calories == 1000
    assert report.today_progress["calories"].percentage == 50
    assert report.today_progress["protein"].percentage == 42


def test_nutrition_report_empty():
    report = nutrition_report([], TODAY)
    assert report.daily == []
    assert report.totals.calories == 0
    assert report.today_progress["fat"].percentage == 0


def test_year_range_keeps_same_calendar_day_of_both_years_apart():
    today = date(2026, 10, 18)
    meals = [
        meal(datetime(2025, 10, 18, 12), protein=10),
        meal(datetime(2026, 10, 18, 12), protein=20),
    ]
    report = nutrition_report(meals, today, report_range("year", today))

    assert [(d.label, d.protein) for d in report.daily] == [
        ("Oct 18", 10),
        ("Oct 18", 20),
    ]
    assert report.today.protein == 20
