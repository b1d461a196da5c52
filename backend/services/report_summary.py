"""
Plain-language report summary from computed report figures only.
Deterministic text when no LLM is configured. No DB writes.
"""
from core.llm import generate_report_text
from schemas.reports import ReportOverview, ReportSummaryResponse

_COMPONENT_LABELS = {
    "weight": "weight management",
    "activity": "physical activity",
    "sleep": "sleep quality",
    "nutrition": "nutrition",
}


def weakest_component(components: dict[str, float]) -> str | None:
    if not components:
        return None
    return min(components, key=lambda name: components[name])


def _deterministic_summary(report: ReportOverview, weakest: str | None) -> str:
    score = report.health_score.score
    parts = [f"Your health score is {score} out of 100."]
    if weakest is not None and report.health_score.components[weakest] < 100:
        parts.append(f"The area with the most room to improve is {_COMPONENT_LABELS[weakest]}.")
    if report.exercise.active_days:
        parts.append(
            f"You were active on {report.exercise.active_days} day(s) "
            f"for {report.exercise.total_minutes:g} minutes in total."
        )
    if report.sleep.weekly_average is not None:
        parts.append(f"Average sleep over the last week: {report.sleep.weekly_average_display}.")
    return " ".join(parts)


def generate_report_summary(report: ReportOverview) -> ReportSummaryResponse:
    components = report.health_score.components
    weakest = weakest_component(components)
    signals_used = {
        "window": {"start_date": report.start_date, "end_date": report.end_date},
        "health_score": report.health_score.score,
        "components": components,
        "weakest_component": weakest,
        "active_days": report.exercise.active_days,
        "exercise_minutes": report.exercise.total_minutes,
        "weekly_sleep_average": report.sleep.weekly_average,
        "weight_change_percent": report.weight.change_percent,
        "blood_pressure_trend": report.blood_pressure.trend,
    }

    text = generate_report_text(signals_used)
    if not text:
        text = _deterministic_summary(report, weakest)

    return ReportSummaryResponse(
        text=text,
        score=report.health_score.score,
        weakest_component=weakest,
        signals_used=signals_used,
    )
