from dataclasses import dataclass
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from core.dates import DateRange
from db.deps import get_db
from db.store import SqlRecordStore
from models import ExerciseLog, HealthMetric, Meal, User
from routers.common import parse_optional_date, require_user
from schemas.reports import (
    BloodPressureReport,
    ExerciseReport,
    HealthScoreResponse,
    HeartRateReport,
    NutritionReport,
    ReportOverview,
    ReportSummaryResponse,
    SleepReport,
    WeightReport,
)
from services.exercise import exercise_report
from services.nutrition import nutrition_report
from services.report_summary import generate_report_summary
from services.reports import (
    ReportRecords,
    ReportSources,
    health_score,
    load_records,
    report_overview,
    resolve_range,
)
from services.sleep import sleep_report
from services.vitals import blood_pressure_report, heart_rate_report, weight_report

router = APIRouter(prefix="/reports")


@dataclass(frozen=True)
class ReportContext:
    user: User
    records: ReportRecords
    date_range: DateRange
    today: date


def report_context(
    user_id: int,
    range_: str | None = Query(
        None, alias="range", description="week, month, 3months, 6months or year"
    ),
    start_date: str | None = Query(None, description="Start date (YYYY-MM-DD)"),
    end_date: str | None = Query(None, description="End date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
) -> ReportContext:
    user = require_user(db, user_id)
    today = datetime.now().date()
    try:
        date_range = resolve_range(
            range_, parse_optional_date(start_date), parse_optional_date(end_date), today
        )
    except ValueError as exc:
        raise HTTPException(400, detail=str(exc))
    sources = ReportSources(
        metrics=SqlRecordStore(db, HealthMetric),
        meals=SqlRecordStore(db, Meal),
        exercise_logs=SqlRecordStore(db, ExerciseLog),
    )
    return ReportContext(
        user=user,
        records=load_records(sources, user_id),
        date_range=date_range,
        today=today,
    )


@router.get("/{user_id}", response_model=ReportOverview)
def overview(ctx: ReportContext = Depends(report_context)):
    return report_overview(ctx.records, ctx.user, ctx.date_range, ctx.today)


@router.get("/{user_id}/weight", response_model=WeightReport)
def weight(ctx: ReportContext = Depends(report_context)):
    return weight_report(ctx.records.metrics, ctx.date_range)


@router.get("/{user_id}/blood-pressure", response_model=BloodPressureReport)
def blood_pressure(ctx: ReportContext = Depends(report_context)):
    return blood_pressure_report(ctx.records.metrics, ctx.date_range)


@router.get("/{user_id}/heart-rate", response_model=HeartRateReport)
def heart_rate(ctx: ReportContext = Depends(report_context)):
    return heart_rate_report(ctx.records.metrics, ctx.date_range)


@router.get("/{user_id}/sleep", response_model=SleepReport)
def sleep(ctx: ReportContext = Depends(report_context)):
    return sleep_report(
        ctx.records.metrics, ctx.today, ctx.user.target_sleep, ctx.date_range
    )


@router.get("/{user_id}/nutrition", response_model=NutritionReport)
def nutrition(ctx: ReportContext = Depends(report_context)):
    return nutrition_report(ctx.records.meals, ctx.today, ctx.date_range)


@router.get("/{user_id}/exercise", response_model=ExerciseReport)
def exercise(ctx: ReportContext = Depends(report_context)):
    return exercise_report(ctx.records.exercise_logs, ctx.date_range)


@router.get("/{user_id}/health-score", response_model=HealthScoreResponse)
def score(ctx: ReportContext = Depends(report_context)):
    return health_score(ctx.records, ctx.user, ctx.date_range)


@router.get("/{user_id}/summary", response_model=ReportSummaryResponse)
def summary(ctx: ReportContext = Depends(report_context)):
    """
    Plain-language summary of the report window. Uses the LLM when
    OPENAI_API_KEY is set, otherwise a deterministic template.
    """
    report = report_overview(ctx.records, ctx.user, ctx.date_range, ctx.today)
    return generate_report_summary(report)
