from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.dates import DateRange
from db.deps import get_db
from db.store import SqlRecordStore
from models import (
    Appointment,
    ExerciseLog,
    Goal,
    HealthMetric,
    Meal,
    Medication,
    MedicationLog,
)
from routers.common import require_user
from schemas.dashboard import DashboardResponse
from services.dashboard import build_dashboard

router = APIRouter()


@router.get("/dashboard/{user_id}", response_model=DashboardResponse)
def dashboard(user_id: int, db: Session = Depends(get_db)):
    require_user(db, user_id)
    now = datetime.now()
    today = DateRange(start=now.date(), end=now.date())
    return build_dashboard(
        metrics=SqlRecordStore(db, HealthMetric).list(user_id),
        exercise_logs=SqlRecordStore(db, ExerciseLog).list(user_id),
        medications=SqlRecordStore(
            db, Medication, date_field="start_date", type_field=None
        ).list(user_id, active=True),
        medication_logs=SqlRecordStore(
            db, MedicationLog, date_field="scheduled_time", type_field=None
        ).list(user_id, date_range=today),
        meals_today=SqlRecordStore(db, Meal).list(user_id, date_range=today),
        appointments=SqlRecordStore(db, Appointment, type_field=None).list(user_id),
        goals=SqlRecordStore(db, Goal, date_field="start_date", type_field=None).list(
            user_id
        ),
        now=now,
    )
