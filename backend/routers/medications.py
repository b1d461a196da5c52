import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from db.deps import get_db
from db.store import SqlRecordStore
from models import Medication, MedicationLog
from routers.common import not_found, parse_optional_range, require_user
from schemas.medications import (
    MedicationAdherence,
    MedicationCreate,
    MedicationLogCreate,
    MedicationLogOut,
    MedicationLogUpdate,
    MedicationOut,
    MedicationUpdate,
)
from services.medications import adherence, log_update_values

logger = logging.getLogger(__name__)

router = APIRouter()


def _medications(db: Session) -> SqlRecordStore[Medication]:
    return SqlRecordStore(db, Medication, date_field="start_date", type_field=None)


def _logs(db: Session) -> SqlRecordStore[MedicationLog]:
    return SqlRecordStore(
        db, MedicationLog, date_field="scheduled_time", type_field=None
    )


@router.get("/medications/{user_id}", response_model=list[MedicationOut])
def list_medications(
    user_id: int,
    active: bool | None = Query(None, description="Only active (or inactive) ones"),
    db: Session = Depends(get_db),
):
    return _medications(db).list(user_id, active=active)


@router.get("/medications/detail/{medication_id}", response_model=MedicationOut)
def get_medication(medication_id: int, db: Session = Depends(get_db)):
    medication = _medications(db).get(medication_id)
    if medication is None:
        raise not_found("Medication")
    return medication


@router.post("/medications", response_model=MedicationOut, status_code=201)
def create_medication(payload: MedicationCreate, db: Session = Depends(get_db)):
    require_user(db, payload.user_id)
    medication = _medications(db).create(payload.model_dump())
    logger.info("Created medication id=%s for user id=%s", medication.id, medication.user_id)
    return medication


@router.put("/medications/{medication_id}", response_model=MedicationOut)
def update_medication(
    medication_id: int, payload: MedicationUpdate, db: Session = Depends(get_db)
):
    medication = _medications(db).update(
        medication_id, payload.model_dump(exclude_unset=True)
    )
    if medication is None:
        raise not_found("Medication")
    logger.info("Updated medication id=%s", medication_id)
    return medication


@router.delete("/medications/{medication_id}")
def delete_medication(medication_id: int, db: Session = Depends(get_db)):
    if not _medications(db).delete(medication_id):
        raise not_found("Medication")
    logger.info("Deleted medication id=%s", medication_id)
    return {"success": True}


@router.get("/medication-logs/{user_id}", response_model=list[MedicationLogOut])
def list_medication_logs(
    user_id: int,
    medication_id: int | None = Query(None),
    db: Session = Depends(get_db),
):
    return _logs(db).list(user_id, medication_id=medication_id)


@router.get("/medication-logs/{user_id}/adherence", response_model=MedicationAdherence)
def medication_adherence(
    user_id: int,
    start_date: str | None = Query(None, description="Start date (YYYY-MM-DD)"),
    end_date: str | None = Query(None, description="End date (YYYY-MM-DD)"),
    medication_id: int | None = Query(None),
    db: Session = Depends(get_db),
):
    date_range = parse_optional_range(start_date, end_date)
    logs = _logs(db).list(user_id, date_range=date_range, medication_id=medication_id)
    return adherence(logs)


@router.post("/medication-logs", response_model=MedicationLogOut, status_code=201)
def create_medication_log(payload: MedicationLogCreate, db: Session = Depends(get_db)):
    require_user(db, payload.user_id)
    if _medications(db).get(payload.medication_id) is None:
        raise not_found("Medication")
    log = _logs(db).create(payload.model_dump())
    logger.info("Logged dose for medication id=%s", log.medication_id)
    return log


@router.put("/medication-logs/{log_id}", response_model=MedicationLogOut)
def update_medication_log(
    log_id: int, payload: MedicationLogUpdate, db: Session = Depends(get_db)
):
    values = log_update_values(payload.taken, payload.taken_time, datetime.now())
    log = _logs(db).update(log_id, values)
    if log is None:
        raise not_found("Medication log")
    logger.info("Marked medication log id=%s taken=%s", log_id, log.taken)
    return log
