import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db.deps import get_db
from db.store import SqlRecordStore
from models import Appointment
from routers.common import not_found, require_user
from schemas.appointments import (
    AppointmentCreate,
    AppointmentGroups,
    AppointmentOut,
    AppointmentUpdate,
)
from services.appointments import group_appointments, upcoming

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments")


def _store(db: Session) -> SqlRecordStore[Appointment]:
    return SqlRecordStore(db, Appointment, type_field=None)


@router.get("/{user_id}", response_model=list[AppointmentOut])
def list_appointments(user_id: int, db: Session = Depends(get_db)):
    return _store(db).list(user_id)


@router.get("/{user_id}/upcoming", response_model=list[AppointmentOut])
def upcoming_appointments(user_id: int, db: Session = Depends(get_db)):
    return upcoming(_store(db).list(user_id), datetime.now())


@router.get("/{user_id}/grouped", response_model=AppointmentGroups)
def grouped_appointments(user_id: int, db: Session = Depends(get_db)):
    return group_appointments(_store(db).list(user_id), datetime.now())


@router.get("/detail/{appointment_id}", response_model=AppointmentOut)
def get_appointment(appointment_id: int, db: Session = Depends(get_db)):
    appointment = _store(db).get(appointment_id)
    if appointment is None:
        raise not_found("Appointment")
    return appointment


@router.post("", response_model=AppointmentOut, status_code=201)
def create_appointment(payload: AppointmentCreate, db: Session = Depends(get_db)):
    require_user(db, payload.user_id)
    appointment = _store(db).create(payload.model_dump())
    logger.info("Scheduled appointment id=%s for user id=%s", appointment.id, appointment.user_id)
    return appointment


@router.put("/{appointment_id}", response_model=AppointmentOut)
def update_appointment(
    appointment_id: int, payload: AppointmentUpdate, db: Session = Depends(get_db)
):
    appointment = _store(db).update(
        appointment_id, payload.model_dump(exclude_unset=True)
    )
    if appointment is None:
        raise not_found("Appointment")
    logger.info("Updated appointment id=%s", appointment_id)
    return appointment


@router.delete("/{appointment_id}")
def delete_appointment(appointment_id: int, db: Session = Depends(get_db)):
    if not _store(db).delete(appointment_id):
        raise not_found("Appointment")
    logger.info("Deleted appointment id=%s", appointment_id)
    return {"success": True}
