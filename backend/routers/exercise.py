import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from db.deps import get_db
from db.store import SqlRecordStore
from models import ExerciseLog
from routers.common import not_found, parse_optional_range, require_user
from schemas.exercise import ExerciseLogCreate, ExerciseLogOut, ExerciseLogUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exercise-logs")


def _store(db: Session) -> SqlRecordStore[ExerciseLog]:
    return SqlRecordStore(db, ExerciseLog)


@router.get("/{user_id}", response_model=list[ExerciseLogOut])
def list_exercise_logs(
    user_id: int,
    start_date: str | None = Query(None, description="Start date (YYYY-MM-DD)"),
    end_date: str | None = Query(None, description="End date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    date_range = parse_optional_range(start_date, end_date)
    return _store(db).list(user_id, date_range=date_range, newest_first=True)


@router.get("/detail/{log_id}", response_model=ExerciseLogOut)
def get_exercise_log(log_id: int, db: Session = Depends(get_db)):
    log = _store(db).get(log_id)
    if log is None:
        raise not_found("Exercise log")
    return log


@router.post("", response_model=ExerciseLogOut, status_code=201)
def create_exercise_log(payload: ExerciseLogCreate, db: Session = Depends(get_db)):
    require_user(db, payload.user_id)
    log = _store(db).create(payload.model_dump())
    logger.info("Logged %s session id=%s for user id=%s", log.type, log.id, log.user_id)
    return log


@router.put("/{log_id}", response_model=ExerciseLogOut)
def update_exercise_log(
    log_id: int, payload: ExerciseLogUpdate, db: Session = Depends(get_db)
):
    log = _store(db).update(log_id, payload.model_dump(exclude_unset=True))
    if log is None:
        raise not_found("Exercise log")
    logger.info("Updated exercise log id=%s", log_id)
    return log


@router.delete("/{log_id}")
def delete_exercise_log(log_id: int, db: Session = Depends(get_db)):
    if not _store(db).delete(log_id):
        raise not_found("Exercise log")
    logger.info("Deleted exercise log id=%s", log_id)
    return {"success": True}
