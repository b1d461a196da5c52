import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db.deps import get_db
from db.store import SqlRecordStore
from models import Goal
from routers.common import not_found, require_user
from schemas.goals import GoalCreate, GoalOut, GoalUpdate
from services.goals import goal_values

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/goals")


def _store(db: Session) -> SqlRecordStore[Goal]:
    return SqlRecordStore(db, Goal, date_field="start_date", type_field=None)


@router.get("/{user_id}", response_model=list[GoalOut])
def list_goals(user_id: int, db: Session = Depends(get_db)):
    return _store(db).list(user_id)


@router.get("/detail/{goal_id}", response_model=GoalOut)
def get_goal(goal_id: int, db: Session = Depends(get_db)):
    goal = _store(db).get(goal_id)
    if goal is None:
        raise not_found("Goal")
    return goal


@router.post("", response_model=GoalOut, status_code=201)
def create_goal(payload: GoalCreate, db: Session = Depends(get_db)):
    require_user(db, payload.user_id)
    goal = _store(db).create(goal_values(payload.model_dump()))
    logger.info("Created goal id=%s progress=%s", goal.id, goal.progress)
    return goal


@router.put("/{goal_id}", response_model=GoalOut)
def update_goal(goal_id: int, payload: GoalUpdate, db: Session = Depends(get_db)):
    store = _store(db)
    existing = store.get(goal_id)
    if existing is None:
        raise not_found("Goal")
    values = goal_values(payload.model_dump(exclude_unset=True), existing)
    goal = store.update(goal_id, values)
    logger.info("Updated goal id=%s progress=%s", goal_id, goal.progress)
    return goal


@router.delete("/{goal_id}")
def delete_goal(goal_id: int, db: Session = Depends(get_db)):
    if not _store(db).delete(goal_id):
        raise not_found("Goal")
    logger.info("Deleted goal id=%s", goal_id)
    return {"success": True}
