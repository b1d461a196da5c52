import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.dates import DateRange
from db.deps import get_db
from db.store import SqlRecordStore
from models import Meal
from routers.common import not_found, parse_optional_date, require_user
from schemas.meals import MealCreate, MealOut, MealUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/meals")


def _store(db: Session) -> SqlRecordStore[Meal]:
    return SqlRecordStore(db, Meal)


@router.get("/{user_id}", response_model=list[MealOut])
def list_meals(
    user_id: int,
    date: str | None = Query(None, description="Only meals on this day (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    day = parse_optional_date(date)
    date_range = DateRange(start=day, end=day) if day is not None else None
    return _store(db).list(user_id, date_range=date_range)


@router.get("/detail/{meal_id}", response_model=MealOut)
def get_meal(meal_id: int, db: Session = Depends(get_db)):
    meal = _store(db).get(meal_id)
    if meal is None:
        raise not_found("Meal")
    return meal


@router.post("", response_model=MealOut, status_code=201)
def create_meal(payload: MealCreate, db: Session = Depends(get_db)):
    require_user(db, payload.user_id)
    meal = _store(db).create(payload.model_dump())
    logger.info("Logged %s meal id=%s for user id=%s", meal.type, meal.id, meal.user_id)
    return meal


@router.put("/{meal_id}", response_model=MealOut)
def update_meal(meal_id: int, payload: MealUpdate, db: Session = Depends(get_db)):
    meal = _store(db).update(meal_id, payload.model_dump(exclude_unset=True))
    if meal is None:
        raise not_found("Meal")
    logger.info("Updated meal id=%s", meal_id)
    return meal


@router.delete("/{meal_id}")
def delete_meal(meal_id: int, db: Session = Depends(get_db)):
    if not _store(db).delete(meal_id):
        raise not_found("Meal")
    logger.info("Deleted meal id=%s", meal_id)
    return {"success": True}
