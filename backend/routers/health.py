import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from db.deps import get_db
from db.store import SqlRecordStore
from models import HealthMetric
from routers.common import parse_date_range, require_user
from schemas.health import (
    HealthMetricCreate,
    HealthMetricOut,
    MetricType,
    TimelineResponse,
)
from services.timeline import get_timeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health-metrics")


def _store(db: Session) -> SqlRecordStore[HealthMetric]:
    return SqlRecordStore(db, HealthMetric)


@router.get("/{user_id}", response_model=list[HealthMetricOut])
def list_metrics(
    user_id: int,
    type: MetricType | None = Query(None, description="Metric type filter"),
    db: Session = Depends(get_db),
):
    return _store(db).list(user_id, type.value if type else None)


@router.get("/{user_id}/range", response_model=list[HealthMetricOut])
def metrics_in_range(
    user_id: int,
    type: MetricType | None = Query(None),
    start_date: str | None = Query(None, description="Start date (YYYY-MM-DD)"),
    end_date: str | None = Query(None, description="End date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    if type is None or not start_date or not end_date:
        raise HTTPException(400, detail="type, start_date and end_date are required.")
    date_range = parse_date_range(start_date, end_date)
    return _store(db).list(user_id, type.value, date_range)


@router.get("/{user_id}/latest/{metric_type}", response_model=HealthMetricOut)
def latest_metric(user_id: int, metric_type: MetricType, db: Session = Depends(get_db)):
    metric = _store(db).latest(user_id, metric_type.value)
    if metric is None:
        raise HTTPException(404, detail="No metrics found")
    return metric


@router.get("/{user_id}/timeline", response_model=TimelineResponse)
def timeline(
    user_id: int,
    start_date: str = Query(..., description="Start date (YYYY-MM-DD)"),
    end_date: str = Query(..., description="End date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    date_range = parse_date_range(start_date, end_date)
    return get_timeline(_store(db).list(user_id, date_range=date_range), date_range)


@router.post("", response_model=HealthMetricOut, status_code=201)
def create_metric(payload: HealthMetricCreate, db: Session = Depends(get_db)):
    require_user(db, payload.user_id)
    values = payload.model_dump()
    values["type"] = payload.type.value
    metric = _store(db).create(values)
    logger.info("Recorded %s metric for user id=%s", metric.type, metric.user_id)
    return metric
