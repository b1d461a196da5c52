"""
Record store over SQLAlchemy sessions.

The aggregation services only rely on the RecordStore protocol (a filtered
`list`); SqlRecordStore adds the CRUD operations the routers need.
"""
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Generic, Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.dates import DateRange, naive
from models import User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
RecordT = TypeVar("RecordT", covariant=True)


class RecordStore(Protocol[RecordT]):
    def list(
        self,
        user_id: int,
        type_filter: str | None = None,
        date_range: DateRange | None = None,
    ) -> list[RecordT]:
        ...


class SqlRecordStore(Generic[ModelT]):
    """CRUD and filtered listing for one user-owned model."""

    def __init__(
        self,
        db: Session,
        model: type[ModelT],
        *,
        date_field: str = "date",
        type_field: str | None = "type",
    ) -> None:
        self._db = db
        self._model = model
        self._date_col = getattr(model, date_field)
        self._type_col = getattr(model, type_field) if type_field else None

    def get(self, record_id: int) -> ModelT | None:
        return self._db.get(self._model, record_id)

    def list(
        self,
        user_id: int,
        type_filter: str | None = None,
        date_range: DateRange | None = None,
        *,
        newest_first: bool = False,
        **equals: Any,
    ) -> list[ModelT]:
        stmt = select(self._model).where(self._model.user_id == user_id)
        if type_filter is not None and self._type_col is not None:
            stmt = stmt.where(self._type_col == type_filter)
        if date_range is not None:
            start_dt, end_dt = date_range.bounds()
            stmt = stmt.where(self._date_col >= start_dt, self._date_col < end_dt)
        for field, value in equals.items():
            if value is not None:
                stmt = stmt.where(getattr(self._model, field) == value)
        order = self._date_col.desc() if newest_first else self._date_col
        stmt = stmt.order_by(order, self._model.id)
        return list(self._db.scalars(stmt).all())

    def latest(self, user_id: int, type_filter: str | None = None) -> ModelT | None:
        records = self.list(user_id, type_filter, newest_first=True)
        return records[0] if records else None

    def create(self, values: Mapping[str, Any]) -> ModelT:
        record = self._model(**_stored(values))
        self._db.add(record)
        self._db.commit()
        self._db.refresh(record)
        logger.debug("Created %s id=%s", self._model.__name__, record.id)
        return record

    def update(self, record_id: int, values: Mapping[str, Any]) -> ModelT | None:
        record = self.get(record_id)
        if record is None:
            return None
        for field, value in _stored(values).items():
            setattr(record, field, value)
        self._db.commit()
        self._db.refresh(record)
        return record

    def delete(self, record_id: int) -> bool:
        record = self.get(record_id)
        if record is None:
            return False
        self._db.delete(record)
        self._db.commit()
        return True


def _stored(values: Mapping[str, Any]) -> dict[str, Any]:
    return {
        field: naive(value) if isinstance(value, datetime) else value
        for field, value in values.items()
    }


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.scalar(select(User).where(User.username == username))


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.scalar(select(User).where(User.email == email))
