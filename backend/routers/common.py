from datetime import date, datetime

from fastapi import HTTPException
from sqlalchemy.orm import Session

from core.dates import DateRange
from models import User

_DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str) -> date:
    try:
        dt = datetime.strptime(value, _DATE_FORMAT)
        return dt.date()
    except ValueError:
        raise HTTPException(400, detail="Invalid date format. Use YYYY-MM-DD.")


def parse_optional_date(value: str | None) -> date | None:
    return parse_date(value) if value is not None else None


def parse_date_range(start_date: str, end_date: str) -> DateRange:
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start > end:
        raise HTTPException(400, detail="start_date must be <= end_date.")
    return DateRange(start=start, end=end)


def require_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise HTTPException(404, detail="User not found")
    return user


def not_found(entity: str) -> HTTPException:
    return HTTPException(404, detail=f"{entity} not found")


def parse_optional_range(start_date: str | None, end_date: str | None) -> DateRange | None:
    if not start_date and not end_date:
        return None
    if not (start_date and end_date):
        raise HTTPException(400, detail="start_date and end_date go together.")
    return parse_date_range(start_date, end_date)
