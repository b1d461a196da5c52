from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base


class HealthMetric(Base):
    __tablename__ = "health_metrics"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    # weight, blood_pressure, heart_rate, sleep, steps
    type: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    # plain number, or JSON for composite readings ({"systolic": .., "diastolic": ..})
    value: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, index=True, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("ix_health_metrics_user_type_date", "user_id", "type", "date"),
    )
