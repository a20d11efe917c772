import enum
from datetime import date
from typing import Optional

from sqlalchemy import Date, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from day_planner.models.base import Base, TimestampMixin


class PointsKind(str, enum.Enum):
    task = "task"
    feedback = "feedback"
    perfect_day = "perfect_day"
    redemption = "redemption"


class PointsTransaction(Base, TimestampMixin):
    """Append-only ledger entry; created_at is the timestamp."""

    __tablename__ = "points_transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    points: Mapped[int] = mapped_column(Integer, nullable=False)
    reason: Mapped[str] = mapped_column(String(300), nullable=False)
    kind: Mapped[PointsKind] = mapped_column(Enum(PointsKind), nullable=False)
    day: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    task_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
