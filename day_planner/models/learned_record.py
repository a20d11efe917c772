from datetime import date
from typing import Optional

from sqlalchemy import Boolean, Date, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from day_planner.models.base import Base, TimestampMixin


class LearnedRecord(Base, TimestampMixin):
    """Running averages of reported actuals, one row per task id.

    No foreign key to tasks: history outlives deleted task templates.
    """

    __tablename__ = "learned_records"

    task_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    avg_duration_minutes: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    avg_energy: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    last_done_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    completed_today: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
