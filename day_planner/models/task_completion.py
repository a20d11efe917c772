from datetime import date
from typing import Optional

from sqlalchemy import Boolean, Date, Float, Integer, SmallInteger, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from day_planner.models.base import Base, TimestampMixin


class TaskCompletion(Base, TimestampMixin):
    __tablename__ = "task_completions"
    __table_args__ = (UniqueConstraint("task_id", "day", name="uq_completion_task_day"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task_id: Mapped[str] = mapped_column(String(64), nullable=False)
    day: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    points: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    low_energy_bonus: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    multiplier: Mapped[float] = mapped_column(Float, default=1.0, nullable=False)
    actual_duration_minutes: Mapped[Optional[int]] = mapped_column(SmallInteger, nullable=True)
    actual_energy: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # 1-10
    feedback_logged: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    reviewed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
