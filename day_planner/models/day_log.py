import enum
from datetime import date

from sqlalchemy import JSON, Boolean, Date, Enum, Float, Integer, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from day_planner.models.base import Base, TimestampMixin


class SleepQuality(str, enum.Enum):
    terrible = "terrible"
    poor = "poor"
    ok = "ok"
    good = "good"
    great = "great"


SLEEP_SCORES: dict[SleepQuality, int] = {
    SleepQuality.terrible: 1,
    SleepQuality.poor: 3,
    SleepQuality.ok: 5,
    SleepQuality.good: 7,
    SleepQuality.great: 9,
}


def sleep_score(sleep) -> int:
    """Numeric sleep score; anything unrecognised counts as "ok"."""
    try:
        return SLEEP_SCORES[SleepQuality(sleep)]
    except ValueError:
        return SLEEP_SCORES[SleepQuality.ok]


class DayLog(Base, TimestampMixin):
    """Morning check-in answers and the ids planned for that day."""

    __tablename__ = "day_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    day: Mapped[date] = mapped_column(Date, unique=True, nullable=False)
    sleep: Mapped[SleepQuality] = mapped_column(Enum(SleepQuality), nullable=False)
    energy: Mapped[int] = mapped_column(SmallInteger, nullable=False)  # 1-10
    hours_available: Mapped[float] = mapped_column(Float, nullable=False)
    planned_task_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    perfect_day_awarded: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
