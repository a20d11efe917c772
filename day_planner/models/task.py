import enum
from datetime import date
from typing import Optional

from sqlalchemy import JSON, Boolean, Date, Enum, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from day_planner.models.base import Base, TimestampMixin


class Frequency(str, enum.Enum):
    daily = "daily"
    twice_daily = "2x_daily"
    three_weekly = "3x_weekly"
    twice_weekly = "2x_weekly"
    weekly = "weekly"
    biweekly = "biweekly"
    monthly = "monthly"
    once = "once"


# Expected days between repetitions; drives the overdue bonus
FREQUENCY_INTERVAL_DAYS: dict[Frequency, float] = {
    Frequency.daily: 1,
    Frequency.twice_daily: 0.5,
    Frequency.three_weekly: 2.33,
    Frequency.twice_weekly: 3.5,
    Frequency.weekly: 7,
    Frequency.biweekly: 14,
    Frequency.monthly: 30,
    Frequency.once: 9999,
}


class TaskCategory(str, enum.Enum):
    work = "work"
    health = "health"
    admin = "admin"
    personal = "personal"
    home = "home"
    finance = "finance"
    social = "social"


class TimeOfDay(str, enum.Enum):
    morning = "morning"
    afternoon = "afternoon"
    evening = "evening"
    any = "any"


class Weekday(str, enum.Enum):
    mon = "mon"
    tue = "tue"
    wed = "wed"
    thu = "thu"
    fri = "fri"
    sat = "sat"
    sun = "sun"


# Indexed by date.weekday(): 0=Mon
WEEKDAY_CODES: list[Weekday] = list(Weekday)


def weekday_code(day: date) -> Weekday:
    return WEEKDAY_CODES[day.weekday()]


class Task(Base, TimestampMixin):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    mandatory: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    critical: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    category: Mapped[Optional[TaskCategory]] = mapped_column(Enum(TaskCategory), nullable=True)
    project: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    energy_required: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=5)
    duration_minutes: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=30)
    frequency: Mapped[Frequency] = mapped_column(
        Enum(Frequency), nullable=False, default=Frequency.once
    )
    deadline: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    time_of_day: Mapped[TimeOfDay] = mapped_column(
        Enum(TimeOfDay), nullable=False, default=TimeOfDay.any
    )
    # Weekday codes ("mon".."sun")
    days_available: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    # [{"name": ..., "duration_minutes": ..., "energy_required": ...}]
    variants: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    subtasks: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    # Task ids that must be completed today first
    blockers: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
