from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from day_planner.models.task import Frequency, TaskCategory, TimeOfDay, Weekday


class TaskVariant(BaseModel):
    """A lighter or shorter way of doing a task."""

    name: str = Field(..., min_length=1, max_length=200)
    duration_minutes: int = Field(..., ge=0)
    energy_required: int = Field(3, ge=1, le=10)


class TaskBase(BaseModel):
    model_config = {"from_attributes": True}

    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=200)
    mandatory: bool = False
    critical: bool = False
    category: Optional[TaskCategory] = None
    project: Optional[str] = Field(None, max_length=100)
    energy_required: int = Field(5, ge=1, le=10)
    duration_minutes: int = Field(30, ge=1)
    frequency: Frequency = Frequency.once
    deadline: Optional[date] = None
    time_of_day: TimeOfDay = TimeOfDay.any
    days_available: list[Weekday] = []
    variants: list[TaskVariant] = []
    subtasks: list[str] = []
    blockers: list[str] = []

    @field_validator("id", "name", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("variants", "subtasks", "blockers", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator("days_available", mode="before")
    @classmethod
    def normalise_day_codes(cls, v):
        if v is None:
            return []
        if isinstance(v, (list, tuple, set)):
            return [d.strip().lower() if isinstance(d, str) else d for d in v]
        return v


class TaskCreate(TaskBase):
    pass


class TaskUpdate(BaseModel):
    """Partial update; fields left unset keep their stored value."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    mandatory: Optional[bool] = None
    critical: Optional[bool] = None
    category: Optional[TaskCategory] = None
    project: Optional[str] = Field(None, max_length=100)
    energy_required: Optional[int] = Field(None, ge=1, le=10)
    duration_minutes: Optional[int] = Field(None, ge=1)
    frequency: Optional[Frequency] = None
    deadline: Optional[date] = None
    time_of_day: Optional[TimeOfDay] = None
    days_available: Optional[list[Weekday]] = None
    variants: Optional[list[TaskVariant]] = None
    subtasks: Optional[list[str]] = None
    blockers: Optional[list[str]] = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("variants", "subtasks", "blockers", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator("days_available", mode="before")
    @classmethod
    def normalise_day_codes(cls, v):
        if v is None:
            return []
        if isinstance(v, (list, tuple, set)):
            return [d.strip().lower() if isinstance(d, str) else d for d in v]
        return v
