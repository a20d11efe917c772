from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class LearnedRecordBase(BaseModel):
    model_config = {"from_attributes": True}

    count: int = Field(0, ge=0)
    avg_duration_minutes: float = 0
    avg_energy: float = 0
    last_done_date: Optional[date] = None
    completed_today: bool = False


class ReviewEntry(BaseModel):
    """Actuals reported for one completed task during the evening review."""

    actual_duration_minutes: Optional[int] = Field(None, ge=1)
    actual_energy: Optional[float] = Field(None, ge=1, le=10)
