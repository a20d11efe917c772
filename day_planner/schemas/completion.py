from datetime import date

from pydantic import BaseModel, Field


class TaskCompletionCreate(BaseModel):
    task_id: str = Field(..., min_length=1, max_length=64)
    day: date
    points: int = Field(0, ge=0)
    low_energy_bonus: bool = False
    multiplier: float = Field(1.0, ge=1.0)
