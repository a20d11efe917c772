from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from day_planner.models.points_transaction import PointsKind


class PointsTransactionCreate(BaseModel):
    points: int
    reason: str = Field(..., min_length=1, max_length=300)
    kind: PointsKind
    day: date
    task_id: Optional[str] = None


class PointsTransactionResponse(BaseModel):
    model_config = {"from_attributes": True}
    id: int
    points: int
    reason: str
    kind: PointsKind
    day: date
    task_id: Optional[str]
    created_at: datetime


class RewardCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    cost: int = Field(..., ge=1)
    emoji: str = Field("🎁", max_length=10)
    category: str = Field("leisure", max_length=30)


class RewardUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    cost: Optional[int] = Field(None, ge=1)
    emoji: Optional[str] = Field(None, max_length=10)
    category: Optional[str] = Field(None, max_length=30)


class RewardResponse(RewardCreate):
    model_config = {"from_attributes": True}
    id: int


class PointsSummary(BaseModel):
    balance: int
    points_today: int
    perfect_day: bool
    recent: list[PointsTransactionResponse] = []
