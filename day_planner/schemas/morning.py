from pydantic import BaseModel, Field

from day_planner.models.day_log import SleepQuality


class MorningContext(BaseModel):
    """Answers to the three morning questions; one per planning run."""

    model_config = {"frozen": True, "from_attributes": True}

    sleep: SleepQuality = SleepQuality.ok
    hours_available: float = Field(8, ge=0, le=24)
    energy: int = Field(6, ge=1, le=10)
