from day_planner.models.base import Base, TimestampMixin
from day_planner.models.task import (
    Task,
    Frequency,
    FREQUENCY_INTERVAL_DAYS,
    TaskCategory,
    TimeOfDay,
    Weekday,
    weekday_code,
)
from day_planner.models.learned_record import LearnedRecord
from day_planner.models.points_transaction import PointsTransaction, PointsKind
from day_planner.models.task_completion import TaskCompletion
from day_planner.models.day_log import DayLog, SleepQuality, SLEEP_SCORES, sleep_score
from day_planner.models.reward import Reward

__all__ = [
    "Base",
    "TimestampMixin",
    "Task",
    "Frequency",
    "FREQUENCY_INTERVAL_DAYS",
    "TaskCategory",
    "TimeOfDay",
    "Weekday",
    "weekday_code",
    "LearnedRecord",
    "PointsTransaction",
    "PointsKind",
    "TaskCompletion",
    "DayLog",
    "SleepQuality",
    "SLEEP_SCORES",
    "sleep_score",
    "Reward",
]
