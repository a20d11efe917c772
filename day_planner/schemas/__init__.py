from day_planner.schemas.task import TaskVariant, TaskBase, TaskCreate, TaskUpdate
from day_planner.schemas.morning import MorningContext
from day_planner.schemas.completion import TaskCompletionCreate
from day_planner.schemas.learned import LearnedRecordBase, ReviewEntry
from day_planner.schemas.points import (
    PointsTransactionCreate,
    PointsTransactionResponse,
    RewardCreate,
    RewardUpdate,
    RewardResponse,
    PointsSummary,
)
