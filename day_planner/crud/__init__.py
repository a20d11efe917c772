from day_planner.crud.tasks import crud_task
from day_planner.crud.learned_records import crud_learned
from day_planner.crud.points import crud_points
from day_planner.crud.completions import crud_completion
from day_planner.crud.day_logs import crud_day_log
from day_planner.crud.rewards import crud_reward

__all__ = [
    "crud_task",
    "crud_learned",
    "crud_points",
    "crud_completion",
    "crud_day_log",
    "crud_reward",
]
