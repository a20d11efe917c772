"""Priority scoring of a single task against today's context and history."""

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Optional

from day_planner.models.day_log import sleep_score
from day_planner.models.task import FREQUENCY_INTERVAL_DAYS, weekday_code
from day_planner.schemas.learned import LearnedRecordBase
from day_planner.schemas.morning import MorningContext
from day_planner.schemas.task import TaskBase

CRITICALITY_MANDATORY = 25
CRITICALITY_CRITICAL = 15
ENERGY_FIT_MAX = 20
ENERGY_FIT_PENALTY = 2.5
OVERDUE_MAX = 15

# (max days left, urgency); first matching band wins
URGENCY_BANDS: list[tuple[int, int]] = [
    (0, 30),
    (1, 28),
    (3, 22),
    (7, 16),
    (14, 10),
    (30, 5),
]
URGENCY_FAR = 1


@dataclass
class ScoredTask:
    task: TaskBase
    score: float
    effective_duration: float
    effective_energy: float
    urgency: int = 0
    criticality: int = 0
    energy_fit: float = 0.0
    overdue_points: float = 0.0
    blocked: bool = False
    blocked_by: list[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.task.id

    @property
    def name(self) -> str:
        return self.task.name

    def to_dict(self) -> dict:
        return {
            "id": self.task.id,
            "name": self.task.name,
            "score": self.score,
            "urgency": self.urgency,
            "criticality": self.criticality,
            "energy_fit": self.energy_fit,
            "overdue_points": self.overdue_points,
            "effective_duration": self.effective_duration,
            "effective_energy": self.effective_energy,
            "blocked": self.blocked,
            "blocked_by": list(self.blocked_by),
        }


def urgency_for(deadline: Optional[date], today: date) -> int:
    if deadline is None:
        return 0
    days_left = (deadline - today).days
    for max_days, urgency in URGENCY_BANDS:
        if days_left <= max_days:
            return urgency
    return URGENCY_FAR


def overdue_points_for(task: TaskBase, learned: Optional[LearnedRecordBase], today: date) -> float:
    if learned is None or learned.last_done_date is None:
        return 0.0
    expected = FREQUENCY_INTERVAL_DAYS.get(task.frequency)
    if not expected:
        return 0.0
    days_since = (today - learned.last_done_date).days
    if days_since <= expected:
        return 0.0
    return min(OVERDUE_MAX, (days_since - expected) / expected * OVERDUE_MAX)


def score_task(
    task: TaskBase,
    context: MorningContext,
    learned_history: Mapping[str, LearnedRecordBase],
    today: date,
) -> Optional[ScoredTask]:
    """Score `task` for `today`.

    Returns None when the task is not available on today's weekday, and a
    zero-score record flagged `blocked` when a blocker is not done yet.
    """
    if task.days_available and weekday_code(today) not in task.days_available:
        return None

    learned = learned_history.get(task.id)
    # Zero averages mean "no actual reported yet"
    effective_duration = (learned and learned.avg_duration_minutes) or task.duration_minutes
    effective_energy = (learned and learned.avg_energy) or task.energy_required

    blocked_by = [
        b
        for b in task.blockers
        if not (learned_history.get(b) is not None and learned_history[b].completed_today)
    ]
    if blocked_by:
        return ScoredTask(
            task=task,
            score=0,
            effective_duration=effective_duration,
            effective_energy=effective_energy,
            blocked=True,
            blocked_by=blocked_by,
        )

    urgency = urgency_for(task.deadline, today)
    if task.mandatory:
        criticality = CRITICALITY_MANDATORY
    elif task.critical:
        criticality = CRITICALITY_CRITICAL
    else:
        criticality = 0

    # Poor sleep leans harder on picking energy-appropriate work
    sleep_multiplier = 1 + (5 - sleep_score(context.sleep)) * 0.1
    energy_diff = abs(context.energy - effective_energy)
    energy_fit = max(0, ENERGY_FIT_MAX - energy_diff * ENERGY_FIT_PENALTY) * sleep_multiplier

    overdue = overdue_points_for(task, learned, today)

    return ScoredTask(
        task=task,
        score=urgency + criticality + energy_fit + overdue,
        effective_duration=effective_duration,
        effective_energy=effective_energy,
        urgency=urgency,
        criticality=criticality,
        energy_fit=energy_fit,
        overdue_points=overdue,
    )
