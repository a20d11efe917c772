"""Day plan builder: tiered allocation of scored tasks into a time budget.

Tasks are split into three tiers (mandatory, critical, normal), each ordered
by descending score. Mandatory tasks are always admitted. Critical tasks are
checked twice up front, once at their usual durations and once at their
shortest variants, to decide whether the day is under time pressure and
whether it is feasible at all; they may overflow the budget by a fixed grace
band. Normal tasks only go in when they fit exactly.

Nothing here raises for an infeasible day: problems are reported as alerts
on the returned plan.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Literal, Mapping, Optional

from day_planner.models.day_log import SleepQuality
from day_planner.schemas.learned import LearnedRecordBase
from day_planner.schemas.morning import MorningContext
from day_planner.schemas.task import TaskBase, TaskVariant
from day_planner.services.points_calculator import low_energy_multiplier, round_half_up
from day_planner.services.task_scorer import ScoredTask, score_task
from day_planner.services.variant_selector import pick_variant, shortest_variant

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Alert codes
# ---------------------------------------------------------------------------

ALERT_TIME_PRESSURE = "ALERT_TIME_PRESSURE"
ALERT_CRITICAL_SHORTFALL = "ALERT_CRITICAL_SHORTFALL"
ALERT_OVERDUE_PROMOTED = "ALERT_OVERDUE_PROMOTED"
ALERT_LOW_ENERGY = "ALERT_LOW_ENERGY"

# Overflow allowed when admitting critical tasks only
CRITICAL_GRACE_MINUTES = 15
# Share of the budget after which normal tasks switch to short variants
NORMAL_PRESSURE_RATIO = 0.90
OVERDUE_ALERT_THRESHOLD = 10
LOW_ENERGY_ALERT_MAX = 3


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


@dataclass
class PlanAlert:
    code: str
    level: Literal["error", "warning", "info"]
    message: str
    minutes: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "level": self.level,
            "message": self.message,
            "minutes": self.minutes,
        }


@dataclass
class ScheduledItem:
    task: TaskBase
    score: float
    scheduled_duration: float
    display_name: str
    variant: Optional[TaskVariant] = None
    pinned: bool = False
    compressed: bool = False

    @property
    def id(self) -> str:
        return self.task.id

    def to_dict(self) -> dict:
        return {
            "id": self.task.id,
            "name": self.task.name,
            "display_name": self.display_name,
            "score": self.score,
            "scheduled_duration": self.scheduled_duration,
            "variant": self.variant.model_dump() if self.variant else None,
            "pinned": self.pinned,
            "compressed": self.compressed,
            "subtasks": list(self.task.subtasks),
        }


@dataclass
class DayPlan:
    plan: list[ScheduledItem] = field(default_factory=list)
    alerts: list[PlanAlert] = field(default_factory=list)
    minutes_used: float = 0
    available_minutes: float = 0
    blocked: list[ScoredTask] = field(default_factory=list)

    @property
    def planned_ids(self) -> list[str]:
        return [item.id for item in self.plan]

    def to_dict(self) -> dict:
        return {
            "plan": [item.to_dict() for item in self.plan],
            "alerts": [alert.to_dict() for alert in self.alerts],
            "minutes_used": self.minutes_used,
            "available_minutes": self.available_minutes,
            "blocked": [entry.to_dict() for entry in self.blocked],
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _by_score(tasks: Iterable[ScoredTask]) -> list[ScoredTask]:
    # Stable: equal scores keep the order the tasks were given in
    return sorted(tasks, key=lambda s: s.score, reverse=True)


def _schedule(
    scored: ScoredTask,
    variant: Optional[TaskVariant],
    *,
    pinned: bool = False,
    compressed: bool = False,
) -> ScheduledItem:
    duration = variant.duration_minutes if variant else scored.effective_duration
    display_name = f"{scored.name} - {variant.name}" if variant else scored.name
    return ScheduledItem(
        task=scored.task,
        score=scored.score,
        scheduled_duration=duration,
        display_name=display_name,
        variant=variant,
        pinned=pinned,
        compressed=compressed,
    )


def _compressed_minutes(scored: ScoredTask) -> float:
    shortest = shortest_variant(scored.task)
    if shortest is None:
        return scored.effective_duration
    return min(scored.effective_duration, shortest.duration_minutes)


def _hours(minutes: float) -> float:
    return round_half_up(minutes / 60, 1)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def build_day_plan(
    tasks: Iterable[TaskBase],
    context: MorningContext,
    learned_history: Mapping[str, LearnedRecordBase],
    today: Optional[date] = None,
) -> DayPlan:
    today = today or date.today()
    available_minutes = context.hours_available * 60
    result = DayPlan(available_minutes=available_minutes)

    scored: list[ScoredTask] = []
    for task in tasks:
        entry = score_task(task, context, learned_history, today)
        if entry is None:
            continue
        if entry.blocked:
            result.blocked.append(entry)
        else:
            scored.append(entry)

    mandatory = _by_score(s for s in scored if s.task.mandatory)
    critical = _by_score(s for s in scored if not s.task.mandatory and s.task.critical)
    normal = _by_score(s for s in scored if not s.task.mandatory and not s.task.critical)

    minutes_used: float = 0

    # ── Mandatory: always in, whatever the budget ──────────────────────────
    for entry in mandatory:
        variant = pick_variant(
            entry.task, context.energy, context.sleep, available_minutes - minutes_used
        )
        item = _schedule(entry, variant, pinned=True)
        result.plan.append(item)
        minutes_used += item.scheduled_duration

    # ── Critical: detect time pressure at full and compressed durations ────
    remaining_for_critical = available_minutes - minutes_used
    critical_minutes_normal = sum(s.effective_duration for s in critical)
    critical_minutes_compressed = sum(_compressed_minutes(s) for s in critical)

    # An empty critical tier is never under pressure, even when mandatory tasks overflow
    time_pressure = bool(critical) and critical_minutes_normal > remaining_for_critical
    can_fit_compressed = critical_minutes_compressed <= remaining_for_critical

    if time_pressure:
        if can_fit_compressed:
            result.alerts.append(
                PlanAlert(
                    code=ALERT_TIME_PRESSURE,
                    level="warning",
                    message=(
                        "Time is tight: switching critical tasks to their shorter "
                        "variants to fit your day."
                    ),
                )
            )
        else:
            shortfall = int(round_half_up(critical_minutes_compressed - remaining_for_critical))
            result.alerts.append(
                PlanAlert(
                    code=ALERT_CRITICAL_SHORTFALL,
                    level="error",
                    message=(
                        f"Critical tasks need {_hours(critical_minutes_compressed)}h even at "
                        f"their shortest variants, but only {_hours(remaining_for_critical)}h "
                        f"remain. You are {shortfall} min short; consider deferring a task."
                    ),
                    minutes=shortfall,
                )
            )
        logger.info(
            "Time pressure: critical needs %s min (%s compressed), %s min left",
            critical_minutes_normal,
            critical_minutes_compressed,
            remaining_for_critical,
        )

    # With no budget at all only mandatory tasks are planned
    admissible = critical if available_minutes > 0 else []
    for entry in admissible:
        variant = pick_variant(
            entry.task,
            context.energy,
            context.sleep,
            available_minutes - minutes_used,
            time_pressure,
        )
        item = _schedule(entry, variant, compressed=time_pressure and variant is not None)
        if minutes_used + item.scheduled_duration <= available_minutes + CRITICAL_GRACE_MINUTES:
            result.plan.append(item)
            minutes_used += item.scheduled_duration
            logger.debug("Admitted critical %s (%s min)", entry.id, item.scheduled_duration)
        else:
            logger.debug("Skipped critical %s: %s min does not fit", entry.id, item.scheduled_duration)

    # ── Normal: only what fits exactly ─────────────────────────────────────
    for entry in normal:
        if minutes_used >= available_minutes:
            break
        normal_pressure = minutes_used / available_minutes > NORMAL_PRESSURE_RATIO
        variant = pick_variant(
            entry.task,
            context.energy,
            context.sleep,
            available_minutes - minutes_used,
            normal_pressure,
        )
        item = _schedule(entry, variant, compressed=normal_pressure and variant is not None)
        if minutes_used + item.scheduled_duration <= available_minutes:
            result.plan.append(item)
            minutes_used += item.scheduled_duration
            logger.debug("Admitted %s (%s min)", entry.id, item.scheduled_duration)

    # ── Informational alerts ───────────────────────────────────────────────
    if any(s.overdue_points > OVERDUE_ALERT_THRESHOLD for s in scored):
        result.alerts.append(
            PlanAlert(
                code=ALERT_OVERDUE_PROMOTED,
                level="info",
                message="Overdue tasks auto-promoted.",
            )
        )
    if context.energy <= LOW_ENERGY_ALERT_MAX or context.sleep == SleepQuality.terrible:
        multiplier = low_energy_multiplier(context.energy)
        bonus_text = (
            f"Low-energy bonus x{multiplier:g} points active today!"
            if multiplier > 1.0
            else "Go gently today."
        )
        result.alerts.append(
            PlanAlert(
                code=ALERT_LOW_ENERGY,
                level="info",
                message=f"Low energy detected: variants scaled down. {bonus_text}",
            )
        )

    result.minutes_used = minutes_used
    logger.info(
        "Day plan for %s: %d items, %s/%s min, %d blocked, %d alerts",
        today,
        len(result.plan),
        minutes_used,
        available_minutes,
        len(result.blocked),
        len(result.alerts),
    )
    return result
