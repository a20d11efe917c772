"""Day session: morning planning, completions, evening review and rewards.

This is the imperative shell around the pure engine modules. Every function
takes an AsyncSession and flushes; committing is up to the caller.
"""

import logging
from datetime import date
from typing import Mapping, NamedTuple, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from day_planner.config import get_settings
from day_planner.crud import (
    crud_completion,
    crud_day_log,
    crud_learned,
    crud_points,
    crud_reward,
    crud_task,
)
from day_planner.models.points_transaction import PointsKind
from day_planner.schemas.completion import TaskCompletionCreate
from day_planner.schemas.learned import LearnedRecordBase, ReviewEntry
from day_planner.schemas.morning import MorningContext
from day_planner.schemas.points import PointsSummary, PointsTransactionResponse, RewardResponse
from day_planner.services.day_plan_builder import DayPlan, build_day_plan
from day_planner.services.learning_service import apply_review
from day_planner.services.points_calculator import (
    FEEDBACK_POINTS,
    PERFECT_DAY_BONUS,
    calc_points,
    is_perfect_day,
)

logger = logging.getLogger(__name__)


class CompletionResult(NamedTuple):
    task_id: str
    points: int
    low_energy_bonus: bool
    perfect_day: bool
    already_completed: bool = False


async def plan_day(db: AsyncSession, morning: MorningContext, today: date) -> DayPlan:
    """Build today's plan from the stored backlog and learned history."""
    reset = await crud_learned.reset_completed_flags(db, before=today)
    if reset:
        logger.debug("Cleared completed_today on %d learned records", reset)

    tasks = await crud_task.get_all_as_schema(db)
    history = await crud_learned.get_history(db)
    plan = build_day_plan(tasks, morning, history, today=today)

    await crud_day_log.record_check_in(
        db, day=today, morning=morning, planned_task_ids=plan.planned_ids
    )
    return plan


async def complete_task(db: AsyncSession, task_id: str, day: date) -> CompletionResult:
    """Mark a task done for `day` and award its points.

    Completing the same task twice on one day awards nothing the second time.
    """
    log = await crud_day_log.get_by_day(db, day)
    if log is None:
        raise ValueError(f"No morning check-in recorded for {day}; plan the day first.")

    existing = await crud_completion.get_by_task_and_day(db, task_id, day)
    if existing is not None:
        return CompletionResult(
            task_id=task_id,
            points=existing.points,
            low_energy_bonus=existing.low_energy_bonus,
            perfect_day=log.perfect_day_awarded,
            already_completed=True,
        )

    row = await crud_task.get(db, task_id)
    if row is None:
        raise ValueError(f"Task {task_id!r} not found.")
    task = crud_task.to_schema(row)

    result = calc_points(task, log.energy)
    reason = f"{task.name} (low-energy bonus!)" if result.low_energy_bonus else task.name
    await crud_points.append(
        db, points=result.points, reason=reason, kind=PointsKind.task, day=day, task_id=task_id
    )
    await crud_completion.create(
        db,
        obj_in=TaskCompletionCreate(
            task_id=task_id,
            day=day,
            points=result.points,
            low_energy_bonus=result.low_energy_bonus,
            multiplier=result.multiplier,
        ),
    )
    logger.info("Completed %s on %s: +%d pts (x%s)", task_id, day, result.points, result.multiplier)

    perfect = False
    if not log.perfect_day_awarded:
        completed_ids = [c.task_id for c in await crud_completion.get_for_day(db, day)]
        if is_perfect_day(log.planned_task_ids, completed_ids):
            await crud_points.append(
                db,
                points=PERFECT_DAY_BONUS,
                reason="PERFECT DAY - all planned tasks completed!",
                kind=PointsKind.perfect_day,
                day=day,
            )
            log.perfect_day_awarded = True
            await db.flush()
            perfect = True
            logger.info("Perfect day on %s: +%d pts", day, PERFECT_DAY_BONUS)

    return CompletionResult(
        task_id=task_id,
        points=result.points,
        low_energy_bonus=result.low_energy_bonus,
        perfect_day=perfect or log.perfect_day_awarded,
    )


async def submit_review(
    db: AsyncSession,
    day: date,
    reviews: Optional[Mapping[str, ReviewEntry]] = None,
) -> dict[str, LearnedRecordBase]:
    """Fold the day's completions and their actuals into the learned history.

    Each completion is reviewed once. Reporting an actual duration earns
    FEEDBACK_POINTS, once per task and day.
    """
    reviews = reviews or {}
    history = await crud_learned.get_history(db)
    reviewed = 0

    for completion in await crud_completion.get_for_day(db, day):
        if completion.reviewed:
            continue
        entry = reviews.get(completion.task_id) or ReviewEntry()
        record = apply_review(
            history,
            completion.task_id,
            entry.actual_duration_minutes,
            entry.actual_energy,
            completed_date=day,
        )
        history[completion.task_id] = record
        await crud_learned.save_record(db, completion.task_id, record)

        completion.actual_duration_minutes = entry.actual_duration_minutes
        completion.actual_energy = entry.actual_energy
        completion.reviewed = True
        if entry.actual_duration_minutes and not completion.feedback_logged:
            await crud_points.append(
                db,
                points=FEEDBACK_POINTS,
                reason="Feedback logged for task",
                kind=PointsKind.feedback,
                day=day,
                task_id=completion.task_id,
            )
            completion.feedback_logged = True
        reviewed += 1

    await db.flush()
    logger.info("Review for %s applied to %d tasks", day, reviewed)
    return history


async def list_rewards(db: AsyncSession) -> list[RewardResponse]:
    """The reward shop, cheapest first."""
    return [RewardResponse.model_validate(r) for r in await crud_reward.get_all(db)]


async def redeem_reward(db: AsyncSession, reward_id: int, day: date) -> int:
    """Spend points on a reward; returns the new balance."""
    reward = await crud_reward.get(db, reward_id)
    if reward is None:
        raise ValueError(f"Reward {reward_id} not found.")
    balance = await crud_points.get_balance(db)
    if balance < reward.cost:
        raise ValueError(
            f"Not enough points for {reward.name!r}: need {reward.cost}, have {balance}."
        )
    await crud_points.append(
        db,
        points=-reward.cost,
        reason=f"Redeemed: {reward.name}",
        kind=PointsKind.redemption,
        day=day,
    )
    logger.info("Redeemed reward %s for %d pts", reward.name, reward.cost)
    return balance - reward.cost


async def get_points_summary(db: AsyncSession, day: date) -> PointsSummary:
    limit = get_settings().POINTS_LOG_LIMIT
    recent = await crud_points.get_recent(db, limit=limit)
    return PointsSummary(
        balance=await crud_points.get_balance(db),
        points_today=await crud_points.earned_on(db, day),
        perfect_day=await crud_points.has_perfect_day(db, day),
        recent=[PointsTransactionResponse.model_validate(e) for e in recent],
    )
