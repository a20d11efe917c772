"""Learning from reported actuals: streaming means per task."""

from datetime import date
from typing import Mapping, Optional

from day_planner.schemas.learned import LearnedRecordBase, ReviewEntry
from day_planner.services.points_calculator import round_half_up


def apply_review(
    learned_history: Mapping[str, LearnedRecordBase],
    task_id: str,
    actual_duration_minutes: Optional[int] = None,
    actual_energy: Optional[float] = None,
    *,
    completed_date: date,
) -> LearnedRecordBase:
    """Fold one completion into the task's record and return the new record.

    The history mapping is left untouched. Every sample weighs the same; there
    is no decay of older samples.
    """
    prev = learned_history.get(task_id) or LearnedRecordBase()
    count = prev.count + 1

    avg_duration = prev.avg_duration_minutes
    if actual_duration_minutes:
        avg_duration = round_half_up(
            (prev.avg_duration_minutes * prev.count + actual_duration_minutes) / count
        )

    avg_energy = prev.avg_energy
    if actual_energy:
        avg_energy = round_half_up((prev.avg_energy * prev.count + actual_energy) / count, 1)

    return prev.model_copy(
        update={
            "count": count,
            "avg_duration_minutes": avg_duration,
            "avg_energy": avg_energy,
            "last_done_date": completed_date,
            "completed_today": True,
        }
    )


def fold_reviews(
    learned_history: Mapping[str, LearnedRecordBase],
    reviews: Mapping[str, Optional[ReviewEntry]],
    completed_date: date,
) -> dict[str, LearnedRecordBase]:
    """Apply a batch of reviews keyed by task id; returns a new history."""
    history = dict(learned_history)
    for task_id, review in reviews.items():
        review = review or ReviewEntry()
        history[task_id] = apply_review(
            history,
            task_id,
            review.actual_duration_minutes,
            review.actual_energy,
            completed_date=completed_date,
        )
    return history
