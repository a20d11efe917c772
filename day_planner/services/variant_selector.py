"""Choosing which variant of a task fits the time and energy available."""

from typing import Optional

from day_planner.models.day_log import sleep_score
from day_planner.schemas.task import TaskBase, TaskVariant

LOW_ENERGY_THRESHOLD = 3.5


def sorted_variants(task: TaskBase) -> list[TaskVariant]:
    """Variants shortest first; equal durations keep their listed order."""
    return sorted(task.variants, key=lambda v: v.duration_minutes)


def shortest_variant(task: TaskBase) -> Optional[TaskVariant]:
    variants = sorted_variants(task)
    return variants[0] if variants else None


def blended_energy(energy: int, sleep) -> float:
    return (energy + sleep_score(sleep) / 2) / 1.5


def pick_variant(
    task: TaskBase,
    energy: int,
    sleep,
    time_remaining: float,
    time_pressure: bool = False,
) -> Optional[TaskVariant]:
    """Pick a variant of `task`, or None when it has none (nominal is used)."""
    variants = sorted_variants(task)
    if not variants:
        return None

    fitting = [v for v in variants if v.duration_minutes <= time_remaining]

    # Under pressure speed wins; energy is ignored
    if time_pressure:
        return fitting[0] if fitting else variants[0]

    if not fitting:
        # Last resort, the plan may overflow slightly
        return variants[0]

    effective_energy = blended_energy(energy, sleep)
    if effective_energy < LOW_ENERGY_THRESHOLD:
        return fitting[0]

    best = fitting[0]
    for variant in fitting[1:]:
        if abs(variant.energy_required - effective_energy) < abs(
            best.energy_required - effective_energy
        ):
            best = variant
    return best
