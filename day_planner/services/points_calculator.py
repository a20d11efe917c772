"""Points economy: base points, low-energy multiplier and fixed bonuses."""

import math
from typing import Iterable, NamedTuple

BASE_POINTS_MIN = 1
FEEDBACK_POINTS = 15
PERFECT_DAY_BONUS = 200

# The worse you feel in the morning, the more credit a task is worth
LOW_ENERGY_MULTIPLIERS: dict[int, float] = {1: 3.0, 2: 2.5, 3: 2.0, 4: 1.5}


class PointsResult(NamedTuple):
    base: int
    points: int
    low_energy_bonus: bool
    multiplier: float


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 upwards instead of to the nearest even number."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def low_energy_multiplier(morning_energy: int) -> float:
    return LOW_ENERGY_MULTIPLIERS.get(morning_energy, 1.0)


def calc_points(task, morning_energy: int) -> PointsResult:
    """Points for completing `task` on a day that started at `morning_energy`.

    `task` only needs `energy_required` and `duration_minutes`.
    """
    base = max(
        BASE_POINTS_MIN,
        int(round_half_up(task.energy_required * task.duration_minutes / 10)),
    )
    multiplier = low_energy_multiplier(morning_energy)
    low_energy_bonus = multiplier > 1.0
    points = int(round_half_up(base * multiplier)) if low_energy_bonus else base
    return PointsResult(
        base=base, points=points, low_energy_bonus=low_energy_bonus, multiplier=multiplier
    )


def is_perfect_day(planned_ids: Iterable[str], completed_ids: Iterable[str]) -> bool:
    """True when something was planned and every planned item is done."""
    planned = set(planned_ids)
    if not planned:
        return False
    return planned <= set(completed_ids)
