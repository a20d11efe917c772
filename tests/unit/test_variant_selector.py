"""Unit tests for variant selection."""
import pytest

from day_planner.services.variant_selector import (
    blended_energy,
    pick_variant,
    shortest_variant,
)

DINNER_VARIANTS = [
    {"name": "Cook proper dinner", "duration_minutes": 60, "energy_required": 5},
    {"name": "Takeaway", "duration_minutes": 10, "energy_required": 1},
    {"name": "Simple pasta", "duration_minutes": 25, "energy_required": 3},
]


@pytest.fixture
def dinner(make_task):
    return make_task("dinner", duration_minutes=45, variants=DINNER_VARIANTS)


def test_no_variants_returns_none(make_task):
    assert pick_variant(make_task(), 6, "ok", 480) is None
    assert pick_variant(make_task(), 6, "ok", 480, time_pressure=True) is None
    assert shortest_variant(make_task()) is None


def test_shortest_variant(dinner):
    assert shortest_variant(dinner).name == "Takeaway"


@pytest.mark.parametrize("energy,sleep,expected", [
    (6, "ok", (6 + 2.5) / 1.5),
    (1, "terrible", (1 + 0.5) / 1.5),
    (10, "great", (10 + 4.5) / 1.5),
])
def test_blended_energy(energy, sleep, expected):
    assert blended_energy(energy, sleep) == pytest.approx(expected)


def test_pressure_picks_shortest_fitting(dinner):
    assert pick_variant(dinner, 10, "great", 30, time_pressure=True).name == "Takeaway"


def test_pressure_falls_back_to_global_shortest(dinner):
    assert pick_variant(dinner, 10, "great", 5, time_pressure=True).name == "Takeaway"


def test_pressure_returns_fitting_variant_when_one_exists(make_task):
    task = make_task(variants=[
        {"name": "long", "duration_minutes": 50, "energy_required": 5},
        {"name": "medium", "duration_minutes": 20, "energy_required": 5},
        {"name": "short", "duration_minutes": 12, "energy_required": 5},
    ])
    for remaining in (12, 15, 20, 49, 50, 100):
        variant = pick_variant(task, 6, "ok", remaining, time_pressure=True)
        assert variant.duration_minutes <= remaining


def test_nothing_fits_returns_shortest(dinner):
    assert pick_variant(dinner, 8, "good", 5).name == "Takeaway"


def test_low_energy_prefers_shortest_fitting(dinner):
    # (2 + 1.5) / 1.5 = 2.33 < 3.5
    assert pick_variant(dinner, 2, "poor", 480).name == "Takeaway"


def test_normal_energy_picks_closest_match(dinner):
    # (6 + 2.5) / 1.5 = 5.67 → closest is energy 5
    assert pick_variant(dinner, 6, "ok", 480).name == "Cook proper dinner"


def test_energy_match_only_among_fitting(dinner):
    assert pick_variant(dinner, 6, "ok", 30).name == "Simple pasta"


def test_energy_match_tie_keeps_first(make_task):
    # effective energy (4 + 3.5) / 1.5 = 5.0; both variants are 1 away
    task = make_task(variants=[
        {"name": "shorter", "duration_minutes": 10, "energy_required": 4},
        {"name": "longer", "duration_minutes": 20, "energy_required": 6},
    ])
    assert pick_variant(task, 4, "good", 480).name == "shorter"


def test_equal_durations_keep_listed_order(make_task):
    task = make_task(variants=[
        {"name": "first", "duration_minutes": 10, "energy_required": 2},
        {"name": "second", "duration_minutes": 10, "energy_required": 2},
    ])
    assert pick_variant(task, 6, "ok", 5, time_pressure=True).name == "first"
