"""Unit tests for task priority scoring."""
from datetime import date, timedelta

import pytest

from day_planner.schemas.learned import LearnedRecordBase
from day_planner.schemas.morning import MorningContext
from day_planner.services.task_scorer import (
    overdue_points_for,
    score_task,
    urgency_for,
)


@pytest.mark.parametrize("days_left,expected", [
    (-3, 30),
    (0, 30),
    (1, 28),
    (2, 22),
    (3, 22),
    (5, 16),
    (7, 16),
    (10, 10),
    (14, 10),
    (20, 5),
    (30, 5),
    (31, 1),
    (365, 1),
])
def test_urgency_bands(today, days_left, expected):
    assert urgency_for(today + timedelta(days=days_left), today) == expected


def test_no_deadline_has_no_urgency(today):
    assert urgency_for(None, today) == 0


def test_deadline_today_is_maximum_urgency(make_task, morning, today):
    scored = score_task(make_task(deadline=today), morning, {}, today)
    assert scored.urgency == 30


def test_unavailable_weekday_returns_none(make_task, morning, today):
    # TODAY is a Wednesday
    task = make_task(days_available=["mon", "tue"])
    assert score_task(task, morning, {}, today) is None


def test_available_weekday_is_scored(make_task, morning, today):
    task = make_task(days_available=["wed"])
    assert score_task(task, morning, {}, today) is not None


def test_empty_days_available_means_every_day(make_task, morning, today):
    assert score_task(make_task(days_available=[]), morning, {}, today) is not None


@pytest.mark.parametrize("flags,expected", [
    ({"mandatory": True}, 25),
    ({"mandatory": True, "critical": True}, 25),
    ({"critical": True}, 15),
    ({}, 0),
])
def test_criticality(make_task, morning, today, flags, expected):
    assert score_task(make_task(**flags), morning, {}, today).criticality == expected


def test_perfect_energy_match_at_ok_sleep(make_task, today):
    context = MorningContext(sleep="ok", hours_available=8, energy=5)
    scored = score_task(make_task(energy_required=5), context, {}, today)
    assert scored.energy_fit == pytest.approx(20)
    assert scored.score == pytest.approx(20)


def test_energy_fit_is_symmetric(make_task, today):
    context = MorningContext(sleep="ok", hours_available=8, energy=5)
    above = score_task(make_task(energy_required=7), context, {}, today)
    below = score_task(make_task(energy_required=3), context, {}, today)
    assert above.energy_fit == pytest.approx(15)
    assert below.energy_fit == pytest.approx(15)


def test_energy_fit_floors_at_zero(make_task, today):
    context = MorningContext(sleep="ok", hours_available=8, energy=1)
    assert score_task(make_task(energy_required=10), context, {}, today).energy_fit == 0


@pytest.mark.parametrize("sleep,expected", [
    ("terrible", 28.0),   # 1.4x
    ("poor", 24.0),       # 1.2x
    ("ok", 20.0),
    ("good", 16.0),       # 0.8x
    ("great", 12.0),      # 0.6x
])
def test_sleep_scales_energy_fit(make_task, today, sleep, expected):
    context = MorningContext(sleep=sleep, hours_available=8, energy=5)
    assert score_task(make_task(energy_required=5), context, {}, today).energy_fit == pytest.approx(
        expected
    )


def test_learned_averages_override_nominal(make_task, morning, today):
    history = {"task": LearnedRecordBase(count=3, avg_duration_minutes=50, avg_energy=6)}
    scored = score_task(make_task(), morning, history, today)
    assert scored.effective_duration == 50
    assert scored.effective_energy == 6


def test_zero_learned_averages_fall_back_to_nominal(make_task, morning, today):
    history = {"task": LearnedRecordBase(count=1, avg_duration_minutes=0, avg_energy=0)}
    scored = score_task(make_task(), morning, history, today)
    assert scored.effective_duration == 30
    assert scored.effective_energy == 5


def test_overdue_bonus_scales_with_overshoot(make_task, today):
    task = make_task(frequency="weekly")
    learned = LearnedRecordBase(count=1, last_done_date=today - timedelta(days=14))
    # 7 days over a 7-day interval → full 15
    assert overdue_points_for(task, learned, today) == pytest.approx(15)

    learned = LearnedRecordBase(count=1, last_done_date=today - timedelta(days=9))
    assert overdue_points_for(task, learned, today) == pytest.approx(2 / 7 * 15)


def test_overdue_bonus_is_capped(make_task, today):
    task = make_task(frequency="daily")
    learned = LearnedRecordBase(count=1, last_done_date=today - timedelta(days=30))
    assert overdue_points_for(task, learned, today) == 15


def test_not_overdue_within_interval(make_task, today):
    task = make_task(frequency="weekly")
    learned = LearnedRecordBase(count=1, last_done_date=today - timedelta(days=7))
    assert overdue_points_for(task, learned, today) == 0


def test_overdue_needs_last_done(make_task, today):
    assert overdue_points_for(make_task(frequency="daily"), None, today) == 0
    assert overdue_points_for(make_task(frequency="daily"), LearnedRecordBase(), today) == 0


def test_once_is_effectively_never_overdue(make_task, today):
    learned = LearnedRecordBase(count=1, last_done_date=today - timedelta(days=400))
    assert overdue_points_for(make_task(frequency="once"), learned, today) == 0


def test_blocked_when_blocker_not_completed_today(make_task, morning, today):
    task = make_task(blockers=["prep"], mandatory=True, deadline=today)
    history = {"prep": LearnedRecordBase(count=2, completed_today=False)}
    scored = score_task(task, morning, history, today)
    assert scored.blocked is True
    assert scored.score == 0
    assert scored.blocked_by == ["prep"]


def test_blocked_when_blocker_has_no_record(make_task, morning, today):
    scored = score_task(make_task(blockers=["prep", "other"]), morning, {}, today)
    assert scored.blocked is True
    assert scored.blocked_by == ["prep", "other"]


def test_unblocked_when_blockers_completed_today(make_task, morning, today):
    history = {"prep": LearnedRecordBase(count=1, completed_today=True)}
    scored = score_task(make_task(blockers=["prep"]), morning, history, today)
    assert scored.blocked is False
    assert scored.score > 0


def test_day_filter_wins_over_blocking(make_task, morning, today):
    task = make_task(blockers=["prep"], days_available=["sun"])
    assert score_task(task, morning, {}, today) is None


def test_score_is_sum_of_components(make_task, today):
    context = MorningContext(sleep="poor", hours_available=8, energy=4)
    task = make_task(critical=True, deadline=today + timedelta(days=2), energy_required=6, frequency="daily")
    history = {"task": LearnedRecordBase(count=1, last_done_date=today - timedelta(days=3))}
    scored = score_task(task, context, history, today)
    assert scored.urgency == 22
    assert scored.criticality == 15
    assert scored.energy_fit == pytest.approx(15 * 1.2)
    assert scored.overdue_points == pytest.approx(15)
    assert scored.score == pytest.approx(22 + 15 + 18 + 15)
