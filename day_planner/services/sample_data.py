"""Starter backlog and reward shop for a fresh database."""

from day_planner.schemas.points import RewardCreate
from day_planner.schemas.task import TaskCreate

ALL_DAYS = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
WEEKDAYS = ["mon", "tue", "wed", "thu", "fri"]

SAMPLE_TASKS: list[TaskCreate] = [
    TaskCreate(
        id="meds-am",
        name="Take morning medications",
        mandatory=True,
        category="health",
        energy_required=1,
        duration_minutes=2,
        frequency="daily",
        time_of_day="morning",
        days_available=ALL_DAYS,
    ),
    TaskCreate(
        id="breakfast",
        name="Breakfast",
        mandatory=True,
        category="health",
        energy_required=2,
        duration_minutes=20,
        frequency="daily",
        time_of_day="morning",
        days_available=ALL_DAYS,
        variants=[
            {"name": "Cereal or yogurt", "duration_minutes": 5, "energy_required": 1},
            {"name": "Toast & eggs", "duration_minutes": 15, "energy_required": 2},
            {"name": "Full cooked breakfast", "duration_minutes": 35, "energy_required": 3},
        ],
    ),
    TaskCreate(
        id="lunch",
        name="Lunch",
        mandatory=True,
        category="health",
        energy_required=2,
        duration_minutes=30,
        frequency="daily",
        time_of_day="afternoon",
        days_available=ALL_DAYS,
        variants=[
            {"name": "Snack / quick bite", "duration_minutes": 10, "energy_required": 1},
            {"name": "Sandwich or leftovers", "duration_minutes": 20, "energy_required": 2},
            {"name": "Cook proper lunch", "duration_minutes": 40, "energy_required": 4},
        ],
    ),
    TaskCreate(
        id="dinner",
        name="Dinner",
        mandatory=True,
        category="health",
        energy_required=3,
        duration_minutes=45,
        frequency="daily",
        time_of_day="evening",
        days_available=ALL_DAYS,
        variants=[
            {"name": "Takeaway or microwave meal", "duration_minutes": 10, "energy_required": 1},
            {"name": "Simple pasta or stir-fry", "duration_minutes": 25, "energy_required": 3},
            {"name": "Cook proper dinner", "duration_minutes": 60, "energy_required": 5},
        ],
    ),
    TaskCreate(
        id="exercise",
        name="Exercise",
        critical=True,
        category="health",
        energy_required=7,
        duration_minutes=45,
        frequency="3x_weekly",
        days_available=ALL_DAYS,
        variants=[
            {"name": "Light walk (15 min)", "duration_minutes": 15, "energy_required": 3},
            {"name": "Moderate workout (30 min)", "duration_minutes": 30, "energy_required": 6},
            {"name": "Full workout (60 min)", "duration_minutes": 60, "energy_required": 9},
        ],
    ),
    TaskCreate(
        id="email-triage",
        name="Email triage & responses",
        category="work",
        energy_required=4,
        duration_minutes=30,
        frequency="daily",
        days_available=WEEKDAYS,
    ),
    TaskCreate(
        id="weekly-review",
        name="Weekly review",
        category="admin",
        energy_required=5,
        duration_minutes=45,
        frequency="weekly",
        days_available=["fri", "sat"],
        subtasks=["Review completed tasks", "Plan next week", "Update task list"],
    ),
]

DEFAULT_REWARDS: list[RewardCreate] = [
    RewardCreate(name="30 min guilt-free gaming", cost=150, emoji="🎮", category="leisure"),
    RewardCreate(name="Nice takeaway meal", cost=300, emoji="🍜", category="food"),
    RewardCreate(name="Full rest day (no tasks)", cost=500, emoji="🛋️", category="rest"),
    RewardCreate(name="New book or game", cost=400, emoji="📚", category="purchase"),
    RewardCreate(name="Movie night / binge session", cost=250, emoji="🎬", category="leisure"),
    RewardCreate(name="Fancy coffee or treat", cost=80, emoji="☕", category="food"),
    RewardCreate(name="Weekend lie-in (no alarm)", cost=180, emoji="😴", category="rest"),
    RewardCreate(name="Buy something on the wishlist", cost=600, emoji="🛍️", category="purchase"),
]
