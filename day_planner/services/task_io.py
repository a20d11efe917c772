"""YAML import/export of the task backlog."""

import logging
from typing import Any, Iterable

import yaml

from day_planner.schemas.task import TaskBase, TaskCreate

logger = logging.getLogger(__name__)


def _task_record(task: TaskBase) -> dict[str, Any]:
    """Plain dict of a task, leaving out empty and false optional fields."""
    record: dict[str, Any] = {"id": task.id, "name": task.name}
    if task.mandatory:
        record["mandatory"] = True
    if task.critical:
        record["critical"] = True
    if task.category:
        record["category"] = task.category.value
    if task.project:
        record["project"] = task.project
    record["energy_required"] = task.energy_required
    record["duration_minutes"] = task.duration_minutes
    record["frequency"] = task.frequency.value
    if task.deadline:
        record["deadline"] = task.deadline.isoformat()
    if task.time_of_day:
        record["time_of_day"] = task.time_of_day.value
    if task.days_available:
        record["days_available"] = [d.value for d in task.days_available]
    if task.variants:
        record["variants"] = [v.model_dump() for v in task.variants]
    if task.subtasks:
        record["subtasks"] = list(task.subtasks)
    if task.blockers:
        record["blockers"] = list(task.blockers)
    return record


def task_to_yaml(task: TaskBase) -> str:
    return dump_tasks_yaml([task])


def dump_tasks_yaml(tasks: Iterable[TaskBase]) -> str:
    return yaml.safe_dump(
        [_task_record(t) for t in tasks],
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=None,
    )


def load_tasks_yaml(text: str) -> list[TaskCreate]:
    """Parse a YAML list of task records.

    Raises pydantic.ValidationError for malformed records and ValueError when
    the document is not a list or repeats an id.
    """
    data = yaml.safe_load(text) or []
    if not isinstance(data, list):
        raise ValueError("Task YAML must be a list of task records.")

    tasks = [TaskCreate.model_validate(item) for item in data]
    seen: set[str] = set()
    for task in tasks:
        if task.id in seen:
            raise ValueError(f"Duplicate task id {task.id!r} in YAML.")
        seen.add(task.id)
    logger.debug("Loaded %d tasks from YAML", len(tasks))
    return tasks
