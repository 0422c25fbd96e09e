"""Project planner operations: tasks, progress and AI task suggestions."""

from __future__ import annotations
import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional, Tuple

from models.exceptions import ConfigurationError, UpstreamError
from models.project import Project, Task
from services.aggregator import round_half_up
from services.assistant_gateway import AssistantGateway


logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex[:9]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def new_project(name: str, description: str = "", category: str = "", status: str = "planning") -> Project:
    """Create an empty project."""
    if not name.strip():
        raise ValueError("Project name is required")
    now = _now()
    return Project(
        id=_new_id(),
        name=name.strip(),
        description=description.strip(),
        category=category.strip(),
        status=status,
        created_at=now,
        updated_at=now,
    )


def _touch(project: Project, **changes) -> Project:
    return replace(project, updated_at=_now(), **changes)


def add_task(project: Project, title: str) -> Project:
    """Append an open task. Blank titles are ignored."""
    if not title.strip():
        return project
    return _touch(project, tasks=project.tasks + [Task(id=_new_id(), title=title.strip())])


def toggle_task(project: Project, task_id: str) -> Project:
    tasks = [
        replace(task, completed=not task.completed) if task.id == task_id else task
        for task in project.tasks
    ]
    return _touch(project, tasks=tasks)


def remove_task(project: Project, task_id: str) -> Project:
    return _touch(project, tasks=[task for task in project.tasks if task.id != task_id])


def set_status(project: Project, status: str) -> Project:
    return _touch(project, status=status)


def set_notes(project: Project, notes: str) -> Project:
    return _touch(project, notes=notes)


def task_progress(project: Project) -> int:
    """Percentage of completed tasks; 0 for a project without tasks."""
    completed = sum(1 for task in project.tasks if task.completed)
    return round_half_up(completed * 100, len(project.tasks))


def apply_suggestions(project: Project, gateway: AssistantGateway) -> Tuple[Project, Optional[str]]:
    """
    Add the assistant's suggested next steps as open tasks.

    Returns the updated project and an error message, if any. On failure the
    project is returned unchanged.
    """
    try:
        suggestions = gateway.suggest_tasks(project.name, project.description)
    except ConfigurationError as e:
        logger.warning(f"Task suggestions unavailable: {e}")
        return project, "Add an API key to enable AI task suggestions."
    except UpstreamError as e:
        logger.error(f"Task suggestion request failed: {e}")
        return project, "Could not get suggestions right now. Please try again."

    new_tasks = [Task(id=_new_id(), title=title) for title in suggestions]
    if not new_tasks:
        return project, None
    return _touch(project, tasks=project.tasks + new_tasks), None
