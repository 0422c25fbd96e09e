"""Project planner data models."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from config.constants import PROJECT_STATUSES


@dataclass
class Task:
    """A single to-do item on a project."""
    id: str
    title: str
    completed: bool = False


@dataclass
class Project:
    """Project tracked in the planner, with its task list and notes."""
    id: str
    name: str
    description: str = ""
    category: str = ""
    status: str = "planning"
    notes: str = ""
    tasks: List[Task] = field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self):
        if self.status not in PROJECT_STATUSES:
            raise ValueError(f"Invalid project status: {self.status}")
