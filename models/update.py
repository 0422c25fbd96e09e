"""Team update data models and validation."""

from __future__ import annotations
import math
import re
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from config.constants import (
    DEFAULT_INITIATIVE,
    DEFAULT_PRIORITY_GOAL,
    DEFAULT_STATUS,
    DEFAULT_TEAM_MEMBER,
    HEALTH_CAUTION,
    HEALTH_LABELS,
    HEALTH_SUMMARY_LABELS,
    HEALTH_VALUES,
)


# Leading integer, the way a percentage like " 45%" or "12.5%" is read
INT_PREFIX_PATTERN = re.compile(r'^\s*([+-]?\d+)')


class RecordValidator:
    """Validation utilities for update records."""

    @staticmethod
    def parse_int_prefix(value: Any, default: int = 0) -> int:
        """Parse the integer prefix of a value; non-numeric content gives the default."""
        if value is None:
            return default
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if math.isfinite(value) else default
        match = INT_PREFIX_PATTERN.match(str(value))
        if not match:
            return default
        try:
            return int(match.group(1))
        except ValueError:
            # Digit strings past the interpreter limit
            return default

    @staticmethod
    def parse_progress(status: Any) -> int:
        """Numeric progress of a status string such as '45%'. Never negative."""
        text = str(status or "").replace("%", "")
        return max(RecordValidator.parse_int_prefix(text), 0)

    @staticmethod
    def normalize_health(health: Any) -> int:
        """Map a stored health value onto -1/0/1; anything else is caution (0)."""
        value = RecordValidator.parse_int_prefix(health, default=HEALTH_CAUTION)
        return value if value in HEALTH_VALUES else HEALTH_CAUTION


@dataclass(frozen=True)
class UpdateRecord:
    """One team member's status report on one initiative."""
    id: str
    team_member: str
    title: str
    date: str
    priority_goal: str
    initiative: str
    description: str
    health: int
    status: str
    due_date: str
    feedback: str = ""

    # camelCase keys of the persisted JSON payload
    FIELD_KEYS = {
        'id': 'id',
        'team_member': 'teamMember',
        'title': 'title',
        'date': 'date',
        'priority_goal': 'priorityGoal',
        'initiative': 'initiative',
        'description': 'description',
        'health': 'health',
        'status': 'status',
        'due_date': 'dueDate',
        'feedback': 'feedback',
    }

    @property
    def progress(self) -> int:
        return RecordValidator.parse_progress(self.status)

    @property
    def health_bucket(self) -> int:
        return RecordValidator.normalize_health(self.health)

    @property
    def health_label(self) -> str:
        return HEALTH_LABELS[self.health_bucket]

    @property
    def summary_health_label(self) -> str:
        return HEALTH_SUMMARY_LABELS[self.health_bucket]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage."""
        return {key: getattr(self, attr) for attr, key in self.FIELD_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UpdateRecord":
        """
        Build a record from a stored payload.

        Missing optional fields take their defaults so older payloads still load.
        Raises ValueError when the payload is not a mapping, has no id or
        carries a non-finite health number.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping, got {type(data).__name__}")

        record_id = data.get('id')
        if record_id is None or str(record_id) == "":
            raise ValueError("Record is missing its id")

        health = data.get('health')
        if isinstance(health, float) and not math.isfinite(health):
            raise ValueError(f"Record {record_id} has a non-finite health value")

        def text(key: str, default: str = "") -> str:
            value = data.get(key)
            return default if value is None else str(value)

        return cls(
            id=str(record_id),
            team_member=text('teamMember', DEFAULT_TEAM_MEMBER),
            title=text('title'),
            date=text('date'),
            priority_goal=text('priorityGoal', DEFAULT_PRIORITY_GOAL),
            initiative=text('initiative', DEFAULT_INITIATIVE),
            description=text('description'),
            health=RecordValidator.parse_int_prefix(health),
            status=text('status', DEFAULT_STATUS),
            due_date=text('dueDate'),
            feedback=text('feedback'),
        )


@dataclass
class DerivedStats:
    """Aggregate figures shown on the dashboard. Recomputed, never stored."""
    total_updates: int = 0
    team_member_count: int = 0
    health_distribution: Dict[int, int] = field(
        default_factory=lambda: {value: 0 for value in HEALTH_VALUES}
    )
    average_progress: int = 0
    progress_by_goal: Dict[str, int] = field(default_factory=dict)

    @property
    def healthy_count(self) -> int:
        return self.health_distribution.get(1, 0)

    @property
    def at_risk_count(self) -> int:
        return self.health_distribution.get(-1, 0)


def find_record(records, record_id: str) -> Optional[UpdateRecord]:
    """Return the record with the given id, or None."""
    for record in records:
        if record.id == record_id:
            return record
    return None
