"""
Dashboard statistics over a list of team updates.

Every function takes a snapshot of records and returns new values; nothing
here keeps a reference to the list or modifies it.
"""

from __future__ import annotations
from typing import Dict, List, Sequence

import pandas as pd

from config.constants import HEALTH_CHART_ORDER, HEALTH_COLORS, HEALTH_LABELS, HEALTH_VALUES
from models.update import DerivedStats, UpdateRecord

FRAME_COLUMNS = ['team_member', 'priority_goal', 'progress', 'health']


def round_half_up(total: int, count: int) -> int:
    """Integer mean rounded half up, computed exactly. Zero when count is zero."""
    if count <= 0:
        return 0
    return (2 * int(total) + int(count)) // (2 * int(count))


def to_frame(records: Sequence[UpdateRecord]) -> pd.DataFrame:
    """One row per record with parsed progress and normalized health."""
    rows = [
        {
            'team_member': record.team_member,
            'priority_goal': record.priority_goal,
            'progress': record.progress,
            'health': record.health_bucket,
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def health_distribution(records: Sequence[UpdateRecord]) -> Dict[int, int]:
    """Count of records per health bucket; unknown values count as caution (0)."""
    counts = to_frame(records)['health'].value_counts()
    return {value: int(counts.get(value, 0)) for value in HEALTH_VALUES}


def average_progress(records: Sequence[UpdateRecord]) -> int:
    """Mean progress percentage, rounded; 0 for no records."""
    df = to_frame(records)
    return round_half_up(df['progress'].sum(), len(df))


def progress_by_goal(records: Sequence[UpdateRecord]) -> Dict[str, int]:
    """Mean progress per priority goal. Labels are grouped by exact string match."""
    df = to_frame(records)
    if df.empty:
        return {}
    grouped = df.groupby('priority_goal', sort=False)['progress'].agg(['sum', 'count'])
    return {
        goal: round_half_up(row['sum'], row['count'])
        for goal, row in grouped.iterrows()
    }


def team_member_count(records: Sequence[UpdateRecord]) -> int:
    """Number of distinct team members."""
    return int(to_frame(records)['team_member'].nunique())


def compute_stats(records: Sequence[UpdateRecord]) -> DerivedStats:
    """All dashboard figures for the given records."""
    return DerivedStats(
        total_updates=len(records),
        team_member_count=team_member_count(records),
        health_distribution=health_distribution(records),
        average_progress=average_progress(records),
        progress_by_goal=progress_by_goal(records),
    )


def group_by_member(records: Sequence[UpdateRecord]) -> Dict[str, List[UpdateRecord]]:
    """Records per team member, members in order of first appearance."""
    grouped: Dict[str, List[UpdateRecord]] = {}
    for record in records:
        grouped.setdefault(record.team_member, []).append(record)
    return grouped


def health_chart_frame(records: Sequence[UpdateRecord]) -> pd.DataFrame:
    """Rows for the health pie chart; buckets with no records are left out."""
    distribution = health_distribution(records)
    rows = [
        {
            'name': HEALTH_LABELS[value],
            'value': distribution[value],
            'color': HEALTH_COLORS[value],
        }
        for value in HEALTH_CHART_ORDER
        if distribution[value] > 0
    ]
    return pd.DataFrame(rows, columns=['name', 'value', 'color'])


def goal_chart_frame(records: Sequence[UpdateRecord]) -> pd.DataFrame:
    """Rows for the progress-by-goal bar chart."""
    rows = [
        {'name': goal, 'avg_progress': progress}
        for goal, progress in progress_by_goal(records).items()
    ]
    return pd.DataFrame(rows, columns=['name', 'avg_progress'])
