"""Status derivation for scouting assignments.

An assignment's stored status can lag behind reality: scouts often submit
a report without moving the assignment row along. A completing report for
the same (player, scout) pair therefore always wins and the assignment is
shown as completed.
"""

import math
from datetime import datetime, timezone
from typing import Optional

from .constants import (
    BUCKET_FOR_STATUS,
    FIELD_DEFAULTS,
    MARKED_FOR_SCOUTING,
    REPORT_SUBMITTED_LABEL,
    STATUS_CHANGE_LABELS,
    STATUS_STYLES,
)
from .index import ScoutingIndex
from .models import AssignmentStatusInfo, ScoutingAssignment, ScoutProfile


def scout_display_name(scout: Optional[ScoutProfile]) -> str:
    """
    Name shown for a scout.

    "First Last" when either name is set, else the email, else "Unknown Scout".
    """
    if scout is None:
        return FIELD_DEFAULTS['scout_name']
    full_name = f'{scout.first_name} {scout.last_name}'.strip()
    return full_name or scout.email or FIELD_DEFAULTS['scout_name']


def determine_assignment_status(
    assignment: ScoutingAssignment,
    index: ScoutingIndex,
) -> AssignmentStatusInfo:
    """
    Derive the display status of one assignment.

    Args:
        assignment: The assignment row
        index: Index holding completing reports and scout profiles

    Returns:
        AssignmentStatusInfo with status, label, variant, color and scout name
    """
    scout = index.resolve_scout(assignment.assigned_to_scout_id, assignment.scout)
    scout_name = scout_display_name(scout)

    if index.completion_report(assignment.player_id, assignment.assigned_to_scout_id):
        _, variant, color = STATUS_STYLES['completed']
        return AssignmentStatusInfo(
            status='completed',
            label=REPORT_SUBMITTED_LABEL,
            variant=variant,
            color=color,
            scout_name=scout_name,
        )

    status = assignment.status if assignment.status in STATUS_STYLES else 'assigned'
    label, variant, color = STATUS_STYLES[status]
    return AssignmentStatusInfo(
        status=status,
        label=label,
        variant=variant,
        color=color,
        scout_name=scout_name,
    )


def marked_for_scouting_status() -> AssignmentStatusInfo:
    """Status of a shortlisted player nobody has been assigned to yet."""
    label, variant, color = STATUS_STYLES[MARKED_FOR_SCOUTING]
    return AssignmentStatusInfo(
        status=MARKED_FOR_SCOUTING,
        label=label,
        variant=variant,
        color=color,
        scout_name=FIELD_DEFAULTS['unassigned'],
    )


def kanban_bucket(status: str) -> str:
    """Map an effective status to its kanban column."""
    return BUCKET_FOR_STATUS.get(status, 'assigned')


def time_ago(timestamp: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Render a timestamp relative to ``now``.

    Examples:
        3 days earlier -> "3 days ago"
        1 hour earlier -> "1 hour ago"
        10 minutes earlier -> "Just now"
    """
    if timestamp is None:
        return 'N/A'
    if now is None:
        now = datetime.now(timezone.utc)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = (now - timestamp).total_seconds()
    days = math.floor(seconds / 86400)
    hours = math.floor(seconds / 3600)

    if days > 0:
        return f'{days} day{"s" if days > 1 else ""} ago'
    if hours > 0:
        return f'{hours} hour{"s" if hours > 1 else ""} ago'
    return 'Just now'


def last_status_change(status: str, timestamp: Optional[datetime], now: Optional[datetime] = None) -> str:
    """Describe the last status change, e.g. "In Progress 2 days ago"."""
    if status == MARKED_FOR_SCOUTING:
        return FIELD_DEFAULTS['marked_status_change']
    label = STATUS_CHANGE_LABELS.get(status, 'Updated')
    return f'{label} {time_ago(timestamp, now)}'
