"""Scout performance metrics and assignment summaries."""

import math
from datetime import datetime
from typing import Iterable, Optional

from .config import get_min_completion_days, get_performance_thresholds, get_top_performers
from .index import ScoutingIndex
from .models import AssignmentSummary, ScoutingAssignment, ScoutPerformance, ScoutProfile
from .status import determine_assignment_status, scout_display_name


def _completed_at(assignment: ScoutingAssignment, index: ScoutingIndex) -> Optional[datetime]:
    report = index.completion_report(assignment.player_id, assignment.assigned_to_scout_id)
    if report is not None:
        return report.updated_at or report.created_at or assignment.updated_at
    return assignment.updated_at


def is_assignment_complete(assignment: ScoutingAssignment, index: ScoutingIndex) -> bool:
    """A completing report for the pair, or a row already marked completed."""
    if assignment.status == 'completed':
        return True
    return index.completion_report(assignment.player_id, assignment.assigned_to_scout_id) is not None


def completion_days(
    assignment: ScoutingAssignment,
    index: ScoutingIndex,
    min_days: Optional[int] = None,
) -> Optional[int]:
    """
    Whole days from assignment creation to completion, rounded up.

    Returns None when either timestamp is missing.
    """
    if min_days is None:
        min_days = get_min_completion_days()
    completed_at = _completed_at(assignment, index)
    if assignment.created_at is None or completed_at is None:
        return None
    elapsed = (completed_at - assignment.created_at).total_seconds() / 86400
    return max(math.ceil(elapsed), min_days)


def performance_tier(completion_rate: float, thresholds: Optional[dict[str, int]] = None) -> str:
    """'good', 'fair' or 'poor' for a completion rate in percent."""
    if thresholds is None:
        thresholds = get_performance_thresholds()
    if completion_rate >= thresholds['good']:
        return 'good'
    if completion_rate >= thresholds['fair']:
        return 'fair'
    return 'poor'


def scout_performance(
    scout: ScoutProfile,
    index: ScoutingIndex,
    min_days: Optional[int] = None,
    thresholds: Optional[dict[str, int]] = None,
) -> ScoutPerformance:
    """
    Compute workload and completion metrics for one scout.

    Args:
        scout: Scout profile
        index: Prebuilt ScoutingIndex
        min_days: Floor for a single completion time (default from config)
        thresholds: Tier thresholds (default from config)

    Returns:
        ScoutPerformance for the scout
    """
    assignments = [a for a in index.assignments if a.assigned_to_scout_id == scout.id]
    completed = [a for a in assignments if is_assignment_complete(a, index)]

    rate = round(len(completed) / len(assignments) * 100) if assignments else 0

    durations = [
        days for days in (completion_days(a, index, min_days) for a in completed)
        if days is not None
    ]
    avg_days = round(sum(durations) / len(durations)) if durations else 0

    return ScoutPerformance(
        scout_id=scout.id,
        scout_name=scout_display_name(scout),
        total_assignments=len(assignments),
        completed_count=len(completed),
        completion_rate=rate,
        avg_completion_days=avg_days,
        tier=performance_tier(rate, thresholds),
    )


def rank_scouts(
    index: ScoutingIndex,
    scouts: Optional[Iterable[ScoutProfile]] = None,
    top_n: Optional[int] = None,
) -> list[ScoutPerformance]:
    """
    Best performers first: completion rate, then total assignments.

    Scouts default to every profile in the index. ``top_n`` defaults to the
    configured number of top performers; pass 0 to keep everyone.
    """
    if scouts is None:
        scouts = index.scouts.values()
    if top_n is None:
        top_n = get_top_performers()

    results = [scout_performance(scout, index) for scout in scouts]
    results.sort(key=lambda p: (-p.completion_rate, -p.total_assignments))
    return results[:top_n] if top_n else results


def summarize_assignments(index: ScoutingIndex, scout_id: Optional[str] = None) -> AssignmentSummary:
    """Count assignments by effective status, optionally for one scout."""
    summary = AssignmentSummary()
    for assignment in index.assignments:
        if scout_id is not None and assignment.assigned_to_scout_id != str(scout_id):
            continue
        status = determine_assignment_status(assignment, index).status
        summary.total += 1
        if status == 'completed':
            summary.completed += 1
        elif status == 'in_progress':
            summary.in_progress += 1
        elif status == 'reviewed':
            summary.reviewed += 1
        else:
            summary.pending += 1
    return summary
