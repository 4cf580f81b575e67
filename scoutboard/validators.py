"""Consistency checks over a ScoutingIndex.

The board tolerates every state reported here and displays it sensibly;
these checks list what needs cleaning up in the stored data.
"""

from collections import Counter

from .index import ScoutingIndex, pair_key


def find_shortlisted_and_assigned(index: ScoutingIndex) -> list[str]:
    """Players still on the scouting shortlist although a scout is assigned."""
    warnings = []
    for player_id in index.shortlist_player_ids:
        if player_id in index.assigned_player_ids:
            warnings.append(
                f'Player {player_id} has an assignment but is still on the scouting shortlist'
            )
    return warnings


def find_orphaned_assignments(index: ScoutingIndex) -> list[str]:
    """Assignments whose player no longer exists."""
    return [
        f'Assignment {a.id} references missing player {a.player_id}'
        for a in index.assignments
        if a.player_id not in index.players
    ]


def find_duplicate_assignments(index: ScoutingIndex) -> list[str]:
    """More than one assignment for the same (player, scout) pair."""
    counts = Counter(pair_key(a.player_id, a.assigned_to_scout_id) for a in index.assignments)
    return [
        f'Player {player_id} is assigned to scout {scout_id} {count} times'
        for (player_id, scout_id), count in sorted(counts.items())
        if count > 1
    ]


def find_stale_statuses(index: ScoutingIndex) -> list[str]:
    """Assignments still open although the scout's report is in."""
    warnings = []
    for a in index.assignments:
        if a.status in ('completed', 'reviewed'):
            continue
        report = index.completion_report(a.player_id, a.assigned_to_scout_id)
        if report is not None:
            warnings.append(
                f'Assignment {a.id} is still {a.status} but report {report.id} was {report.status}'
            )
    return warnings


def validate_index(index: ScoutingIndex) -> list[str]:
    """
    Run every consistency check.

    Args:
        index: ScoutingIndex to inspect

    Returns:
        List of warning messages (empty if the data is consistent)
    """
    warnings: list[str] = []
    warnings.extend(find_shortlisted_and_assigned(index))
    warnings.extend(find_orphaned_assignments(index))
    warnings.extend(find_duplicate_assignments(index))
    warnings.extend(find_stale_statuses(index))
    return warnings
