"""Per-player workflow status, used to filter shortlists."""

from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from .constants import MARKED_FOR_SCOUTING
from .index import ScoutingIndex
from .models import Player, ScoutingAssignment

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

PLAYER_STATUSES = (
    'reported',
    'completed',
    'in_progress',
    'assigned',
    MARKED_FOR_SCOUTING,
    'not_scouted',
)


def has_been_scouted(player_id: Any, index: ScoutingIndex) -> bool:
    """True once any scout has a submitted or reviewed report on the player."""
    return index.player_has_completion(player_id)


def latest_assignment(player_id: Any, index: ScoutingIndex) -> Optional[ScoutingAssignment]:
    """Most recently updated assignment for the player, if any."""
    pid = str(player_id)
    candidates = [a for a in index.assignments if a.player_id == pid]
    if not candidates:
        return None
    return max(candidates, key=lambda a: a.updated_at or a.created_at or _EPOCH)


def player_workflow_status(player_id: Any, index: ScoutingIndex) -> str:
    """
    Single status for a player across all scouts.

    Order of precedence: reported, then the latest assignment's status,
    then marked for scouting, then not scouted.
    """
    if has_been_scouted(player_id, index):
        return 'reported'

    assignment = latest_assignment(player_id, index)
    if assignment is not None:
        if assignment.status in ('completed', 'in_progress'):
            return assignment.status
        return 'assigned'

    if str(player_id) in index.marked_player_ids:
        return MARKED_FOR_SCOUTING
    return 'not_scouted'


def filter_players_by_status(
    players: Iterable[Player],
    status: str,
    index: ScoutingIndex,
) -> list[Player]:
    """Keep players whose workflow status equals ``status`` ('all' keeps everyone)."""
    if status == 'all':
        return list(players)
    if status not in PLAYER_STATUSES:
        raise ValueError(f'Unknown player status: {status}')
    return [p for p in players if player_workflow_status(p.id, index) == status]
