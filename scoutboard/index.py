"""Lookup index built once per board computation."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from .constants import COMPLETING_REPORT_STATUSES
from .models import Player, Report, ScoutingAssignment, ScoutProfile
from .normalize import (
    normalize_assignments,
    normalize_players,
    normalize_reports,
    normalize_scouts,
)

logger = logging.getLogger('scoutboard.index')

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

PairKey = tuple[str, str]


def pair_key(player_id: Any, scout_id: Any) -> PairKey:
    """Key for a (player, scout) pair, tolerant of numeric ids."""
    return str(player_id), str(scout_id)


def report_timestamp(report: Report) -> datetime:
    return report.updated_at or report.created_at or _EPOCH


def is_completing(report: Report) -> bool:
    return report.status in COMPLETING_REPORT_STATUSES


@dataclass(frozen=True)
class ScoutingIndex:
    """
    Players, scouts, assignments and reports with the lookups the board needs.

    Built by build_index(); treat as read-only.
    """
    players: dict[str, Player]
    scouts: dict[str, ScoutProfile]
    assignments: tuple[ScoutingAssignment, ...]
    reports: tuple[Report, ...]
    completion_reports: dict[PairKey, Report]
    assigned_player_ids: frozenset[str]
    marked_player_ids: tuple[str, ...]
    shortlist_player_ids: tuple[str, ...] = field(default=())
    reported_player_ids: frozenset[str] = field(default=frozenset())

    def completion_report(self, player_id: Any, scout_id: Any) -> Optional[Report]:
        return self.completion_reports.get(pair_key(player_id, scout_id))

    def player_has_completion(self, player_id: Any) -> bool:
        return str(player_id) in self.reported_player_ids

    def resolve_scout(self, scout_id: Optional[str], embedded: Optional[ScoutProfile] = None) -> Optional[ScoutProfile]:
        """Prefer the profile joined onto the row, then the scouts table."""
        if embedded is not None:
            return embedded
        if scout_id is None:
            return None
        return self.scouts.get(str(scout_id))


def build_index(
    players: Iterable[Any],
    assignments: Iterable[Any],
    reports: Iterable[Any],
    shortlist_player_ids: Iterable[Any] = (),
    scouts: Iterable[Any] = (),
) -> ScoutingIndex:
    """
    Normalize the raw collections and build every lookup in one pass each.

    Args:
        players: Player rows (dicts, PlayerRecord or Player)
        assignments: Scouting assignment rows
        reports: Report rows
        shortlist_player_ids: Ids in the "marked for scouting" shortlist
        scouts: Scout profile rows

    Returns:
        ScoutingIndex ready to hand to the board, status and metrics code
    """
    player_list = normalize_players(players)
    assignment_list = normalize_assignments(assignments)
    report_list = normalize_reports(reports)
    scout_list = normalize_scouts(scouts)

    players_by_id: dict[str, Player] = {}
    for player in player_list:
        players_by_id.setdefault(player.id, player)

    scouts_by_id = {scout.id: scout for scout in scout_list if scout.id}

    # Latest completing report per pair wins
    completion_reports: dict[PairKey, Report] = {}
    for report in report_list:
        if not is_completing(report):
            continue
        key = pair_key(report.player_id, report.scout_id)
        current = completion_reports.get(key)
        if current is None or report_timestamp(report) > report_timestamp(current):
            completion_reports[key] = report

    assigned_player_ids = frozenset(a.player_id for a in assignment_list)

    shortlist: list[str] = []
    seen: set[str] = set()
    for pid in shortlist_player_ids:
        if pid is None:
            continue
        pid = str(pid)
        if pid not in seen:
            seen.add(pid)
            shortlist.append(pid)

    marked = tuple(pid for pid in shortlist if pid not in assigned_player_ids)
    healed = len(shortlist) - len(marked)
    if healed:
        logger.debug(f'{healed} shortlisted player(s) already have assignments; treating them as assigned')

    return ScoutingIndex(
        players=players_by_id,
        scouts=scouts_by_id,
        assignments=tuple(assignment_list),
        reports=tuple(report_list),
        completion_reports=completion_reports,
        assigned_player_ids=assigned_player_ids,
        marked_player_ids=marked,
        shortlist_player_ids=tuple(shortlist),
        reported_player_ids=frozenset(key[0] for key in completion_reports),
    )
