"""Kanban board for scout management.

One card per scout assignment, plus:
- completed cards for submitted reports that never had an assignment
- shortlisted cards for players marked for scouting but not yet assigned

Build a ScoutingIndex once and pass it to build_board(); resolve_board()
does both steps for callers holding raw rows.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from .constants import FIELD_DEFAULTS, REPORT_SUBMITTED_LABEL, STATUS_STYLES
from .index import ScoutingIndex, build_index, pair_key
from .models import (
    AssignmentStatusInfo,
    KanbanBoard,
    KanbanCard,
    Player,
    Report,
    ScoutingAssignment,
)
from .normalize import rating_text
from .status import (
    determine_assignment_status,
    kanban_bucket,
    marked_for_scouting_status,
    scout_display_name,
)

logger = logging.getLogger('scoutboard.board')

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

ALL_SCOUTS = 'all'


def matches_search(player: Player, search_term: Optional[str]) -> bool:
    """Case-insensitive substring match on player name or club."""
    if not search_term or not search_term.strip():
        return True
    term = search_term.lower()
    return term in player.name.lower() or term in player.club.lower()


def _scout_filter(scout_id: Optional[str]) -> Optional[str]:
    if scout_id is None or str(scout_id) == ALL_SCOUTS:
        return None
    return str(scout_id)


def _assignment_card(
    assignment: ScoutingAssignment,
    player: Player,
    info: AssignmentStatusInfo,
    report: Optional[Report],
) -> KanbanCard:
    return KanbanCard(
        id=assignment.id,
        player_id=player.id,
        player_name=player.name,
        club=player.club,
        position=player.primary_position,
        rating=rating_text(player),
        status=info.status,
        label=info.label,
        variant=info.variant,
        color=info.color,
        assigned_to=info.scout_name,
        scout_id=assignment.assigned_to_scout_id,
        assignment_id=assignment.id,
        priority=assignment.priority,
        deadline=assignment.deadline,
        template_name=report.template_name if report else None,
        match_context=report.match_context if report else None,
        created_at=assignment.created_at,
        updated_at=assignment.updated_at or assignment.created_at,
    )


def _report_card(report: Report, player: Player, index: ScoutingIndex) -> KanbanCard:
    _, variant, color = STATUS_STYLES['completed']
    scout = index.resolve_scout(report.scout_id, report.scout)
    return KanbanCard(
        id=f'report-{report.id}',
        player_id=player.id,
        player_name=player.name,
        club=player.club,
        position=player.primary_position,
        rating=rating_text(player),
        status='completed',
        label=REPORT_SUBMITTED_LABEL,
        variant=variant,
        color=color,
        assigned_to=scout_display_name(scout),
        scout_id=report.scout_id,
        template_name=report.template_name,
        match_context=report.match_context,
        created_at=report.created_at,
        updated_at=report.updated_at or report.created_at,
    )


def _marked_card(player: Player) -> KanbanCard:
    info = marked_for_scouting_status()
    return KanbanCard(
        id=f'scouting-assignment-{player.id}',
        player_id=player.id,
        player_name=player.name,
        club=player.club,
        position=player.primary_position,
        rating=rating_text(player),
        status=info.status,
        label=info.label,
        variant=info.variant,
        color=info.color,
        assigned_to=FIELD_DEFAULTS['unassigned'],
    )


def _newest_first(cards: list[KanbanCard]) -> list[KanbanCard]:
    # Stable: cards without a timestamp keep their input order at the end
    return sorted(cards, key=lambda c: c.created_at or _EPOCH, reverse=True)


def build_board(
    index: ScoutingIndex,
    scout_id: Optional[str] = None,
    search_term: Optional[str] = None,
) -> KanbanBoard:
    """
    Group assignments, report-only completions and marked players into buckets.

    Args:
        index: Prebuilt ScoutingIndex
        scout_id: Only show this scout's work (None or 'all' for everyone)
        search_term: Case-insensitive filter on player name or club

    Returns:
        KanbanBoard with shortlisted, assigned and completed cards
    """
    scout_filter = _scout_filter(scout_id)
    buckets: dict[str, list[KanbanCard]] = {'shortlisted': [], 'assigned': [], 'completed': []}
    seen_pairs: set[tuple[str, str]] = set()

    for assignment in index.assignments:
        if scout_filter is not None and assignment.assigned_to_scout_id != scout_filter:
            continue

        player = index.players.get(assignment.player_id)
        if player is None:
            logger.debug(
                f'Dropping assignment {assignment.id}: player {assignment.player_id} not found'
            )
            continue

        info = determine_assignment_status(assignment, index)
        key = pair_key(assignment.player_id, assignment.assigned_to_scout_id)
        seen_pairs.add(key)

        if not matches_search(player, search_term):
            continue

        report = index.completion_reports.get(key)
        buckets[kanban_bucket(info.status)].append(
            _assignment_card(assignment, player, info, report)
        )

    for key, report in index.completion_reports.items():
        if key in seen_pairs:
            continue
        if scout_filter is not None and report.scout_id != scout_filter:
            continue
        player = index.players.get(report.player_id)
        if player is None:
            logger.debug(f'Dropping report {report.id}: player {report.player_id} not found')
            continue
        if not matches_search(player, search_term):
            continue
        buckets['completed'].append(_report_card(report, player, index))

    # Marked players have no scout, so any scout filter hides them
    if scout_filter is None:
        for player_id in index.marked_player_ids:
            player = index.players.get(player_id)
            if player is None:
                logger.debug(f'Dropping shortlisted player {player_id}: not found')
                continue
            if not matches_search(player, search_term):
                continue
            buckets['shortlisted'].append(_marked_card(player))

    return KanbanBoard(
        shortlisted=buckets['shortlisted'],
        assigned=_newest_first(buckets['assigned']),
        completed=_newest_first(buckets['completed']),
    )


def resolve_board(
    players: Iterable[Any],
    assignments: Iterable[Any],
    reports: Iterable[Any],
    shortlist_player_ids: Iterable[Any] = (),
    scouts: Iterable[Any] = (),
    scout_id: Optional[str] = None,
    search_term: Optional[str] = None,
) -> KanbanBoard:
    """Index raw rows and build the board in one call."""
    index = build_index(
        players=players,
        assignments=assignments,
        reports=reports,
        shortlist_player_ids=shortlist_player_ids,
        scouts=scouts,
    )
    return build_board(index, scout_id=scout_id, search_term=search_term)
