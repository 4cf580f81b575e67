"""Read-only access to a JSON snapshot of the scouting tables.

The snapshot mirrors the hosted database tables the web app reads:
players, scout profiles, scouting assignments, reports and shortlists.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .index import ScoutingIndex, build_index
from .models import KanbanBoard
from .schemas import (
    AssignmentRecord,
    PlayerRecord,
    ReportRecord,
    ScoutProfileRecord,
    SnapshotFile,
)
from .status import last_status_change, time_ago
from .utils import load_json, save_json

logger = logging.getLogger('scoutboard.repository')


class SnapshotRepository:
    """Query interface over a validated snapshot file."""

    def __init__(self, snapshot: SnapshotFile):
        self.snapshot = snapshot
        self._players = {p.id: p for p in snapshot.players}

    @classmethod
    def from_file(cls, path: Path | str) -> 'SnapshotRepository':
        """
        Load and validate a snapshot file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file doesn't match SnapshotFile
        """
        snapshot = load_json(path, schema=SnapshotFile)
        logger.info(
            f'Loaded snapshot {path}: {len(snapshot.players)} players, '
            f'{len(snapshot.assignments)} assignments, {len(snapshot.reports)} reports'
        )
        return cls(snapshot)

    def list_players(self) -> list[PlayerRecord]:
        return list(self.snapshot.players)

    def list_scouts(self) -> list[ScoutProfileRecord]:
        return list(self.snapshot.scouts)

    def get_player(self, player_id) -> Optional[PlayerRecord]:
        return self._players.get(str(player_id))

    def list_assignments(self, scout_id: Optional[str] = None) -> list[AssignmentRecord]:
        if scout_id is None:
            return list(self.snapshot.assignments)
        return [a for a in self.snapshot.assignments if a.assigned_to_scout_id == str(scout_id)]

    def list_reports(self) -> list[ReportRecord]:
        return list(self.snapshot.reports)

    def scouting_shortlist_ids(self) -> list[str]:
        """Members of the shortlist flagged as the scouting assignment list."""
        for shortlist in self.snapshot.shortlists:
            if shortlist.is_scouting_assignment_list:
                return list(shortlist.player_ids)
        return []

    def build_index(self) -> ScoutingIndex:
        return build_index(
            players=self.snapshot.players,
            assignments=self.snapshot.assignments,
            reports=self.snapshot.reports,
            shortlist_player_ids=self.scouting_shortlist_ids(),
            scouts=self.snapshot.scouts,
        )


def board_to_json(board: KanbanBoard, now: Optional[datetime] = None) -> dict:
    """Board as JSON-ready dict, with relative times rendered against ``now``."""
    data: dict = {'counts': board.counts()}
    for bucket, cards in board.to_dict().items():
        for card, source in zip(cards, board.bucket(bucket)):
            card['updated_ago'] = time_ago(source.updated_at, now)
            card['last_status_change'] = last_status_change(source.status, source.updated_at, now)
        data[bucket] = cards
    return data


def save_board(path: Path | str, board: KanbanBoard, now: Optional[datetime] = None) -> None:
    """Write the board JSON."""
    save_json(path, board_to_json(board, now))
    logger.info(f'Board saved to {path}')
