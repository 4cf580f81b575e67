"""Tests for per-player workflow status."""

import pytest

from scoutboard.index import build_index
from scoutboard.player_status import (
    filter_players_by_status,
    has_been_scouted,
    latest_assignment,
    player_workflow_status,
)

PLAYERS = [{'id': str(i), 'name': f'Player {i}', 'club': 'Club'} for i in range(1, 8)]


@pytest.fixture
def index():
    assignments = [
        {'id': 'a1', 'player_id': '1', 'assigned_to_scout_id': 's1', 'status': 'assigned'},
        {'id': 'a2', 'player_id': '2', 'assigned_to_scout_id': 's1', 'status': 'in_progress'},
        {'id': 'a3', 'player_id': '3', 'assigned_to_scout_id': 's1', 'status': 'completed'},
        {'id': 'a4', 'player_id': '4', 'assigned_to_scout_id': 's1', 'status': 'reviewed'},
        # Two scouts on player 5; the newer row decides
        {
            'id': 'a5', 'player_id': '5', 'assigned_to_scout_id': 's1', 'status': 'assigned',
            'updated_at': '2026-10-01T00:00:00Z',
        },
        {
            'id': 'a6', 'player_id': '5', 'assigned_to_scout_id': 's2', 'status': 'in_progress',
            'updated_at': '2026-10-05T00:00:00Z',
        },
    ]
    reports = [
        {'id': 'r1', 'player_id': '1', 'scout_id': 's1', 'status': 'submitted'},
        {'id': 'r2', 'player_id': '2', 'scout_id': 's1', 'status': 'draft'},
    ]
    return build_index(PLAYERS, assignments, reports, shortlist_player_ids=['6', '2'])


class TestPlayerWorkflowStatus:
    """Tests for player_workflow_status."""

    def test_reported_wins(self, index):
        assert player_workflow_status('1', index) == 'reported'

    def test_draft_report_is_not_scouted(self, index):
        assert not has_been_scouted('2', index)
        assert player_workflow_status('2', index) == 'in_progress'

    def test_stored_completed(self, index):
        assert player_workflow_status('3', index) == 'completed'

    def test_reviewed_counts_as_assigned(self, index):
        assert player_workflow_status('4', index) == 'assigned'

    def test_latest_assignment_decides(self, index):
        assert latest_assignment('5', index).id == 'a6'
        assert player_workflow_status('5', index) == 'in_progress'

    def test_marked_for_scouting(self, index):
        assert player_workflow_status('6', index) == 'marked_for_scouting'

    def test_assigned_player_on_shortlist_is_not_marked(self, index):
        """Player 2 is on the shortlist but already assigned."""
        assert player_workflow_status('2', index) != 'marked_for_scouting'

    def test_not_scouted(self, index):
        assert player_workflow_status('7', index) == 'not_scouted'

    def test_numeric_id(self, index):
        assert player_workflow_status(1, index) == 'reported'


class TestFilterPlayers:
    """Tests for filter_players_by_status."""

    def test_filter(self, index):
        players = list(index.players.values())
        result = filter_players_by_status(players, 'in_progress', index)
        assert [p.id for p in result] == ['2', '5']

    def test_all(self, index):
        players = list(index.players.values())
        assert len(filter_players_by_status(players, 'all', index)) == 7

    def test_unknown_status(self, index):
        with pytest.raises(ValueError, match='Unknown player status'):
            filter_players_by_status([], 'lost', index)
