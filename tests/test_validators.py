"""Unit tests for data consistency checks."""

from scoutboard.index import build_index
from scoutboard.validators import (
    find_duplicate_assignments,
    find_orphaned_assignments,
    find_shortlisted_and_assigned,
    find_stale_statuses,
    validate_index,
)

PLAYERS = [
    {'id': '10', 'name': 'Marcus Reid', 'club': 'Brentford'},
    {'id': '42', 'name': 'Luca Bianchi', 'club': 'Atalanta'},
]


def assignment(assignment_id, player_id, scout_id='s1', status='assigned'):
    return {
        'id': assignment_id,
        'player_id': player_id,
        'assigned_to_scout_id': scout_id,
        'status': status,
    }


class TestConsistencyChecks:
    """Tests for the individual checks."""

    def test_clean_data(self):
        index = build_index(PLAYERS, [assignment('a1', '10')], [], shortlist_player_ids=['42'])
        assert validate_index(index) == []

    def test_shortlisted_and_assigned(self):
        index = build_index(PLAYERS, [assignment('a1', '10')], [], shortlist_player_ids=['10', '42'])
        warnings = find_shortlisted_and_assigned(index)
        assert len(warnings) == 1
        assert 'Player 10' in warnings[0]
        assert 'scouting shortlist' in warnings[0]

    def test_orphaned_assignment(self):
        index = build_index(PLAYERS, [assignment('a1', '999')], [])
        warnings = find_orphaned_assignments(index)
        assert warnings == ['Assignment a1 references missing player 999']

    def test_duplicate_assignment(self):
        index = build_index(
            PLAYERS,
            [assignment('a1', '10'), assignment('a2', '10'), assignment('a3', '10', 's2')],
            [],
        )
        warnings = find_duplicate_assignments(index)
        assert warnings == ['Player 10 is assigned to scout s1 2 times']

    def test_stale_status(self):
        index = build_index(
            PLAYERS,
            [assignment('a1', '10', status='in_progress'), assignment('a2', '42', status='completed')],
            [
                {'id': 'r1', 'player_id': '10', 'scout_id': 's1', 'status': 'submitted'},
                {'id': 'r2', 'player_id': '42', 'scout_id': 's1', 'status': 'submitted'},
            ],
        )
        warnings = find_stale_statuses(index)
        assert warnings == ['Assignment a1 is still in_progress but report r1 was submitted']

    def test_draft_report_is_not_stale(self):
        index = build_index(
            PLAYERS,
            [assignment('a1', '10')],
            [{'id': 'r1', 'player_id': '10', 'scout_id': 's1', 'status': 'draft'}],
        )
        assert find_stale_statuses(index) == []

    def test_validate_index_collects_everything(self):
        index = build_index(
            PLAYERS,
            [assignment('a1', '10'), assignment('a2', '10'), assignment('a3', '999')],
            [{'id': 'r1', 'player_id': '10', 'scout_id': 's1', 'status': 'submitted'}],
            shortlist_player_ids=['10'],
        )
        warnings = validate_index(index)
        # shortlist + orphan + duplicate + two stale rows
        assert len(warnings) == 5
