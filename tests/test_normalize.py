"""Tests for row normalization and schema validation."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from scoutboard.index import build_index
from scoutboard.normalize import (
    ensure_utc,
    normalize_assignment,
    normalize_player,
    normalize_priority,
    normalize_report,
    rating_text,
)


class TestPlayerDefaults:
    """Tests for player field defaults."""

    def test_missing_fields(self):
        player = normalize_player({'id': 5})
        assert player.id == '5'
        assert player.name == 'Unknown Player'
        assert player.club == 'Unknown Club'
        assert player.primary_position == 'Unknown'
        assert rating_text(player) == 'N/A'

    def test_blank_strings(self):
        player = normalize_player({'id': '5', 'name': '  ', 'club': ''})
        assert player.name == 'Unknown Player'
        assert player.club == 'Unknown Club'

    def test_empty_position_slots_dropped(self):
        player = normalize_player({'id': '5', 'positions': [None, '', 'ST']})
        assert player.positions == ('ST',)

    def test_rating_one_decimal(self):
        assert rating_text(normalize_player({'id': '5', 'rating': 68})) == '68.0'

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError):
            normalize_player({'name': 'No Id'})

    def test_whole_number_float_id(self):
        assert normalize_player({'id': 10.0}).id == '10'

    def test_fractional_float_id_rejected(self):
        with pytest.raises(ValidationError):
            normalize_player({'id': 10.5})


class TestAssignmentNormalization:
    """Tests for assignment rows."""

    def test_defaults(self):
        a = normalize_assignment({'id': 'a1', 'player_id': 10, 'assigned_to_scout_id': 's1'})
        assert a.player_id == '10'
        assert a.status == 'assigned'
        assert a.priority is None
        assert a.deadline is None
        assert a.scout is None

    def test_invalid_status_rejected(self):
        with pytest.raises(ValidationError):
            normalize_assignment(
                {'id': 'a1', 'player_id': '10', 'assigned_to_scout_id': 's1', 'status': 'lost'}
            )

    def test_embedded_scout_takes_assignment_scout_id(self):
        a = normalize_assignment({
            'id': 'a1',
            'player_id': '10',
            'assigned_to_scout_id': 's1',
            'assigned_to_scout': {'first_name': 'Anna', 'email': 'anna@example.com'},
        })
        assert a.scout.id == 's1'
        assert a.scout.last_name == ''

    def test_empty_deadline(self):
        a = normalize_assignment(
            {'id': 'a1', 'player_id': '10', 'assigned_to_scout_id': 's1', 'deadline': ''}
        )
        assert a.deadline is None

    def test_timestamps_parsed_as_utc(self):
        a = normalize_assignment({
            'id': 'a1',
            'player_id': '10',
            'assigned_to_scout_id': 's1',
            'created_at': '2026-10-01T09:00:00',
            'updated_at': '2026-10-01T11:00:00+02:00',
        })
        assert a.created_at == datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc)
        assert a.updated_at == datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc)


class TestPriority:
    """Tests for priority normalization."""

    @pytest.mark.parametrize('raw,expected', [('High', 'High'), ('medium', 'Medium'), (' LOW ', 'Low')])
    def test_known(self, raw, expected):
        assert normalize_priority(raw) == expected

    def test_unknown(self):
        assert normalize_priority('urgent') is None

    def test_missing(self):
        assert normalize_priority(None) is None


class TestReportNormalization:
    """Tests for report rows."""

    def test_default_status_is_draft(self):
        report = normalize_report({'id': 'r1', 'player_id': 10, 'scout_id': 's1'})
        assert report.status == 'draft'
        assert report.player_id == '10'

    def test_invalid_status_rejected(self):
        with pytest.raises(ValidationError):
            normalize_report({'id': 'r1', 'player_id': '10', 'scout_id': 's1', 'status': 'final'})


class TestIndex:
    """Tests for build_index lookups."""

    def test_completion_reports_skip_drafts(self):
        index = build_index(
            [],
            [],
            [
                {'id': 'r1', 'player_id': '10', 'scout_id': 's1', 'status': 'draft'},
                {'id': 'r2', 'player_id': '10', 'scout_id': 's2', 'status': 'submitted'},
            ],
        )
        assert index.completion_report('10', 's1') is None
        assert index.completion_report(10, 's2').id == 'r2'
        assert index.player_has_completion('10')

    def test_marked_players_exclude_assigned(self):
        index = build_index(
            [],
            [{'id': 'a1', 'player_id': '10', 'assigned_to_scout_id': 's1'}],
            [],
            shortlist_player_ids=['10', 42, None, '42'],
        )
        assert index.shortlist_player_ids == ('10', '42')
        assert index.marked_player_ids == ('42',)

    def test_first_player_row_wins(self):
        index = build_index([{'id': '1', 'name': 'First'}, {'id': 1, 'name': 'Second'}], [], [])
        assert index.players['1'].name == 'First'


def test_ensure_utc_none():
    assert ensure_utc(None) is None
