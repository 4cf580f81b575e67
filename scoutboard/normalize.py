"""Turn raw table rows into board models.

All defaulting of missing fields happens here, driven by
``constants.FIELD_DEFAULTS``, so the status and board code never has to
guess at empty values. Rows may be plain dicts or already-validated
schema records.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from .constants import FIELD_DEFAULTS, PRIORITIES
from .models import Player, Report, ScoutingAssignment, ScoutProfile
from .schemas import AssignmentRecord, PlayerRecord, ReportRecord, ScoutProfileRecord

logger = logging.getLogger('scoutboard.normalize')


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive timestamps are stored in UTC; make them aware."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _text(value: Optional[str], default: str) -> str:
    if value is None or not value.strip():
        return default
    return value.strip()


def rating_text(player: Player) -> str:
    """Rating with one decimal, or the N/A placeholder."""
    if player.rating is None:
        return FIELD_DEFAULTS['rating']
    return f'{player.rating:.1f}'


def normalize_player(row: PlayerRecord | dict[str, Any]) -> Player:
    record = PlayerRecord.model_validate(row)
    return Player(
        id=record.id,
        name=_text(record.name, FIELD_DEFAULTS['player_name']),
        club=_text(record.club, FIELD_DEFAULTS['club']),
        positions=tuple(p.strip() for p in record.positions),
        age=record.age,
        rating=record.rating,
    )


def normalize_scout(row: ScoutProfileRecord | dict[str, Any], scout_id: Optional[str] = None) -> ScoutProfile:
    """Build a ScoutProfile; ``scout_id`` fills in the id for joined profiles."""
    record = ScoutProfileRecord.model_validate(row)
    return ScoutProfile(
        id=record.id or scout_id or '',
        first_name=(record.first_name or '').strip(),
        last_name=(record.last_name or '').strip(),
        email=(record.email or '').strip(),
    )


def normalize_priority(value: Optional[str]) -> Optional[str]:
    """Return a known priority, or None so no priority tag is shown."""
    if value is None:
        return None
    for priority in PRIORITIES:
        if value.strip().lower() == priority.lower():
            return priority
    logger.debug(f'Ignoring unknown priority: {value!r}')
    return None


def normalize_assignment(row: AssignmentRecord | dict[str, Any]) -> ScoutingAssignment:
    record = AssignmentRecord.model_validate(row)
    scout = None
    if record.assigned_to_scout is not None:
        scout = normalize_scout(record.assigned_to_scout, scout_id=record.assigned_to_scout_id)
    return ScoutingAssignment(
        id=record.id,
        player_id=record.player_id,
        assigned_to_scout_id=record.assigned_to_scout_id,
        assigned_by_manager_id=record.assigned_by_manager_id,
        priority=normalize_priority(record.priority),
        status=record.status,
        notes=record.assignment_notes or None,
        deadline=record.deadline or None,
        report_type=record.report_type,
        created_at=ensure_utc(record.created_at),
        updated_at=ensure_utc(record.updated_at),
        scout=scout,
    )


def normalize_report(row: ReportRecord | dict[str, Any]) -> Report:
    record = ReportRecord.model_validate(row)
    scout = None
    if record.scout_profile is not None:
        scout = normalize_scout(record.scout_profile, scout_id=record.scout_id)
    return Report(
        id=record.id,
        player_id=record.player_id,
        scout_id=record.scout_id,
        status=record.status,
        created_at=ensure_utc(record.created_at),
        updated_at=ensure_utc(record.updated_at),
        template_name=record.template_name,
        match_context=record.match_context,
        scout=scout,
    )


def _normalize_all(rows: Iterable[Any], model: type, func, prepared=None) -> list:
    # Rows that are already board models skip validation
    return [
        (prepared(row) if prepared else row) if isinstance(row, model) else func(row)
        for row in rows
    ]


def _with_utc_timestamps(row):
    """Board models built by callers may carry naive timestamps."""
    return replace(row, created_at=ensure_utc(row.created_at), updated_at=ensure_utc(row.updated_at))


def normalize_players(rows: Iterable[Any]) -> list[Player]:
    return _normalize_all(rows, Player, normalize_player)


def normalize_scouts(rows: Iterable[Any]) -> list[ScoutProfile]:
    return _normalize_all(rows, ScoutProfile, normalize_scout)


def normalize_assignments(rows: Iterable[Any]) -> list[ScoutingAssignment]:
    return _normalize_all(rows, ScoutingAssignment, normalize_assignment, _with_utc_timestamps)


def normalize_reports(rows: Iterable[Any]) -> list[Report]:
    return _normalize_all(rows, Report, normalize_report, _with_utc_timestamps)
