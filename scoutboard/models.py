"""Data models for the scouting workflow board."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Optional

from .constants import FIELD_DEFAULTS


@dataclass(frozen=True)
class Player:
    """A player as seen by the board, after defaults are applied."""
    id: str
    name: str
    club: str
    positions: tuple[str, ...] = ()
    age: Optional[int] = None
    rating: Optional[float] = None

    @property
    def primary_position(self) -> str:
        return self.positions[0] if self.positions else FIELD_DEFAULTS['position']


@dataclass(frozen=True)
class ScoutProfile:
    """Scout (or manager) profile."""
    id: str
    first_name: str = ''
    last_name: str = ''
    email: str = ''


@dataclass(frozen=True)
class ScoutingAssignment:
    """One scout linked to one player."""
    id: str
    player_id: str
    assigned_to_scout_id: str
    assigned_by_manager_id: Optional[str] = None
    priority: Optional[str] = None
    status: str = 'assigned'
    notes: Optional[str] = None
    deadline: Optional[str] = None
    report_type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    scout: Optional[ScoutProfile] = None  # profile joined onto the row, if any


@dataclass(frozen=True)
class Report:
    """A scout's report on a player."""
    id: str
    player_id: str
    scout_id: str
    status: str = 'draft'
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    template_name: Optional[str] = None
    match_context: Optional[str] = None
    scout: Optional[ScoutProfile] = None


@dataclass(frozen=True)
class AssignmentStatusInfo:
    """Display status derived for one (player, scout) pair."""
    status: str
    label: str
    variant: str
    color: str
    scout_name: str


@dataclass
class KanbanCard:
    """One row on the scouting board."""
    id: str
    player_id: str
    player_name: str
    club: str
    position: str
    rating: str
    status: str
    label: str
    variant: str
    color: str
    assigned_to: str
    scout_id: Optional[str] = None
    assignment_id: Optional[str] = None
    priority: Optional[str] = None
    deadline: Optional[str] = None
    template_name: Optional[str] = None
    match_context: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        for key in ('created_at', 'updated_at'):
            if data[key] is not None:
                data[key] = data[key].isoformat()
        return data


@dataclass
class KanbanBoard:
    """Cards grouped into workflow buckets."""
    shortlisted: list[KanbanCard] = field(default_factory=list)
    assigned: list[KanbanCard] = field(default_factory=list)
    completed: list[KanbanCard] = field(default_factory=list)

    def bucket(self, name: str) -> list[KanbanCard]:
        return getattr(self, name)  # type: ignore[no-any-return]

    def counts(self) -> dict[str, int]:
        return {
            'shortlisted': len(self.shortlisted),
            'assigned': len(self.assigned),
            'completed': len(self.completed),
        }

    def to_dict(self) -> dict[str, list[dict]]:
        return {
            'shortlisted': [c.to_dict() for c in self.shortlisted],
            'assigned': [c.to_dict() for c in self.assigned],
            'completed': [c.to_dict() for c in self.completed],
        }


@dataclass
class ScoutPerformance:
    """Workload and completion metrics for one scout."""
    scout_id: str
    scout_name: str
    total_assignments: int = 0
    completed_count: int = 0
    completion_rate: int = 0  # whole percent
    avg_completion_days: int = 0
    tier: str = 'poor'


@dataclass
class AssignmentSummary:
    """Counts of assignments by effective status."""
    total: int = 0
    pending: int = 0
    in_progress: int = 0
    reviewed: int = 0
    completed: int = 0
