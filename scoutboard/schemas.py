"""Pydantic schemas for snapshot rows, snapshot files and board configuration."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


def _coerce_id(v):
    """Identifiers arrive as strings or numbers; compare them as strings."""
    if v is None:
        return v
    if isinstance(v, bool):
        raise ValueError(f'Invalid identifier: {v!r}')
    if isinstance(v, (int, str)):
        return str(v).strip()
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    raise ValueError(f'Invalid identifier: {v!r}')


class ScoutProfileRecord(BaseModel):
    """Row from the profiles table (scouts and managers)."""

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return _coerce_id(v)

    class Config:
        extra = 'ignore'


class PlayerRecord(BaseModel):
    """Row from the players table."""

    id: str = Field(..., min_length=1)
    name: str | None = None
    club: str | None = None
    positions: list[str] = Field(default_factory=list)
    age: int | None = Field(None, ge=0, le=100)
    rating: float | None = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return _coerce_id(v)

    @field_validator('positions', mode='before')
    @classmethod
    def drop_empty_positions(cls, v):
        """Drop null or blank position slots (second position is often empty)."""
        if v is None:
            return []
        return [p for p in v if isinstance(p, str) and p.strip()]

    class Config:
        extra = 'ignore'


class AssignmentRecord(BaseModel):
    """Row from the scouting_assignments table."""

    id: str = Field(..., min_length=1)
    player_id: str = Field(..., min_length=1)
    assigned_to_scout_id: str = Field(..., min_length=1)
    assigned_by_manager_id: str | None = None
    priority: str | None = None
    status: str = Field(default='assigned', pattern=r'^(assigned|in_progress|completed|reviewed)$')
    assignment_notes: str | None = None
    deadline: str | None = None
    report_type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    assigned_to_scout: ScoutProfileRecord | None = None

    @field_validator('id', 'player_id', 'assigned_to_scout_id', 'assigned_by_manager_id', mode='before')
    @classmethod
    def coerce_ids(cls, v):
        return _coerce_id(v)

    class Config:
        extra = 'ignore'


class ReportRecord(BaseModel):
    """Row from the reports table."""

    id: str = Field(..., min_length=1)
    player_id: str = Field(..., min_length=1)
    scout_id: str = Field(..., min_length=1)
    status: str = Field(default='draft', pattern=r'^(draft|submitted|reviewed)$')
    created_at: datetime | None = None
    updated_at: datetime | None = None
    template_name: str | None = None
    match_context: str | None = None
    scout_profile: ScoutProfileRecord | None = None

    @field_validator('id', 'player_id', 'scout_id', mode='before')
    @classmethod
    def coerce_ids(cls, v):
        return _coerce_id(v)

    class Config:
        extra = 'ignore'


class ShortlistRecord(BaseModel):
    """Row from the shortlists table with its member player ids."""

    id: str = Field(..., min_length=1)
    name: str = ''
    player_ids: list[str] = Field(default_factory=list)
    is_scouting_assignment_list: bool = False

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return _coerce_id(v)

    @field_validator('player_ids', mode='before')
    @classmethod
    def coerce_player_ids(cls, v):
        if v is None:
            return []
        return [_coerce_id(pid) for pid in v if pid is not None]

    class Config:
        extra = 'ignore'


class SnapshotFile(BaseModel):
    """Complete snapshot of the tables the board reads."""

    players: list[PlayerRecord] = Field(default_factory=list)
    scouts: list[ScoutProfileRecord] = Field(default_factory=list)
    assignments: list[AssignmentRecord] = Field(default_factory=list)
    reports: list[ReportRecord] = Field(default_factory=list)
    shortlists: list[ShortlistRecord] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


class BoardConfig(BaseModel):
    """Board configuration settings."""

    top_performers: int = Field(4, ge=1, le=50)
    min_completion_days: int = Field(1, ge=0, le=30)
    performance_thresholds: dict[str, int] = Field(
        default_factory=lambda: {'good': 80, 'fair': 60}
    )

    @field_validator('performance_thresholds')
    @classmethod
    def validate_thresholds(cls, v):
        """Ensure both tiers are present and ordered."""
        for tier in ('good', 'fair'):
            if tier not in v:
                raise ValueError(f'Missing performance threshold: {tier}')
            if not (0 <= v[tier] <= 100):
                raise ValueError(f'Invalid threshold for {tier}: {v[tier]}')
        if v['fair'] > v['good']:
            raise ValueError('fair threshold must not exceed good threshold')
        return v

    class Config:
        extra = 'forbid'
