from .models import (
    Player,
    ScoutProfile,
    ScoutingAssignment,
    Report,
    AssignmentStatusInfo,
    KanbanCard,
    KanbanBoard,
    ScoutPerformance,
    AssignmentSummary,
)
from .index import ScoutingIndex, build_index
from .status import (
    determine_assignment_status,
    kanban_bucket,
    scout_display_name,
    time_ago,
    last_status_change,
)
from .board import build_board, resolve_board
from .player_status import has_been_scouted, player_workflow_status, filter_players_by_status
from .performance import scout_performance, rank_scouts, summarize_assignments
from .validators import validate_index
from .repository import SnapshotRepository, save_board
from .excel_export import export_board_to_excel

__all__ = [
    # Models
    'Player',
    'ScoutProfile',
    'ScoutingAssignment',
    'Report',
    'AssignmentStatusInfo',
    'KanbanCard',
    'KanbanBoard',
    'ScoutPerformance',
    'AssignmentSummary',
    # Indexing
    'ScoutingIndex',
    'build_index',
    # Status derivation
    'determine_assignment_status',
    'kanban_bucket',
    'scout_display_name',
    'time_ago',
    'last_status_change',
    # Board
    'build_board',
    'resolve_board',
    # Player status
    'has_been_scouted',
    'player_workflow_status',
    'filter_players_by_status',
    # Metrics
    'scout_performance',
    'rank_scouts',
    'summarize_assignments',
    # Data checks
    'validate_index',
    # Snapshot I/O
    'SnapshotRepository',
    'save_board',
    'export_board_to_excel',
]
