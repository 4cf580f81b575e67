"""Excel export of the scouting board."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import openpyxl
from openpyxl.styles import Font

from .constants import BUCKETS
from .models import KanbanBoard, ScoutPerformance
from .status import last_status_change

logger = logging.getLogger('scoutboard.excel_export')

CARD_COLUMNS = [
    ('Player', 'player_name'),
    ('Club', 'club'),
    ('Position', 'position'),
    ('Rating', 'rating'),
    ('Status', 'label'),
    ('Assigned To', 'assigned_to'),
    ('Priority', 'priority'),
    ('Deadline', 'deadline'),
    ('Template', 'template_name'),
]

PERFORMANCE_COLUMNS = [
    ('Scout', 'scout_name'),
    ('Total', 'total_assignments'),
    ('Completed', 'completed_count'),
    ('Completion %', 'completion_rate'),
    ('Avg Days', 'avg_completion_days'),
    ('Tier', 'tier'),
]


def _write_header(ws, headers: list[str]) -> None:
    for col, header in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=col, value=header)
        cell.font = Font(bold=True)


def export_board_to_excel(
    board: KanbanBoard,
    path: Path | str,
    performance: Optional[list[ScoutPerformance]] = None,
    now: Optional[datetime] = None,
) -> Path:
    """
    Write the board to an .xlsx workbook, one sheet per bucket.

    Args:
        board: Board to export
        path: Destination .xlsx path
        performance: Optional scout ranking, written to a 'Performance' sheet
        now: Reference time for the 'Last Change' column

    Returns:
        Path of the written workbook
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    wb = openpyxl.Workbook()
    wb.remove(wb.active)

    for bucket in BUCKETS:
        ws = wb.create_sheet(title=bucket.title())
        _write_header(ws, [header for header, _ in CARD_COLUMNS] + ['Last Change'])
        for row, card in enumerate(board.bucket(bucket), start=2):
            for col, (_, attr) in enumerate(CARD_COLUMNS, start=1):
                ws.cell(row=row, column=col, value=getattr(card, attr))
            ws.cell(
                row=row,
                column=len(CARD_COLUMNS) + 1,
                value=last_status_change(card.status, card.updated_at, now),
            )

    if performance is not None:
        ws = wb.create_sheet(title='Performance')
        _write_header(ws, [header for header, _ in PERFORMANCE_COLUMNS])
        for row, perf in enumerate(performance, start=2):
            for col, (_, attr) in enumerate(PERFORMANCE_COLUMNS, start=1):
                ws.cell(row=row, column=col, value=getattr(perf, attr))

    wb.save(path)
    wb.close()
    logger.info(f'Board exported to {path}')
    return path
