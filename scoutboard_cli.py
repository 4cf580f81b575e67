#!/usr/bin/env python3
"""
Scout management board CLI

Builds the scouting kanban board from a JSON snapshot of the scouting tables.

Usage:
    python scoutboard_cli.py --snapshot data/snapshot.json
    python scoutboard_cli.py --snapshot data/snapshot.json --scout s1 --search arsenal
    python scoutboard_cli.py --snapshot data/snapshot.json --performance --excel out/board.xlsx
"""

import argparse
import logging
import sys
from pathlib import Path

from scoutboard import (
    SnapshotRepository,
    build_board,
    export_board_to_excel,
    rank_scouts,
    save_board,
    summarize_assignments,
    validate_index,
)
from scoutboard.constants import BUCKETS
from scoutboard.logging_config import get_logger, setup_logging
from scoutboard.status import last_status_change


def print_board(board, quiet: bool = False) -> None:
    """Print each bucket with its cards."""
    for bucket in BUCKETS:
        cards = board.bucket(bucket)
        print(f"\n{bucket.upper()} ({len(cards)})")
        print("-" * 60)
        if quiet:
            continue
        for card in cards:
            priority = f" [{card.priority}]" if card.priority else ""
            print(f"  {card.player_name} ({card.club}) - {card.label} - {card.assigned_to}{priority}")
            print(f"      {last_status_change(card.status, card.updated_at)}")


def main():
    parser = argparse.ArgumentParser(description="Scouting workflow board")
    parser.add_argument(
        "--snapshot", "-s",
        required=True,
        help="Path to snapshot JSON (players, scouts, assignments, reports, shortlists)",
    )
    parser.add_argument(
        "--scout",
        default=None,
        help="Only show this scout's assignments ('all' for everyone)",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Filter by player name or club",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the board as JSON to this path",
    )
    parser.add_argument(
        "--excel",
        default=None,
        help="Export the board to this .xlsx path",
    )
    parser.add_argument(
        "--performance",
        action="store_true",
        help="Show scout performance ranking",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Report data inconsistencies",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print bucket counts",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Directory for log files (no file logging if omitted)",
    )

    args = parser.parse_args()

    setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        level=logging.WARNING if args.quiet else logging.INFO,
        log_to_file=args.log_dir is not None,
    )
    logger = get_logger('scoutboard.cli')

    snapshot_path = Path(args.snapshot)
    if not snapshot_path.exists():
        print(f"❌ Snapshot file not found: {snapshot_path}")
        sys.exit(1)

    try:
        repo = SnapshotRepository.from_file(snapshot_path)
    except ValueError as e:
        print(f"❌ Invalid snapshot: {e}")
        sys.exit(1)

    index = repo.build_index()
    board = build_board(index, scout_id=args.scout, search_term=args.search)

    print_board(board, quiet=args.quiet)

    summary = summarize_assignments(index, scout_id=None if args.scout in (None, "all") else args.scout)
    print("\n" + "=" * 60)
    print(
        f"Assignments: {summary.total} total, {summary.pending} pending, "
        f"{summary.in_progress} in progress, {summary.reviewed} under review, "
        f"{summary.completed} completed"
    )

    ranking = None
    if args.performance:
        ranking = rank_scouts(index)
        print("\nSCOUT PERFORMANCE")
        print("=" * 60)
        for rank, perf in enumerate(ranking, 1):
            print(
                f"  {rank}. {perf.scout_name}: {perf.completed_count}/{perf.total_assignments} "
                f"({perf.completion_rate}%), avg {perf.avg_completion_days}d"
            )

    if args.validate:
        warnings = validate_index(index)
        if warnings:
            print(f"\n⚠️  {len(warnings)} data issue(s):")
            for warning in warnings:
                print(f"   - {warning}")
        else:
            print("\n✓ No data issues found")

    if args.output:
        save_board(args.output, board)
        print(f"Board saved: {args.output}")

    if args.excel:
        export_board_to_excel(board, args.excel, performance=ranking)
        print(f"Board exported: {args.excel}")

    logger.debug("Done")


if __name__ == "__main__":
    main()
