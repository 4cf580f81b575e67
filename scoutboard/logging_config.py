"""Logging setup for the scoutboard CLI and scripts."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

FILE_FORMAT = '%(asctime)s %(levelname)-8s %(name)s [%(module)s:%(lineno)d] %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int | str = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Attach handlers to the 'scoutboard' logger, replacing any from an earlier call.

    A log file named scoutboard_<timestamp>.log is written to ``log_dir``
    (./logs when not given). Console output goes to stderr so it never mixes
    with board output on stdout.

    Example:
        from scoutboard.logging_config import setup_logging
        logger = setup_logging(log_to_file=False, level='DEBUG')
        logger.debug("Dropped orphaned assignment")
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root = logging.getLogger('scoutboard')
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()

    if log_to_file:
        target_dir = Path(log_dir) if log_dir is not None else Path('logs')
        target_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        root.addHandler(
            _handler(logging.FileHandler(target_dir / f'scoutboard_{stamp}.log'), level, FILE_FORMAT)
        )

    if log_to_console:
        root.addHandler(_handler(logging.StreamHandler(sys.stderr), level, CONSOLE_FORMAT))

    return root


def get_logger(name: str = 'scoutboard') -> logging.Logger:
    """Logger under the scoutboard hierarchy (unconfigured until setup_logging runs)."""
    if name != 'scoutboard' and not name.startswith('scoutboard.'):
        name = f'scoutboard.{name}'
    return logging.getLogger(name)
