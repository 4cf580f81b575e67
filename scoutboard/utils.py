"""JSON file helpers shared by the repository, config and CLI."""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('scoutboard.utils')


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load a JSON file, optionally validating it against a Pydantic model.

    Args:
        path: Path to JSON file
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON, or the validated model when a schema is given

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from scoutboard.schemas import SnapshotFile
        snapshot = load_json('data/snapshot.json', schema=SnapshotFile)
    """
    path = Path(path)
    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema is None:
        return data

    try:
        validated = schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'Schema validation failed for {path}: {e}')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e

    logger.debug(f'Schema validation passed for: {path}')
    return validated


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f'Object of type {type(value).__name__} is not JSON-serializable')


def save_json(
    path: Path | str,
    data: Any,
    indent: int = 2,
) -> None:
    """
    Save data as a JSON file, creating parent directories as needed.

    Pydantic models are dumped first; datetimes are written as ISO strings.

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If file cannot be written
    """
    path = Path(path)
    logger.debug(f'Saving JSON to: {path}')

    path.parent.mkdir(parents=True, exist_ok=True)
    json_data = data.model_dump() if isinstance(data, BaseModel) else data

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(json_data, f, indent=indent, ensure_ascii=False, default=_json_default)
    except TypeError as e:
        logger.error(f'Data is not JSON-serializable: {e}')
        raise
    except OSError as e:
        logger.error(f'Failed to write file {path}: {e}')
        raise
