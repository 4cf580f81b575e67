"""Board configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import BoardConfig
from .utils import load_json

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'scoutboard_config.json'


@lru_cache(maxsize=1)
def get_config() -> BoardConfig:
    """
    Load board configuration from data/scoutboard_config.json.

    Configuration is cached after first load.

    Returns:
        BoardConfig object with validated settings

    Raises:
        FileNotFoundError: If scoutboard_config.json doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from scoutboard.config import get_config
        config = get_config()
        print(f"Top performers shown: {config.top_performers}")
    """
    return load_json(CONFIG_PATH, schema=BoardConfig)  # type: ignore[no-any-return]


def get_top_performers() -> int:
    """Get how many scouts the performance ranking keeps."""
    return get_config().top_performers


def get_min_completion_days() -> int:
    """Get the floor applied to a single assignment's completion time."""
    return get_config().min_completion_days


def get_performance_thresholds() -> dict[str, int]:
    """Get completion-rate thresholds for the good and fair tiers."""
    return get_config().performance_thresholds


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
