"""Tests for board configuration and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from scoutboard.config import (
    clear_config_cache,
    get_config,
    get_min_completion_days,
    get_performance_thresholds,
    get_top_performers,
)
from scoutboard.logging_config import get_logger, setup_logging
from scoutboard.schemas import BoardConfig


class TestConfigFile:
    """Tests for the shipped data/scoutboard_config.json."""

    def setup_method(self):
        clear_config_cache()

    def test_loads(self):
        config = get_config()
        assert isinstance(config, BoardConfig)

    def test_accessors(self):
        assert get_top_performers() == 4
        assert get_min_completion_days() == 1
        assert get_performance_thresholds() == {'good': 80, 'fair': 60}

    def test_cached(self):
        assert get_config() is get_config()


class TestBoardConfigSchema:
    """Tests for BoardConfig validation."""

    def test_defaults(self):
        config = BoardConfig()
        assert config.top_performers == 4
        assert config.performance_thresholds == {'good': 80, 'fair': 60}

    def test_missing_tier(self):
        with pytest.raises(ValidationError, match='Missing performance threshold'):
            BoardConfig(performance_thresholds={'good': 80})

    def test_unordered_tiers(self):
        with pytest.raises(ValidationError):
            BoardConfig(performance_thresholds={'good': 50, 'fair': 70})

    def test_out_of_range_top_performers(self):
        with pytest.raises(ValidationError):
            BoardConfig(top_performers=0)

    def test_unknown_key(self):
        with pytest.raises(ValidationError):
            BoardConfig(show_avatars=True)


class TestLoggingSetup:
    """Tests for setup_logging."""

    def test_file_and_console_handlers(self, tmp_path):
        logger = setup_logging(log_dir=tmp_path / 'logs', level='DEBUG')
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        get_logger('board').debug('hello')
        for handler in logger.handlers:
            handler.flush()
        log_files = list((tmp_path / 'logs').glob('scoutboard_*.log'))
        assert len(log_files) == 1
        assert 'hello' in log_files[0].read_text()

        # A second call replaces handlers instead of stacking them
        logger = setup_logging(log_to_file=False)
        assert len(logger.handlers) == 1
        logger.handlers = []

    def test_get_logger_namespacing(self):
        assert get_logger('board').name == 'scoutboard.board'
        assert get_logger('scoutboard.index').name == 'scoutboard.index'
