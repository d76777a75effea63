"""Tests for configuration classes."""

import os
from unittest.mock import patch


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_level(self):
        """Test that logging defaults to WARNING."""
        with patch.dict(os.environ, {}, clear=True):
            from config import LoggingConfig

            assert LoggingConfig().level == "WARNING"

    def test_level_from_env(self):
        """Test that LOG_LEVEL is read and upper-cased."""
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            from config import LoggingConfig

            assert LoggingConfig().level == "DEBUG"


class TestTableConfig:
    """Tests for TableConfig class."""

    def test_defaults(self):
        """Test default table settings."""
        with patch.dict(os.environ, {}, clear=True):
            from config import TableConfig

            table = TableConfig()

            assert table.betting_enabled is True
            assert table.seed is None
            assert table.max_prompt_attempts is None

    def test_betting_disabled(self):
        with patch.dict(os.environ, {"BLACKJACK_BETTING": "false"}):
            from config import TableConfig

            assert TableConfig().betting_enabled is False

    def test_seed_from_env(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "7"}):
            from config import TableConfig

            assert TableConfig().seed == 7

    def test_prompt_attempts(self):
        """Test that zero means unbounded and positive values are kept."""
        from config import TableConfig

        with patch.dict(os.environ, {"BLACKJACK_MAX_PROMPT_ATTEMPTS": "0"}):
            assert TableConfig().max_prompt_attempts is None
        with patch.dict(os.environ, {"BLACKJACK_MAX_PROMPT_ATTEMPTS": "3"}):
            assert TableConfig().max_prompt_attempts == 3


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_nested_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            from config import AppConfig, LoggingConfig, TableConfig

            app = AppConfig()

            assert app.debug is False
            assert isinstance(app.logging, LoggingConfig)
            assert isinstance(app.table, TableConfig)

    def test_debug_from_env(self):
        with patch.dict(os.environ, {"DEBUG": "true"}):
            from config import AppConfig

            assert AppConfig().debug is True

    def test_global_instance(self):
        from config import AppConfig, config

        assert isinstance(config, AppConfig)
