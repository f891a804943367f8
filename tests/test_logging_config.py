"""
Tests for the dictConfig built at startup.
"""
import logging

from fitcheck.core.config import settings
from fitcheck.core.logging import LOG_FORMAT, build_logging_config, setup_logging


class TestLoggingConfig:
    def test_explicit_level(self):
        config = build_logging_config("DEBUG")
        assert config["root"]["level"] == "DEBUG"

    def test_default_level_from_settings(self):
        assert build_logging_config()["root"]["level"] == settings.LOG_LEVEL

    def test_key_value_format(self):
        assert build_logging_config()["formatters"]["console"]["format"] == LOG_FORMAT

    def test_setup_keeps_sqlalchemy_quiet(self):
        setup_logging("DEBUG")
        try:
            assert logging.getLogger().level == logging.DEBUG
            assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        finally:
            setup_logging()
