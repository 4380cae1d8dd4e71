"""Tests for structured logging setup."""

import logging

import pytest
import structlog

from src.observability.logging import (
    bind_context,
    clear_context,
    get_logger,
    setup_logging,
)


@pytest.fixture
def root_level():
    """Restore the root logger level after a test changes it."""
    root = logging.getLogger()
    original = root.level
    yield root
    root.setLevel(original)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_development(self, monkeypatch):
        """Test development setup uses the console renderer."""
        monkeypatch.setenv("ENVIRONMENT", "development")
        setup_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_production(self, monkeypatch):
        """Test production setup renders JSON."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        setup_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_level_from_settings(self, monkeypatch, root_level):
        """Test the root level follows LOG_LEVEL."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        setup_logging()

        assert root_level.level == logging.WARNING

    def test_level_override(self, monkeypatch, root_level):
        """Test an explicit level wins over LOG_LEVEL."""
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        setup_logging("DEBUG")

        assert root_level.level == logging.DEBUG

    def test_get_logger(self):
        """Test a usable logger is returned."""
        logger = get_logger("test")
        logger.info("Mood analyzed", mood="😊")


class TestContext:
    """Tests for bound logging context."""

    def test_bind_and_clear(self):
        """Test context variables are bound and cleared."""
        bind_context(entry_id="entry_1")
        assert structlog.contextvars.get_contextvars()["entry_id"] == "entry_1"

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
