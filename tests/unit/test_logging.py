"""Tests for structlog configuration."""

import pytest
import structlog

from active_audit.config import AuditSettings
from active_audit.core.logging import configure_logging


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_development_uses_console_renderer(self):
        """Verify non-production settings render for humans."""
        configure_logging(AuditSettings(_env_file=None, environment="development"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_production_uses_json_renderer(self):
        """Verify production settings render JSON."""
        configure_logging(AuditSettings(_env_file=None, environment="production"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_unknown_level_falls_back_to_info(self):
        """Verify a bogus log level does not break configuration."""
        configure_logging(AuditSettings(_env_file=None, log_level="chatty"))

        assert structlog.is_configured()
