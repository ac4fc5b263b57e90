"""
Tests for logging helpers
"""

import logging

import pytest

from php_blueprint.core.logger import (
    SensitiveDataFilter,
    setup_logging,
    get_logger,
    truncate_for_log,
)


def _record(message: str, *args) -> logging.LogRecord:
    return logging.LogRecord("blueprint.test", logging.INFO, __file__, 1, message, args, None)


class TestSensitiveDataFilter:
    """Tests for production log redaction."""

    def test_redacts_secrets(self):
        record = _record("Using api_key=%s", "abc123")

        assert SensitiveDataFilter(enabled=True).filter(record) is True
        assert record.getMessage() == "[REDACTED - contains sensitive data]"

    def test_leaves_plain_messages(self):
        record = _record("[HISTORY] Appended %s", "2025-01-01T00:00:00.000Z")

        SensitiveDataFilter(enabled=True).filter(record)

        assert record.getMessage() == "[HISTORY] Appended 2025-01-01T00:00:00.000Z"

    def test_disabled_filter_passes_through(self):
        record = _record("token present")

        SensitiveDataFilter(enabled=False).filter(record)

        assert record.getMessage() == "token present"


class TestHelpers:
    """Tests for logger helpers."""

    def test_namespaced_logger(self):
        assert get_logger("history").name == "blueprint.history"

    def test_truncate(self):
        assert truncate_for_log("short") == "short"
        assert truncate_for_log("x" * 150, max_length=10) == "x" * 10 + "..."


@pytest.fixture
def restore_logging():
    """Put back root handlers and levels replaced by setup_logging()."""
    root = logging.getLogger()
    blueprint = logging.getLogger("blueprint")
    saved = (list(root.handlers), root.level, blueprint.level)
    yield
    for handler in list(root.handlers):
        if handler not in saved[0]:
            root.removeHandler(handler)
    for handler in saved[0]:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved[1])
    blueprint.setLevel(saved[2])


class TestSetupLogging:
    """Tests for the production logging configuration."""

    def test_production_redacts_child_logger_records(self, capsys, restore_logging):
        setup_logging(dev_mode=False)

        get_logger("gemini").info("api_key=sk-secret-123")
        get_logger("generation").info("[GENERATION] plan ready")

        out = capsys.readouterr().out
        assert "sk-secret-123" not in out
        assert "blueprint.gemini - INFO - [REDACTED - contains sensitive data]" in out
        assert "[GENERATION] plan ready" in out

    def test_development_does_not_redact(self, capsys, restore_logging):
        setup_logging(dev_mode=True)

        get_logger("gemini").debug("token=visible-in-dev")

        assert "token=visible-in-dev" in capsys.readouterr().out
