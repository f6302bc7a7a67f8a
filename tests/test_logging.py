"""Tests for settings and logging setup."""

import json
import logging

import structlog
from structlog.testing import capture_logs

from pgmoney.core.config import Settings
from pgmoney.core.logging import get_logger, setup_logging
from pgmoney.core.money import Money


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MONEY_COLUMN_LENGTH", "20")
    monkeypatch.setenv("LOG_JSON", "true")
    
    settings = Settings()
    assert settings.MONEY_COLUMN_LENGTH == 20
    assert settings.LOG_JSON is True


def test_scan_failure_logged_as_json(capsys):
    """Test that a failed scan emits a structured warning."""
    setup_logging(level="WARNING", json_logs=True, cache_logger=False)
    try:
        money = Money()
        try:
            money.scan(42)
        except ValueError:
            pass
        
        lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("{")]
        event = json.loads(lines[-1])
        assert event["event"] == "Money scan failed"
        assert event["error_type"] == "MoneyWrongTypeError"
        assert event["level"] == "warning"
    finally:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()


def test_scan_failure_context():
    """Test the keyword context attached to a scan failure."""
    with capture_logs() as logs:
        try:
            Money(500).scan(b"\xff")
        except ValueError:
            pass
    
    assert logs == [
        {
            "event": "Money scan failed",
            "log_level": "warning",
            "error_type": "InvalidMoneyFormatError",
            "value": "b'\\xff'",
        }
    ]


def test_get_logger_binds_context():
    with capture_logs() as logs:
        logger = get_logger("pgmoney.test").bind(value="$1.00")
        logger.info("parsed", cents=100)
    
    assert logs == [{"event": "parsed", "log_level": "info", "value": "$1.00", "cents": 100}]
