"""Tests for structured switcher event logging."""
import logging
from unittest.mock import MagicMock

from switcher.shared.errors import ErrorCode
from switcher.shared.logging_ import log_switch_event, setup_logger


def test_routine_events_logged_at_debug():
    logger = MagicMock()
    log_switch_event(logger, "Ticker", "schedule", interval_ms=1500)

    logger.debug.assert_called_once_with("surface=Ticker | event=schedule | interval=1500ms")


def test_stop_logged_at_info_with_counters():
    logger = MagicMock()
    log_switch_event(logger, "Ticker", "stop", index=2, switch_count=7)

    logger.info.assert_called_once_with("surface=Ticker | event=stop | index=2 | switches=7")


def test_error_code_logged_at_error():
    logger = MagicMock()
    log_switch_event(logger, "<gone>", "advance", error_code=ErrorCode.SURFACE_GONE, message="released")

    logger.error.assert_called_once_with(
        "surface=<gone> | event=advance | error=SURFACE_GONE | msg=released"
    )


def test_setup_logger_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "switcher.log"
    logger = setup_logger("switcher.test", level=logging.DEBUG, log_file=log_file)

    logger.debug("hello")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "hello" in log_file.read_text(encoding="utf-8")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
