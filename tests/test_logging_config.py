"""Tests for setup_logging."""

import logging

from tick_stopwatch import setup_logging


def test_setup_installs_single_console_handler():
    logger = setup_logging(logging.DEBUG)
    try:
        assert logger.name == "tick_stopwatch"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        setup_logging(logging.INFO)
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()


def test_setup_with_log_file(tmp_path):
    path = tmp_path / "stopwatch.log"
    logger = setup_logging(logging.INFO, log_file=str(path))
    try:
        assert len(logger.handlers) == 2
        logging.getLogger("tick_stopwatch.registry").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in path.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_registry_logs_ignored_commands(caplog):
    from tick_stopwatch import StopwatchConfig, TimerRegistry

    class _NullTicker:
        def cancel(self) -> None:
            pass

    registry = TimerRegistry(
        StopwatchConfig(capacity=1), ticker_factory=lambda clock: _NullTicker()
    )
    with caplog.at_level(logging.DEBUG, logger="tick_stopwatch"):
        registry.add_timer()
    assert "Ignored add_timer: capacity" in caplog.text
