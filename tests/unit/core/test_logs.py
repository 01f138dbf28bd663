"""Unit tests for terminal logging setup."""

import logging

import pytest
from dirguard.core.logs import (
    PACKAGE_LOGGER,
    BelowLevelFilter,
    WatchEventHighlighter,
    get_log_level,
    setup_logging,
)
from dirguard.utils.formatting import console, err_console
from rich.logging import RichHandler


def _rich_handlers() -> list[RichHandler]:
    """Rich handlers currently attached to the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    return [h for h in logger.handlers if isinstance(h, RichHandler)]


def _record(level: int) -> logging.LogRecord:
    """Build a log record at the given level."""
    return logging.LogRecord("dirguard.test", level, __file__, 1, "message", None, None)


def _accepts(handler: logging.Handler, level: int) -> bool:
    """Check whether a handler would emit a record at ``level``."""
    return level >= handler.level and bool(handler.filter(_record(level)))


class TestGetLogLevel:
    """Tests for get_log_level."""

    @pytest.mark.parametrize(
        ("verbose", "quiet", "expected"),
        [
            (False, False, logging.INFO),
            (True, False, logging.DEBUG),
            (False, True, logging.WARNING),
            (True, True, logging.DEBUG),
        ],
    )
    def test_levels(self, verbose: bool, quiet: bool, expected: int) -> None:
        """Flags map to the expected level."""
        assert get_log_level(verbose=verbose, quiet=quiet) == expected


class TestBelowLevelFilter:
    """Tests for BelowLevelFilter."""

    def test_filters_at_and_above_level(self) -> None:
        """Only records below the threshold pass."""
        level_filter = BelowLevelFilter(logging.WARNING)

        assert level_filter.filter(_record(logging.INFO)) is True
        assert level_filter.filter(_record(logging.WARNING)) is False
        assert level_filter.filter(_record(logging.ERROR)) is False


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_attaches_stdout_and_stderr_handlers(self) -> None:
        """The package logger gets one handler per stream, at INFO."""
        logger = setup_logging()

        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.INFO
        assert [h.console for h in _rich_handlers()] == [console, err_console]

    def test_info_goes_to_stdout(self) -> None:
        """Informational records are emitted by the stdout handler only."""
        setup_logging()
        out_handler, err_handler = _rich_handlers()

        assert _accepts(out_handler, logging.INFO)
        assert not _accepts(err_handler, logging.INFO)

    def test_errors_go_to_stderr(self) -> None:
        """Warnings and errors are emitted by the stderr handler only."""
        setup_logging()
        out_handler, err_handler = _rich_handlers()

        for level in (logging.WARNING, logging.ERROR):
            assert _accepts(err_handler, level)
            assert not _accepts(out_handler, level)

    def test_repeated_setup_replaces_handlers(self) -> None:
        """Calling setup twice leaves a single pair of handlers."""
        setup_logging()
        setup_logging(verbose=True)

        assert len(_rich_handlers()) == 2
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_quiet_level(self) -> None:
        """Quiet mode only lets warnings through."""
        setup_logging(quiet=True)

        logger = logging.getLogger("dirguard.filesystem.remediator")
        assert not logger.isEnabledFor(logging.INFO)
        assert logger.isEnabledFor(logging.WARNING)

    def test_module_loggers_inherit(self) -> None:
        """Module loggers below the package use the configured level."""
        setup_logging(verbose=True)

        assert logging.getLogger("dirguard.core.monitor").isEnabledFor(logging.DEBUG)


class TestWatchEventHighlighter:
    """Tests for WatchEventHighlighter."""

    def test_highlights_detection(self) -> None:
        """Detection messages get the detected style."""
        text = WatchEventHighlighter()("Unauthorized entry detected at /watch/x")

        assert any(span.style == "event.detected" for span in text.spans)

    def test_highlights_removal(self) -> None:
        """Removal messages get the removed style."""
        text = WatchEventHighlighter()("Unauthorized entry removed: /watch/x")

        assert any(span.style == "event.removed" for span in text.spans)

    def test_other_messages_untouched(self) -> None:
        """Unrelated messages are not styled."""
        assert WatchEventHighlighter()("Monitoring 1 root(s)").spans == []
