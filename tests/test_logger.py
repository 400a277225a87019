"""Test logging setup and the lyrics failures report"""

import io
import logging

import pytest

from genius_lyrics.core.logger import (
    PACKAGE_LOGGER,
    ColoredConsoleFormatter,
    ErrorOnlyFilter,
    get_logger,
    log_lyrics_failure,
    setup_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    shutdown_logging()


def make_record(level, message="message"):
    return logging.LogRecord("genius_lyrics.test", level, __file__, 1, message, None, None)


class TestFormatting:
    """Test console formatting and filtering"""

    def test_plain_format(self):
        formatter = ColoredConsoleFormatter(use_colors=False)
        assert formatter.format(make_record(logging.WARNING, "careful")) == "WARNING: careful"

    def test_colored_format(self):
        formatter = ColoredConsoleFormatter()
        output = formatter.format(make_record(logging.ERROR, "boom"))

        assert output.startswith("\x1b[")
        assert "ERROR" in output
        assert output.endswith(": boom")

    def test_error_only_filter(self):
        error_filter = ErrorOnlyFilter()

        assert error_filter.filter(make_record(logging.ERROR))
        assert error_filter.filter(make_record(logging.CRITICAL))
        assert not error_filter.filter(make_record(logging.WARNING))


class TestSetupLogging:
    """Test setup_logging outputs"""

    def test_console_only(self, temp_dir):
        """Test no files are written without a log directory"""
        stream = io.StringIO()
        setup_logging(level="INFO", colored_output=False, stream=stream)

        logger = get_logger("genius_lyrics.test")
        logger.debug("hidden")
        logger.info("shown")

        assert stream.getvalue() == "INFO: shown\n"
        assert list(temp_dir.iterdir()) == []

    def test_log_files(self, temp_dir):
        """Test full, error and lyrics failure files are written"""
        log_dir = temp_dir / "logs"
        setup_logging(log_dir, stream=io.StringIO())

        logger = get_logger("genius_lyrics.test")
        logger.debug("debug line")
        logger.error("error line")
        log_lyrics_failure(logger, "Unknown Song", "not found")
        log_lyrics_failure(
            logger, "Moved Song", "no container", url="https://genius.com/moved-lyrics"
        )
        shutdown_logging()

        def read(prefix):
            (path,) = log_dir.glob(f"{prefix}_*.log")
            return path.read_text(encoding="utf-8")

        full = read("log_full")
        assert "debug line" in full
        assert "error line" in full

        errors = read("log_errors")
        assert "error line" in errors
        assert "debug line" not in errors

        assert read("lyrics_failures") == (
            "Unknown Song\nnot found\n\n"
            "Moved Song\nhttps://genius.com/moved-lyrics\nno container\n\n"
        )

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging(level="LOUD")

    def test_shutdown_removes_handlers(self):
        setup_logging(stream=io.StringIO())
        shutdown_logging()

        assert logging.getLogger(PACKAGE_LOGGER).handlers == []
