"""
Logging configuration for genius-lyrics-search.

Library modules only ever call get_logger(__name__); nothing is printed
unless the integrating application configures logging. Applications that
want the ready-made setup call setup_logging() once at startup:

    - Console: colored, compact messages (INFO and above by default)
    - log_full_<timestamp>.log: Complete log of all events (DEBUG and above)
    - log_errors_<timestamp>.log: Only ERROR and CRITICAL level messages
    - lyrics_failures_<timestamp>.log: Queries for which no lyrics were found

File logs are only written when a log directory is given.

Usage:
    from genius_lyrics.core.logger import setup_logging, get_logger

    setup_logging(Path("./logs"))  # Call once at startup
    logger = get_logger(__name__)

    logger.info("Lyrics found")

The access token is never passed to any logger.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

import colorama
from colorama import Fore, Style


# Log file name prefixes (created in the log directory)
LOG_FULL_PREFIX = "log_full"
LOG_ERRORS_PREFIX = "log_errors"
LYRICS_FAILURES_PREFIX = "lyrics_failures"

# Log format for file output (detailed with timestamp)
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Logger name shared by every module of the package
PACKAGE_LOGGER = "genius_lyrics"


class ColoredConsoleFormatter(logging.Formatter):
    """
    Formatter that colors the level name for console output.

    Colors:
        - DEBUG: Cyan
        - INFO: Green
        - WARNING: Yellow
        - ERROR: Red
        - CRITICAL: Bright Red
    """

    LEVEL_COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Style.BRIGHT + Fore.RED,
    }

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format as 'LEVEL: message', coloring LEVEL when enabled."""
        levelname = record.levelname
        if self.use_colors:
            color = self.LEVEL_COLORS.get(record.levelno, Fore.WHITE)
            levelname = f"{color}{levelname}{Style.RESET_ALL}"

        message = f"{levelname}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


class LyricsFailureHandler(logging.Handler):
    """
    Handler that collects lyrics misses into a human-readable report.

    Only records carrying a 'lyrics_failed_query' extra field are written,
    in this format:

        Song Title
        not found

        Another Query
        https://genius.com/Artist-another-song-lyrics
        no element matching '.lyrics'

    Records are produced by log_lyrics_failure().

    Attributes:
        report_path: Path to the lyrics_failures log file.
        report_file: Open file handle (None until open() is called).
    """

    def __init__(self, report_path: Path) -> None:
        super().__init__()
        self.report_path = report_path
        self.report_file: TextIO | None = None

    def open(self) -> None:
        """Open the report file for writing (overwrites existing content)."""
        self.report_file = open(self.report_path, "w", encoding="utf-8")

    def emit(self, record: logging.LogRecord) -> None:
        if not hasattr(record, "lyrics_failed_query"):
            return

        if self.report_file is None:
            return

        try:
            query = getattr(record, "lyrics_failed_query")
            url = getattr(record, "lyrics_failed_url", None)
            reason = getattr(record, "lyrics_failed_reason", "")

            self.report_file.write(f"{query}\n")
            if url:
                self.report_file.write(f"{url}\n")
            self.report_file.write(f"{reason}\n\n")
            self.report_file.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """Close the report file handle. Safe to call multiple times."""
        if self.report_file is not None:
            try:
                self.report_file.close()
            except OSError:
                pass
            self.report_file = None
        super().close()


class ErrorOnlyFilter(logging.Filter):
    """Filter that only allows ERROR and CRITICAL level records."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def setup_logging(
    log_dir: Path | None = None,
    level: str = "INFO",
    colored_output: bool = True,
    stream: TextIO | None = None
) -> None:
    """
    Configure logging for an application embedding the library.

    Args:
        log_dir: Directory for log files. None disables file logging.
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        colored_output: Color the level names on the console.
        stream: Console stream, defaults to sys.stderr.

    Behavior:
        1. Initialize colorama (ANSI support on Windows)
        2. Set the package logger to DEBUG and drop existing handlers
        3. Add the console handler at the requested level
        4. If log_dir is given, create it and add the full log, error log
           and lyrics failures handlers, all named with one run timestamp

    Raises:
        ValueError: If level is not a known level name.

    Thread Safety:
        Not thread-safe. Call once at startup, before starting the event loop.
    """
    console_level = logging.getLevelName(level.upper())
    if not isinstance(console_level, int):
        raise ValueError(f"Unknown log level: {level}")

    colorama.init()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)
    _remove_handlers(package_logger)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ColoredConsoleFormatter(use_colors=colored_output))
    package_logger.addHandler(console_handler)

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    file_formatter = logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT)

    full_handler = logging.FileHandler(
        log_dir / f"{LOG_FULL_PREFIX}_{timestamp}.log", mode="w", encoding="utf-8"
    )
    full_handler.setLevel(logging.DEBUG)
    full_handler.setFormatter(file_formatter)
    package_logger.addHandler(full_handler)

    error_handler = logging.FileHandler(
        log_dir / f"{LOG_ERRORS_PREFIX}_{timestamp}.log", mode="w", encoding="utf-8"
    )
    error_handler.setLevel(logging.DEBUG)  # Filter handles the level restriction
    error_handler.setFormatter(file_formatter)
    error_handler.addFilter(ErrorOnlyFilter())
    package_logger.addHandler(error_handler)

    lyrics_handler = LyricsFailureHandler(log_dir / f"{LYRICS_FAILURES_PREFIX}_{timestamp}.log")
    lyrics_handler.open()
    package_logger.addHandler(lyrics_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name, typically __name__ of the calling module.

    Returns:
        logging.Logger: A child of the 'genius_lyrics' logger when called
        from inside the package.
    """
    return logging.getLogger(name)


def log_lyrics_failure(
    logger: logging.Logger,
    query: str,
    reason: str,
    url: str | None = None
) -> None:
    """
    Log a query for which no lyrics could be produced.

    Logs a WARNING and attaches the extra fields LyricsFailureHandler
    writes to the lyrics failures report.

    Args:
        logger: The logger to use for the message.
        query: The search text given by the caller.
        reason: Short description of the miss ("not found", ...).
        url: Song page URL if the miss happened while scraping.

    Example:
        log_lyrics_failure(logger, "Instrumental Track", "not found")
    """
    logger.warning(
        f"No lyrics for '{query}': {reason}",
        extra={
            "lyrics_failed_query": query,
            "lyrics_failed_url": url,
            "lyrics_failed_reason": reason,
        }
    )


def shutdown_logging() -> None:
    """Flush, close and remove every handler installed by setup_logging()."""
    _remove_handlers(logging.getLogger(PACKAGE_LOGGER))


def _remove_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        try:
            handler.flush()
            handler.close()
        except (OSError, ValueError):
            pass
        logger.removeHandler(handler)
