"""
Core module for genius-lyrics-search.

This module provides the foundational components used throughout the package:
    - exceptions: Closed set of error classes
    - config: Client settings and genius.yaml loading
    - logger: Logging setup and the lyrics failures report

Usage:
    from genius_lyrics.core import (
        ClientConfig, load_config,
        setup_logging, get_logger,
        GeniusLyricsError, TransportError, NotFoundError
    )
"""

from genius_lyrics.core.config import ClientConfig, Settings, load_config
from genius_lyrics.core.exceptions import (
    ConfigurationError,
    ExtractionError,
    GeniusLyricsError,
    InputError,
    NotFoundError,
    ProtocolError,
    TransportError,
)
from genius_lyrics.core.logger import (
    get_logger,
    log_lyrics_failure,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    # Config
    "ClientConfig",
    "Settings",
    "load_config",
    # Exceptions
    "GeniusLyricsError",
    "ConfigurationError",
    "InputError",
    "TransportError",
    "ProtocolError",
    "NotFoundError",
    "ExtractionError",
    # Logger
    "setup_logging",
    "get_logger",
    "log_lyrics_failure",
    "shutdown_logging",
]
