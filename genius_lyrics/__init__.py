"""
genius-lyrics-search: Song lyrics and metadata from Genius.

A thin asynchronous client for bots and apps that need "title in,
lyrics + metadata out". It searches the Genius API, takes the top hit,
fetches that song's public page and extracts the lyrics block.

Modules:
    core/       - Configuration, logging, exceptions
    genius/     - Genius API search, page scraping, data models
    searcher.py - LyricsSearcher, the public entry point

Usage:
    import asyncio
    from genius_lyrics import LyricsSearcher

    async def main():
        searcher = LyricsSearcher("my_access_token")
        result = await searcher.search("bohemian rhapsody")
        print(f"{result.title} by {result.primary_artist.name}")
        print(result.lyrics)

    asyncio.run(main())

    With a config file (genius.yaml) and logging:
        from genius_lyrics import load_config, setup_logging

        settings = load_config()
        setup_logging(Path("./logs"))
        searcher = LyricsSearcher(settings.access_token, settings.client)

Dependencies:
    - aiohttp: Asynchronous HTTP client
    - beautifulsoup4: HTML parsing of song pages
    - pyyaml: Configuration file parsing
    - python-dotenv: .env support for the access token
    - colorama: Console log colors
"""

__version__ = "0.1.0"
__author__ = "genius-lyrics-search"
__license__ = "MIT"

# Convenience imports for common usage
from genius_lyrics.core import (
    ClientConfig,
    ConfigurationError,
    ExtractionError,
    GeniusLyricsError,
    InputError,
    NotFoundError,
    ProtocolError,
    Settings,
    TransportError,
    get_logger,
    load_config,
    setup_logging,
    shutdown_logging,
)
from genius_lyrics.genius import GeniusClient, LyricsResult, LyricsScraper, SearchHit
from genius_lyrics.searcher import LyricsSearcher, search_lyrics

__all__ = [
    # Version
    "__version__",
    # Entry points
    "LyricsSearcher",
    "search_lyrics",
    # Core
    "ClientConfig",
    "Settings",
    "load_config",
    "setup_logging",
    "shutdown_logging",
    "get_logger",
    # Exceptions
    "GeniusLyricsError",
    "ConfigurationError",
    "InputError",
    "TransportError",
    "ProtocolError",
    "NotFoundError",
    "ExtractionError",
    # Genius
    "GeniusClient",
    "LyricsScraper",
    "SearchHit",
    "LyricsResult",
]
