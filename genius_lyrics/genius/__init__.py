"""
Genius integration for genius-lyrics-search.

    - client: Authenticated search against the Genius API
    - scraper: Lyrics extraction from public song pages
    - models: Decoded search hits and the flattened LyricsResult
"""

from genius_lyrics.genius.client import GeniusClient
from genius_lyrics.genius.models import (
    ArtistSummary,
    LyricsResult,
    LyricsStats,
    PrimaryArtist,
    SearchHit,
    SongResult,
    SongStats,
)
from genius_lyrics.genius.scraper import LyricsScraper, extract_lyrics

__all__ = [
    "GeniusClient",
    "LyricsScraper",
    "extract_lyrics",
    "SearchHit",
    "SongResult",
    "SongStats",
    "ArtistSummary",
    "LyricsResult",
    "LyricsStats",
    "PrimaryArtist",
]
