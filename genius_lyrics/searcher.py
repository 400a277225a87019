"""
Lyrics search: title in, lyrics + metadata out.

LyricsSearcher composes the two network steps:

    1. Search Genius for the text (authenticated)
    2. If there are no hits: NotFoundError
    3. Scrape the song page of hit 0 (Genius' top-ranked result)
    4. Return a LyricsResult with the scraped text and the song's metadata

The scrape never starts before the search has completed, since its URL
comes from the search result. Nothing is retried: the first failure
aborts the call and propagates to the caller.

Usage:
    from genius_lyrics import LyricsSearcher

    searcher = LyricsSearcher("my_access_token")
    result = await searcher.search("bohemian rhapsody")
    print(result.full_title)
    print(result.lyrics)

    # Or pick a hit yourself
    hits = await searcher.search_hits("yesterday")
    result = await searcher.lyrics_for(hits[2])
"""

import aiohttp

from genius_lyrics.core.config import ClientConfig
from genius_lyrics.core.exceptions import ExtractionError, InputError, NotFoundError
from genius_lyrics.core.logger import get_logger, log_lyrics_failure
from genius_lyrics.genius.client import GeniusClient
from genius_lyrics.genius.models import LyricsResult, SearchHit
from genius_lyrics.genius.scraper import LyricsScraper

logger = get_logger(__name__)


class LyricsSearcher:
    """
    Finds lyrics and metadata for free text via Genius.

    Calls share only the immutable token and settings, so several
    search() calls may run concurrently on one instance.

    Attributes:
        client: The authenticated GeniusClient (search step).
        scraper: The LyricsScraper (scrape step).

    Example:
        async with aiohttp.ClientSession() as session:
            searcher = LyricsSearcher(token, session=session)
            results = await asyncio.gather(
                searcher.search("hey jude"),
                searcher.search("let it be"),
            )
    """

    def __init__(
        self,
        token: str,
        config: ClientConfig | None = None,
        session: aiohttp.ClientSession | None = None
    ) -> None:
        """
        Initialize the searcher. No network I/O happens here.

        Args:
            token: Genius API access token.
            config: Network and extraction settings; defaults to ClientConfig().
            session: Optional caller-owned aiohttp session, reused for every
                     request and never closed by the searcher.

        Raises:
            ConfigurationError: If token is missing or blank.
        """
        config = config or ClientConfig()
        self.client = GeniusClient(token, config, session=session)
        self.scraper = LyricsScraper(config, session=session)

    async def search(self, text: str) -> LyricsResult:
        """
        Get the lyrics of the top Genius hit for text.

        Args:
            text: Song title or some lyrics from it.

        Returns:
            LyricsResult for the first hit.

        Raises:
            InputError: If text is empty or whitespace-only (no request made).
            NotFoundError: If Genius returned no hits (no scrape made).
            TransportError: If either request fails.
            ProtocolError: If the search response is malformed.
            ExtractionError: If the song page has no lyrics container.
        """
        _check_text(text)

        hits = await self.client.search(text)
        if not hits:
            log_lyrics_failure(logger, text, "not found")
            raise NotFoundError(
                f"Nothing found on Genius for '{text}'",
                details={"query": text}
            )

        return await self._assemble(text, hits[0])

    async def search_hits(self, text: str) -> list[SearchHit]:
        """
        Return every hit for text, in Genius' order, without scraping.

        Lets callers disambiguate before choosing a hit for lyrics_for().

        Raises:
            InputError, TransportError, ProtocolError: As for search().
        """
        _check_text(text)
        return await self.client.search(text)

    async def lyrics_for(self, hit: SearchHit) -> LyricsResult:
        """
        Scrape the lyrics of a caller-chosen hit.

        Raises:
            TransportError: If the page request fails.
            ExtractionError: If the song page has no lyrics container.
        """
        return await self._assemble(hit.result.full_title, hit)

    async def _assemble(self, query: str, hit: SearchHit) -> LyricsResult:
        song = hit.result
        try:
            lyrics = await self.scraper.scrape(song.url)
        except ExtractionError as e:
            log_lyrics_failure(logger, query, e.message, url=song.url)
            raise

        logger.info(f"Lyrics found: {song.full_title}")
        return LyricsResult.from_song(lyrics, song)


async def search_lyrics(
    token: str,
    text: str,
    config: ClientConfig | None = None
) -> LyricsResult:
    """
    Convenience function to search without keeping a LyricsSearcher around.

    Example:
        result = await search_lyrics(token, "bohemian rhapsody")
        print(result.lyrics)
    """
    searcher = LyricsSearcher(token, config)
    return await searcher.search(text)


def _check_text(text: str) -> None:
    if not isinstance(text, str) or not text.strip():
        raise InputError(
            "Please provide a song title or some lyrics to search",
            details={"query": text}
        )
