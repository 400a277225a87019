"""
Lyrics scraping from Genius song pages.

The Genius API does not serve lyrics, so they are read from the song's
public page: the first element matching the lyrics-container selector
(".lyrics" by default) holds the rendered text.

FRAGILE WARNING:
    Scraping depends on the page markup. If Genius changes it, the
    container is not found and ExtractionError is raised; the selector
    can be changed through ClientConfig.lyrics_selector.

Miss policy:
    - No element matches the selector -> ExtractionError
    - An element matches but holds no text -> ""
    The scrape step never returns None.
"""

import aiohttp
from bs4 import BeautifulSoup

from genius_lyrics.core.config import ClientConfig
from genius_lyrics.core.exceptions import ExtractionError
from genius_lyrics.core.logger import get_logger
from genius_lyrics.genius.http import fetch_text

logger = get_logger(__name__)


def extract_lyrics(markup: str, selector: str) -> str | None:
    """
    Return the trimmed text of the first element matching selector.

    Args:
        markup: HTML document.
        selector: CSS selector of the lyrics container.

    Returns:
        The element's text with leading/trailing whitespace removed,
        or None if no element matches. Callers must handle None
        themselves; only LyricsScraper.scrape turns it into
        ExtractionError.

    Example:
        >>> extract_lyrics('<div class="lyrics">  Hello World  </div>', ".lyrics")
        'Hello World'
    """
    soup = BeautifulSoup(markup, "html.parser")
    container = soup.select_one(selector)
    if container is None:
        return None
    return container.get_text().strip()


class LyricsScraper:
    """
    Fetches a song page and extracts its lyrics block.

    Holds no per-call state; one instance is safe to share between
    concurrent searches.

    Example:
        scraper = LyricsScraper()
        lyrics = await scraper.scrape("https://genius.com/Queen-bohemian-rhapsody-lyrics")
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: aiohttp.ClientSession | None = None
    ) -> None:
        self.config = config or ClientConfig()
        self._session = session

    async def scrape(self, url: str) -> str:
        """
        Fetch url and return its lyrics text.

        Args:
            url: Absolute song page URL, taken from a search hit.

        Returns:
            Trimmed lyrics text, possibly "".

        Raises:
            TransportError: On network failure, timeout or HTTP status >= 400.
            ExtractionError: If the page has no element matching the
                             configured lyrics selector.
        """
        # Stray bytes in a page must not hide the lyrics around them
        markup = await fetch_text(url, self.config, session=self._session, decode_errors="replace")

        lyrics = extract_lyrics(markup, self.config.lyrics_selector)
        if lyrics is None:
            raise ExtractionError(
                f"No element matching '{self.config.lyrics_selector}' on song page: {url}",
                details={"url": url, "selector": self.config.lyrics_selector}
            )

        logger.debug(f"Extracted {len(lyrics)} characters of lyrics from {url}")
        return lyrics
