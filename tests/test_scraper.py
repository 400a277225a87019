"""Test lyrics extraction and the scrape step"""

import aiohttp
import pytest

from conftest import SONG_URL, FakeResponse, FakeSession, lyrics_page
from genius_lyrics.core.config import ClientConfig
from genius_lyrics.core.exceptions import ExtractionError, TransportError
from genius_lyrics.genius.scraper import LyricsScraper, extract_lyrics


class TestExtractLyrics:
    """Test markup extraction"""

    def test_trims_container_text(self):
        """Test leading and trailing whitespace is removed"""
        assert extract_lyrics('<div class="lyrics">  Hello World  </div>', ".lyrics") == "Hello World"

    def test_keeps_inner_line_breaks(self):
        """Test text of nested markup keeps its line structure"""
        markup = (
            '<div class="lyrics">\n  <p>[Verse 1]\nIs this the real life?\n'
            '<a href="/annotation">Is this just fantasy?</a></p>\n</div>'
        )

        assert extract_lyrics(markup, ".lyrics") == (
            "[Verse 1]\nIs this the real life?\nIs this just fantasy?"
        )

    def test_first_matching_element_only(self):
        """Test only the first container in document order is used"""
        markup = '<div class="lyrics">first</div><div class="lyrics">second</div>'

        assert extract_lyrics(markup, ".lyrics") == "first"

    def test_no_container(self):
        """Test a page without the container yields None"""
        assert extract_lyrics("<html><body><p>Hello</p></body></html>", ".lyrics") is None

    def test_empty_container(self):
        """Test an empty container yields an empty string"""
        assert extract_lyrics('<div class="lyrics">   </div>', ".lyrics") == ""

    def test_custom_selector(self):
        """Test another selector can target newer page layouts"""
        markup = '<div data-lyrics-container="true">New layout</div>'

        assert extract_lyrics(markup, "[data-lyrics-container]") == "New layout"


class TestLyricsScraper:
    """Test the scrape step"""

    @pytest.mark.asyncio
    async def test_scrape(self):
        """Test the page is fetched once and its lyrics returned"""
        session = FakeSession({SONG_URL: FakeResponse(200, lyrics_page("  Hello World  "))})

        lyrics = await LyricsScraper(session=session).scrape(SONG_URL)

        assert lyrics == "Hello World"
        assert session.urls == [SONG_URL]
        assert "Authorization" not in session.calls[0]["headers"]

    @pytest.mark.asyncio
    async def test_undecodable_bytes_are_replaced(self):
        """Test invalid bytes in a page do not abort extraction"""
        page = b'<div class="lyrics">caf\xe9 \xff\xfe</div>'
        session = FakeSession({SONG_URL: FakeResponse(200, page)})

        lyrics = await LyricsScraper(session=session).scrape(SONG_URL)

        assert lyrics.startswith("caf")
        assert "�" in lyrics

    @pytest.mark.asyncio
    async def test_missing_container_raises(self):
        """Test a page without the container raises ExtractionError"""
        session = FakeSession({SONG_URL: FakeResponse(200, "<html><body>Moved</body></html>")})

        with pytest.raises(ExtractionError) as exc_info:
            await LyricsScraper(session=session).scrape(SONG_URL)
        assert exc_info.value.details == {"url": SONG_URL, "selector": ".lyrics"}

    @pytest.mark.asyncio
    async def test_configured_selector(self):
        """Test the selector comes from the client config"""
        page = '<div id="lyrics-root">Custom</div>'
        session = FakeSession({SONG_URL: FakeResponse(200, page)})
        config = ClientConfig(lyrics_selector="#lyrics-root")

        assert await LyricsScraper(config, session=session).scrape(SONG_URL) == "Custom"

    @pytest.mark.asyncio
    async def test_http_error(self):
        """Test non-success page status becomes TransportError"""
        session = FakeSession({SONG_URL: FakeResponse(404, "Not Found")})

        with pytest.raises(TransportError) as exc_info:
            await LyricsScraper(session=session).scrape(SONG_URL)
        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Test network failures become TransportError"""
        session = FakeSession({SONG_URL: aiohttp.ServerDisconnectedError()})

        with pytest.raises(TransportError):
            await LyricsScraper(session=session).scrape(SONG_URL)
