"""
Genius API client for genius-lyrics-search.

GeniusClient is the authenticated client context: it holds the bearer
token handed over at construction and attaches it to every search
request. It performs the search step only; song pages are public and
are fetched by LyricsScraper without the token.

Authentication:
    The caller supplies a pre-issued access token (from
    https://genius.com/api-clients). Acquiring or refreshing tokens is
    outside this library.

Usage:
    from genius_lyrics.genius.client import GeniusClient

    client = GeniusClient("my_access_token")
    hits = await client.search("bohemian rhapsody")
    for hit in hits:
        print(hit.result.full_title, hit.result.url)
"""

import json
from typing import Any

import aiohttp

from genius_lyrics.core.config import ClientConfig
from genius_lyrics.core.exceptions import ConfigurationError, InputError, ProtocolError
from genius_lyrics.core.logger import get_logger
from genius_lyrics.genius.http import fetch_text
from genius_lyrics.genius.models import SearchHit

logger = get_logger(__name__)


class GeniusClient:
    """
    Authenticated access to the Genius search endpoint.

    Construction validates the token and performs no network I/O. The
    token is never mutated, logged or persisted, so one instance can
    serve any number of concurrent searches.

    Attributes:
        config: Network settings (endpoint, timeout, User-Agent).

    Example:
        client = GeniusClient(token, ClientConfig(timeout=5))
        hits = await client.search("Don't Stop Me Now")
    """

    def __init__(
        self,
        token: str,
        config: ClientConfig | None = None,
        session: aiohttp.ClientSession | None = None
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Genius API access token. Must be a non-blank string.
            config: Network settings; defaults to ClientConfig().
            session: Optional caller-owned aiohttp session to reuse.

        Raises:
            ConfigurationError: If token is missing, not a string, or blank.
        """
        if not isinstance(token, str) or not token.strip():
            raise ConfigurationError(
                "A Genius API access token is required",
                details={"field": "token"}
            )

        self._token = token
        self._session = session
        self.config = config or ClientConfig()

    def __repr__(self) -> str:
        return f"GeniusClient(token='***', api_url='{self.config.api_url}')"

    async def search(self, query: str) -> list[SearchHit]:
        """
        Search Genius for songs matching free text.

        Args:
            query: Song title or a fragment of its lyrics.

        Returns:
            Hits in the order Genius ranked them. May be empty.

        Raises:
            InputError: If query is empty or whitespace-only (no request made).
            TransportError: On network failure, timeout or HTTP status >= 400.
            ProtocolError: If the body cannot be decoded, is not JSON, or is not shaped as
                           {"response": {"hits": [...]}} with valid hits.
        """
        if not isinstance(query, str) or not query.strip():
            raise InputError(
                "Please provide a song title or some lyrics to search",
                details={"query": query}
            )

        try:
            body = await fetch_text(
                self.config.search_url,
                self.config,
                session=self._session,
                params={"q": query},
                headers={"Authorization": f"Bearer {self._token}"},
            )
        except UnicodeDecodeError as e:
            raise ProtocolError(
                "Search response is not valid text in its declared charset",
                details={"url": self.config.search_url, "original_error": str(e)}
            ) from e

        hits = [SearchHit.from_api(raw_hit) for raw_hit in _extract_hits(body)]
        logger.debug(f"Genius search '{query}' returned {len(hits)} hit(s)")
        return hits


def _extract_hits(body: str) -> list[Any]:
    """
    Decode a search response body and return the raw hit list.

    Raises:
        ProtocolError: If the body is not JSON or response.hits is not a list.
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise ProtocolError(
            "Search response is not valid JSON",
            details={"original_error": str(e)}
        ) from e

    response = payload.get("response") if isinstance(payload, dict) else None
    hits = response.get("hits") if isinstance(response, dict) else None
    if not isinstance(hits, list):
        raise ProtocolError(
            "Search response has no 'response.hits' list",
            details={"top_level_keys": sorted(payload) if isinstance(payload, dict) else []}
        )
    return hits
