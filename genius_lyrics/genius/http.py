"""
Shared HTTP GET helper for the search and scrape steps.

Both steps need the same behavior: one GET, bounded by the configured
timeout, with every transport-level problem surfaced as TransportError.
Callers may pass their own aiohttp.ClientSession; it is used as-is and
never closed here. Without one, a session is opened for the request and
closed right after, so concurrent calls share no connection state.
"""

import asyncio
from typing import Any

import aiohttp

from genius_lyrics.core.config import ClientConfig
from genius_lyrics.core.exceptions import TransportError
from genius_lyrics.core.logger import get_logger

logger = get_logger(__name__)


async def fetch_text(
    url: str,
    config: ClientConfig,
    session: aiohttp.ClientSession | None = None,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    decode_errors: str = "strict"
) -> str:
    """
    GET url and return the response body as text.

    Args:
        url: Absolute URL to fetch.
        config: Supplies the timeout and User-Agent.
        session: Optional caller-owned session.
        params: Query string parameters (URL-encoded by aiohttp).
        headers: Extra request headers, merged over the User-Agent.
        decode_errors: Codec error handler used to decode the body
                       ("strict" or "replace").

    Returns:
        The decoded response body.

    Raises:
        TransportError: On connection failure, timeout or HTTP status >= 400.
                        details carries 'url' and, when known, 'status'.
        UnicodeDecodeError: With decode_errors="strict", if the body is not
                            valid in its declared charset.

    Note:
        asyncio.CancelledError is not caught and propagates to the caller.
    """
    request_headers = {"User-Agent": config.user_agent}
    if headers:
        request_headers.update(headers)
    timeout = aiohttp.ClientTimeout(total=config.timeout)

    logger.debug(f"GET {url} params={params}")

    try:
        if session is None:
            async with aiohttp.ClientSession() as own_session:
                return await _get(own_session, url, params, request_headers, timeout, decode_errors)
        return await _get(session, url, params, request_headers, timeout, decode_errors)
    except asyncio.TimeoutError as e:
        raise TransportError(
            f"Request timed out after {config.timeout:g}s: {url}",
            details={"url": url, "timeout": config.timeout}
        ) from e
    except aiohttp.ClientError as e:
        raise TransportError(
            f"Request failed: {url}: {e}",
            details={"url": url, "original_error": str(e)}
        ) from e


async def _get(
    session: aiohttp.ClientSession,
    url: str,
    params: dict[str, Any] | None,
    headers: dict[str, str],
    timeout: aiohttp.ClientTimeout,
    decode_errors: str
) -> str:
    async with session.get(url, params=params, headers=headers, timeout=timeout) as response:
        if response.status >= 400:
            raise TransportError(
                f"Request failed with HTTP {response.status}: {url}",
                details={"url": url, "status": response.status},
                status=response.status
            )
        return await response.text(errors=decode_errors)
