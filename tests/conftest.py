"""Test configuration and fixtures"""

import copy
import json
import tempfile
from pathlib import Path

import pytest

from genius_lyrics.core.config import ClientConfig


SEARCH_URL = "https://api.genius.com/search"
SONG_URL = "https://genius.com/Test-artist-song-a-lyrics"
OTHER_SONG_URL = "https://genius.com/Test-artist-song-b-lyrics"


class FakeResponse:
    """Stands in for aiohttp.ClientResponse"""

    def __init__(self, status=200, body=""):
        self.status = status
        self._body = body

    async def text(self, encoding=None, errors="strict"):
        # Raw bytes are decoded like a body declared as charset=utf-8
        if isinstance(self._body, bytes):
            return self._body.decode(encoding or "utf-8", errors)
        return self._body


class _FakeRequest:
    """Async context manager returned by FakeSession.get()"""

    def __init__(self, outcome):
        self._outcome = outcome

    async def __aenter__(self):
        if isinstance(self._outcome, BaseException):
            raise self._outcome
        return self._outcome

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """
    In-memory replacement for aiohttp.ClientSession.

    Routes map a URL to a FakeResponse or to an exception raised when
    the request is entered. Every request is recorded in `calls`.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if url not in self.routes:
            raise AssertionError(f"Unexpected request to {url}")
        return _FakeRequest(self.routes[url])

    @property
    def urls(self):
        return [call["url"] for call in self.calls]

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True
        return False


def make_hit(title="Song A", url=SONG_URL, song_id=101, iq=42):
    """Build a raw search hit shaped like the Genius API"""
    return copy.deepcopy({
        "highlights": [],
        "index": "song",
        "type": "song",
        "result": {
            "annotation_count": 7,
            "api_path": f"/songs/{song_id}",
            "full_title": f"{title} by Test Artist",
            "header_image_thumbnail_url": "https://images.genius.com/header-thumb.jpg",
            "header_image_url": "https://images.genius.com/header.jpg",
            "id": song_id,
            "lyrics_owner_id": 555,
            "path": "/Test-artist-song-a-lyrics",
            "pyongs_count": 3,
            "song_art_image_thumbnail_url": "https://images.genius.com/art-thumb.jpg",
            "song_art_image_url": "https://images.genius.com/art.jpg",
            "stats": {
                "unreviewed_annotations": 2,
                "hot": False,
                "pageviews": 123456,
            },
            "title": title,
            "title_with_featured": f"{title} (Ft. Guest)",
            "url": url,
            "primary_artist": {
                "api_path": "/artists/9",
                "header_image_url": "https://images.genius.com/artist-header.jpg",
                "id": 9,
                "image_url": "https://images.genius.com/artist.jpg",
                "is_meme_verified": False,
                "is_verified": True,
                "name": "Test Artist",
                "url": "https://genius.com/artists/Test-artist",
                "iq": iq,
            },
        },
    })


def search_body(*hits):
    """Serialize hits into a Genius search response body"""
    return json.dumps({"meta": {"status": 200}, "response": {"hits": list(hits)}})


def lyrics_page(text="  Hello World  "):
    return (
        "<html><head><title>Song A Lyrics</title></head><body>"
        f'<div class="song_body"><div class="lyrics">{text}</div></div>'
        "</body></html>"
    )


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def config():
    """Default client settings"""
    return ClientConfig()


@pytest.fixture
def sample_hit():
    """Raw search hit for 'Song A'"""
    return make_hit()


@pytest.fixture
def fake_session(sample_hit):
    """Session answering one search with one hit and serving its lyrics page"""
    return FakeSession({
        SEARCH_URL: FakeResponse(200, search_body(sample_hit)),
        SONG_URL: FakeResponse(200, lyrics_page()),
    })
