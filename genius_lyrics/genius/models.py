"""
Data models for Genius entities.

Immutable dataclasses decoded from the Genius search API and the flat
result handed back to callers.

Design Decisions:
    - All dataclasses are frozen so a result is a plain snapshot
    - SearchHit / SongResult / ArtistSummary keep the API field names
    - LyricsResult uses short caller-facing names and is the only type
      carrying lyrics text
    - Values are copied verbatim; only the lyrics are derived

Usage:
    from genius_lyrics.genius.models import SearchHit, LyricsResult

    hits = [SearchHit.from_api(raw) for raw in payload["response"]["hits"]]
    result = LyricsResult.from_song("...lyrics...", hits[0].result)
"""

from dataclasses import asdict, dataclass, field
from typing import Any

from genius_lyrics.core.exceptions import ProtocolError


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    """Return data[key], raising ProtocolError when absent or null."""
    value = data.get(key)
    if value is None:
        raise ProtocolError(
            f"Missing required field '{where}.{key}' in search response",
            details={"field": f"{where}.{key}"}
        )
    return value


def _mapping(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ProtocolError(
            f"Expected an object at '{where}' in search response",
            details={"field": where, "type": type(value).__name__}
        )
    return value


@dataclass(frozen=True)
class ArtistSummary:
    """
    The primary artist of a song as embedded in a search hit.

    Attributes:
        id: Genius artist ID.
        name: Artist name. Example: "Queen"
        url: Artist profile page on Genius.
        header_image_url: Header image of the artist profile.
        image_url: Profile image of the artist.
        is_meme_verified: Meme-verified flag.
        is_verified: Whether the artist is verified on Genius.
        iq: The artist's Genius IQ, None when the API omits it.
    """

    id: int
    name: str
    url: str | None = None
    header_image_url: str | None = None
    image_url: str | None = None
    is_meme_verified: bool | None = None
    is_verified: bool | None = None
    iq: int | None = None

    @classmethod
    def from_api(cls, data: Any) -> "ArtistSummary":
        """
        Create an ArtistSummary from a 'primary_artist' object.

        Raises:
            ProtocolError: If data is not an object or lacks id/name.
        """
        data = _mapping(data, "primary_artist")
        return cls(
            id=_require(data, "id", "primary_artist"),
            name=_require(data, "name", "primary_artist"),
            url=data.get("url"),
            header_image_url=data.get("header_image_url"),
            image_url=data.get("image_url"),
            is_meme_verified=data.get("is_meme_verified"),
            is_verified=data.get("is_verified"),
            iq=data.get("iq"),
        )


@dataclass(frozen=True)
class SongStats:
    """Engagement statistics of a song."""

    unreviewed_annotations: int | None = None
    hot: bool | None = None
    pageviews: int | None = None

    @classmethod
    def from_api(cls, data: Any) -> "SongStats":
        # 'stats' may be absent entirely on sparse entries
        if data is None:
            return cls()
        data = _mapping(data, "result.stats")
        return cls(
            unreviewed_annotations=data.get("unreviewed_annotations"),
            hot=data.get("hot"),
            pageviews=data.get("pageviews"),
        )


@dataclass(frozen=True)
class SongResult:
    """
    Canonical metadata of one song as known to Genius.

    Attributes:
        id: Genius song ID. Example: 1063
        title: Song title. Example: "Bohemian Rhapsody"
        full_title: Title with artist. Example: "Bohemian Rhapsody by Queen"
        url: Song page URL, the page the lyrics are scraped from.
        primary_artist: Embedded ArtistSummary.
        title_with_featured: Title including featured artists.
        annotation_count: Number of annotations on this song.
        lyrics_owner_id: ID of the lyrics owner.
        pyongs_count: Number of "pyongs" (user shares) received.
        header_image_url: Header image of the song page.
        header_image_thumbnail_url: Thumbnail of the header image.
        song_art_image_url: Song art.
        song_art_image_thumbnail_url: Thumbnail of the song art.
        stats: Engagement statistics.
    """

    id: int
    title: str
    full_title: str
    url: str
    primary_artist: ArtistSummary
    title_with_featured: str | None = None
    annotation_count: int | None = None
    lyrics_owner_id: int | None = None
    pyongs_count: int | None = None
    header_image_url: str | None = None
    header_image_thumbnail_url: str | None = None
    song_art_image_url: str | None = None
    song_art_image_thumbnail_url: str | None = None
    stats: SongStats = field(default_factory=SongStats)

    @classmethod
    def from_api(cls, data: Any) -> "SongResult":
        """
        Create a SongResult from a hit's 'result' object.

        Raises:
            ProtocolError: If a required field is missing or has the
                           wrong container type.
        """
        data = _mapping(data, "result")
        return cls(
            id=_require(data, "id", "result"),
            title=_require(data, "title", "result"),
            full_title=_require(data, "full_title", "result"),
            url=_require(data, "url", "result"),
            primary_artist=ArtistSummary.from_api(_require(data, "primary_artist", "result")),
            title_with_featured=data.get("title_with_featured"),
            annotation_count=data.get("annotation_count"),
            lyrics_owner_id=data.get("lyrics_owner_id"),
            pyongs_count=data.get("pyongs_count"),
            header_image_url=data.get("header_image_url"),
            header_image_thumbnail_url=data.get("header_image_thumbnail_url"),
            song_art_image_url=data.get("song_art_image_url"),
            song_art_image_thumbnail_url=data.get("song_art_image_thumbnail_url"),
            stats=SongStats.from_api(data.get("stats")),
        )


@dataclass(frozen=True)
class SearchHit:
    """
    One ranked candidate returned by the search endpoint.

    Attributes:
        result: The song this hit points to.
        type: Hit type as reported by Genius, normally "song".
        index: Search index the hit came from, normally "song".
        highlights: Ranking highlights, kept verbatim and otherwise unused.
    """

    result: SongResult
    type: str | None = None
    index: str | None = None
    highlights: tuple[Any, ...] = ()

    @classmethod
    def from_api(cls, data: Any) -> "SearchHit":
        data = _mapping(data, "hit")
        highlights = data.get("highlights")
        if highlights is None:
            highlights = []
        if not isinstance(highlights, list):
            raise ProtocolError(
                "Expected a list at 'hit.highlights' in search response",
                details={"field": "hit.highlights", "type": type(highlights).__name__}
            )
        return cls(
            result=SongResult.from_api(_require(data, "result", "hit")),
            type=data.get("type"),
            index=data.get("index"),
            highlights=tuple(highlights),
        )


@dataclass(frozen=True)
class PrimaryArtist:
    """Caller-facing copy of the song's primary artist."""

    id: int
    name: str
    url: str | None
    header: str | None
    image: str | None
    meme_verified: bool | None
    verified: bool | None
    iq: int | None


@dataclass(frozen=True)
class LyricsStats:
    """Caller-facing copy of the song's engagement statistics."""

    unreviewed_annotations: int | None
    hot: bool | None
    pageviews: int | None


@dataclass(frozen=True)
class LyricsResult:
    """
    Lyrics plus a flattened copy of the song metadata.

    Built once per successful search and owned by the caller afterwards.

    Attributes:
        lyrics: Scraped lyrics text, trimmed. "" if the container was empty.
        id: Genius song ID.
        title: Song title.
        full_title: Title with artist.
        title_with_featured: Title including featured artists.
        url: Song page URL the lyrics were scraped from.
        annotation_count: Number of annotations on this song.
        lyrics_owner_id: ID of the lyrics owner.
        pyongs: Number of "pyongs" received.
        header: Header image URL.
        header_thumbnail: Header image thumbnail URL.
        song_art_image: Song art URL.
        song_art_image_thumbnail: Song art thumbnail URL.
        stats: Engagement statistics.
        primary_artist: The song's primary artist.

    Example:
        result = await searcher.search("bohemian rhapsody")
        print(f"{result.title} by {result.primary_artist.name}")
        print(result.lyrics)
    """

    lyrics: str
    id: int
    title: str
    full_title: str
    title_with_featured: str | None
    url: str
    annotation_count: int | None
    lyrics_owner_id: int | None
    pyongs: int | None
    header: str | None
    header_thumbnail: str | None
    song_art_image: str | None
    song_art_image_thumbnail: str | None
    stats: LyricsStats
    primary_artist: PrimaryArtist

    @classmethod
    def from_song(cls, lyrics: str, song: SongResult) -> "LyricsResult":
        """Combine scraped lyrics with the fields of the selected song."""
        artist = song.primary_artist
        return cls(
            lyrics=lyrics,
            id=song.id,
            title=song.title,
            full_title=song.full_title,
            title_with_featured=song.title_with_featured,
            url=song.url,
            annotation_count=song.annotation_count,
            lyrics_owner_id=song.lyrics_owner_id,
            pyongs=song.pyongs_count,
            header=song.header_image_url,
            header_thumbnail=song.header_image_thumbnail_url,
            song_art_image=song.song_art_image_url,
            song_art_image_thumbnail=song.song_art_image_thumbnail_url,
            stats=LyricsStats(
                unreviewed_annotations=song.stats.unreviewed_annotations,
                hot=song.stats.hot,
                pageviews=song.stats.pageviews,
            ),
            primary_artist=PrimaryArtist(
                id=artist.id,
                name=artist.name,
                url=artist.url,
                header=artist.header_image_url,
                image=artist.image_url,
                meme_verified=artist.is_meme_verified,
                verified=artist.is_verified,
                iq=artist.iq,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain, JSON-serialisable dict (nested dicts for stats and artist)."""
        return asdict(self)
