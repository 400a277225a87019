"""
Exception classes for genius-lyrics-search.

Every failure a caller can observe is one of the classes below, so callers
can discriminate programmatically with a plain ``except`` clause.

Exception Hierarchy:
    GeniusLyricsError (base)
        ConfigurationError - Missing/blank access token, invalid config file
        InputError - Missing/blank query text
        TransportError - Network failure, timeout or non-success HTTP status
        ProtocolError - Search response body has an unexpected shape
        NotFoundError - Search succeeded but returned zero hits
        ExtractionError - Song page has no lyrics container
"""


class GeniusLyricsError(Exception):
    """
    Base exception for all genius-lyrics-search errors.

    Attributes:
        message: Human-readable error description.
        details: Dictionary with additional context (e.g., query, URL, status).

    Example:
        try:
            result = await searcher.search("Bohemian Rhapsody")
        except GeniusLyricsError as e:
            logger.error(f"Lyrics lookup failed: {e.message}")
            if e.details:
                logger.debug(f"Details: {e.details}")
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional context.
                     Common keys include:
                     - 'query': The search text involved in the error
                     - 'url': URL that caused the error
                     - 'original_error': The underlying exception, as a string
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class ConfigurationError(GeniusLyricsError):
    """
    Raised when the client cannot be configured.

    Common causes:
        - Access token missing, not a string, or blank
        - genius.yaml has invalid YAML syntax or invalid field values

    Example:
        raise ConfigurationError(
            "'client.timeout' must be a positive number",
            details={'field': 'client.timeout', 'value': -1}
        )
    """
    pass


class InputError(GeniusLyricsError):
    """
    Raised when the caller supplies an empty or whitespace-only query.

    Always raised before any network request is made.
    """
    pass


class TransportError(GeniusLyricsError):
    """
    Raised when an outbound request does not complete successfully.

    Covers connection failures, timeouts and HTTP statuses >= 400 on
    both the search request and the song page request.

    Attributes:
        status: HTTP status code if a response was received, else None.

    Example:
        raise TransportError(
            "Search request failed with HTTP 401",
            details={'url': 'https://api.genius.com/search', 'status': 401},
            status=401
        )
    """

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        status: int | None = None
    ) -> None:
        super().__init__(message, details)
        self.status = status


class ProtocolError(GeniusLyricsError):
    """
    Raised when the search response cannot be decoded into hits.

    Common causes:
        - Body is not valid JSON
        - 'response.hits' is missing or not a list
        - A hit lacks a required field (id, title, url, primary_artist, ...)
    """
    pass


class NotFoundError(GeniusLyricsError):
    """
    Raised when the search request succeeds but returns no hits.

    No song page request is made in this case.
    """
    pass


class ExtractionError(GeniusLyricsError):
    """
    Raised when a song page was fetched but holds no lyrics container.

    This is the documented outcome of a scrape miss: the scrape step never
    returns None. A container that exists but is empty yields "" instead.

    Example:
        raise ExtractionError(
            "No element matching '.lyrics' on song page",
            details={'url': 'https://genius.com/...', 'selector': '.lyrics'}
        )
    """
    pass
