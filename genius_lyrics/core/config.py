"""
Configuration management for genius-lyrics-search.

The library itself only needs an access token; everything else has a
sensible default held in a frozen ClientConfig. Integrators that prefer
a file can describe both in genius.yaml and load them with load_config().

Example genius.yaml:
    genius:
      access_token: "your_genius_access_token"   # optional, see below

    client:
      api_url: "https://api.genius.com"
      timeout: 10
      lyrics_selector: ".lyrics"
      user_agent: "genius-lyrics-search/0.1"

If genius.access_token is absent, the GENIUS_ACCESS_TOKEN environment
variable is used (a .env file in the working directory is honoured).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from genius_lyrics.core.exceptions import ConfigurationError


# Default configuration file name (looked up in current working directory)
CONFIG_FILENAME = "genius.yaml"

# Environment variable consulted when the file carries no token
TOKEN_ENV_VAR = "GENIUS_ACCESS_TOKEN"

DEFAULT_API_URL = "https://api.genius.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LYRICS_SELECTOR = ".lyrics"
DEFAULT_USER_AGENT = "genius-lyrics-search/0.1 (+https://github.com/genius-lyrics-search)"


@dataclass(frozen=True)
class ClientConfig:
    """
    Network and extraction settings shared by the search and scrape steps.

    Attributes:
        api_url: Base URL of the Genius API. The search endpoint is
                 {api_url}/search. No trailing slash.
        timeout: Total time budget in seconds for each outbound request.
                 Expiry surfaces as TransportError.
        lyrics_selector: CSS selector of the lyrics container on a song page.
                         Only the first matching element is used.
        user_agent: User-Agent header sent with every request.
    """
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    lyrics_selector: str = DEFAULT_LYRICS_SELECTOR
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def search_url(self) -> str:
        """Full URL of the search endpoint."""
        return f"{self.api_url}/search"


@dataclass(frozen=True)
class Settings:
    """
    Everything needed to build a LyricsSearcher.

    Attributes:
        access_token: Pre-issued Genius API bearer token.
        client: Network and extraction settings.

    Example:
        settings = load_config()
        searcher = LyricsSearcher(settings.access_token, settings.client)
    """
    access_token: str
    client: ClientConfig = field(default_factory=ClientConfig)

    def __repr__(self) -> str:
        return f"Settings(access_token='***', client={self.client!r})"


def load_config(config_path: Path | None = None) -> Settings:
    """
    Load and validate settings from genius.yaml and the environment.

    Args:
        config_path: Optional explicit path to the config file.
                     If None, looks for genius.yaml in the current directory.

    Returns:
        Settings: A frozen dataclass with the token and client settings.

    Raises:
        ConfigurationError: If an explicit config_path does not exist, the
                            file cannot be read or parsed, a field has an
                            invalid value, or no access token can be found.

    Behavior:
        1. Locate config file (explicit path or CWD/genius.yaml)
        2. Read and parse YAML content (a missing default file is fine)
        3. Validate and extract the 'client' section with defaults
        4. Take the token from 'genius.access_token', falling back to
           GENIUS_ACCESS_TOKEN after loading .env
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME

    raw_config: dict[str, Any] = {}
    if config_path.exists():
        raw_config = _read_yaml(config_path)
    elif explicit:
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            details={"file_path": str(config_path)}
        )

    client_config = _parse_client_config(_section(raw_config, "client"))
    access_token = _resolve_access_token(_section(raw_config, "genius"))

    return Settings(access_token=access_token, client=client_config)


def _read_yaml(config_path: Path) -> dict[str, Any]:
    """Read config_path and return its top-level mapping."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    try:
        raw_config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax in configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    # An empty file parses to None
    if raw_config is None:
        return {}

    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            "Configuration file must contain a YAML dictionary",
            details={"file_path": str(config_path)}
        )

    return raw_config


def _section(raw_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return an optional top-level section, validating its type."""
    section = raw_config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Section '{name}' must be a dictionary",
            details={"section": name}
        )
    return section


def _parse_client_config(client_section: dict[str, Any]) -> ClientConfig:
    """
    Parse and validate the 'client' section.

    Missing fields take the ClientConfig defaults.

    Raises:
        ConfigurationError: If a string field is blank or timeout is not
                            a positive number.
    """
    values: dict[str, Any] = {}

    for key in ("api_url", "lyrics_selector", "user_agent"):
        raw = client_section.get(key)
        if raw is None:
            continue
        if not isinstance(raw, str) or not raw.strip():
            raise ConfigurationError(
                f"'client.{key}' must be a non-empty string",
                details={"field": f"client.{key}"}
            )
        values[key] = raw.strip()

    if "api_url" in values:
        values["api_url"] = values["api_url"].rstrip("/")

    raw_timeout = client_section.get("timeout")
    if raw_timeout is not None:
        # bool is an int subclass; reject it explicitly
        if isinstance(raw_timeout, bool) or not isinstance(raw_timeout, (int, float)) or raw_timeout <= 0:
            raise ConfigurationError(
                "'client.timeout' must be a positive number",
                details={"field": "client.timeout", "value": raw_timeout}
            )
        values["timeout"] = float(raw_timeout)

    return ClientConfig(**values)


def _resolve_access_token(genius_section: dict[str, Any]) -> str:
    """
    Find the access token in the file or the environment.

    Raises:
        ConfigurationError: If the file token is not a string, or no
                            non-blank token is available anywhere.
    """
    token = genius_section.get("access_token")
    if token is not None and not isinstance(token, str):
        raise ConfigurationError(
            "'genius.access_token' must be a string",
            details={"field": "genius.access_token"}
        )

    if token is None or not token.strip():
        load_dotenv(Path.cwd() / ".env")
        token = os.getenv(TOKEN_ENV_VAR, "")

    if not token.strip():
        raise ConfigurationError(
            f"No Genius access token: set 'genius.access_token' or {TOKEN_ENV_VAR}",
            details={"field": "genius.access_token", "env_var": TOKEN_ENV_VAR}
        )

    return token.strip()
