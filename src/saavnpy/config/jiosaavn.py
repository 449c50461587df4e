"""JioSaavn configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var
from .errors import ConfigurationError
from .http_client import HttpClientConfig

JIOSAAVN_BASE_URL = "https://www.jiosaavn.com/api.php"
JIOSAAVN_TIMEOUT_SECONDS = 10.0
DEFAULT_COUNTRY_CODE = "in"
DEFAULT_ARTIST_SONG_COUNT = 50


def _default_http_config() -> HttpClientConfig:
    return HttpClientConfig(
        name="jiosaavn",
        base_url=JIOSAAVN_BASE_URL,
        timeout_seconds=JIOSAAVN_TIMEOUT_SECONDS,
    )


@dataclass(frozen=True, slots=True)
class JioSaavnConfig:
    """Holds JioSaavn API configuration values."""

    http: HttpClientConfig = field(default_factory=_default_http_config)
    country_code: str = DEFAULT_COUNTRY_CODE
    artist_song_count: int = DEFAULT_ARTIST_SONG_COUNT

    @property
    def base_url(self) -> str:
        return self.http.base_url or JIOSAAVN_BASE_URL


def _parse_timeout(raw: str | None) -> float:
    if raw is None:
        return JIOSAAVN_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid JIOSAAVN_TIMEOUT_SECONDS: {raw!r}") from exc
    if timeout <= 0:
        raise ConfigurationError(f"JIOSAAVN_TIMEOUT_SECONDS must be positive, got {raw!r}")
    return timeout


def get_jiosaavn_config(*, http: HttpClientConfig | None = None) -> JioSaavnConfig:
    """Build the JioSaavn configuration from optional environment overrides."""

    user_agent = optional_env_var("JIOSAAVN_USER_AGENT")
    return JioSaavnConfig(
        http=http
        or HttpClientConfig(
            name="jiosaavn",
            base_url=optional_env_var("JIOSAAVN_BASE_URL", JIOSAAVN_BASE_URL),
            timeout_seconds=_parse_timeout(optional_env_var("JIOSAAVN_TIMEOUT_SECONDS")),
            default_headers={"User-Agent": user_agent} if user_agent else None,
        ),
        country_code=optional_env_var("JIOSAAVN_COUNTRY_CODE", DEFAULT_COUNTRY_CODE)
        or DEFAULT_COUNTRY_CODE,
    )
