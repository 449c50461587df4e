"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .http_client import HttpClientConfig
from .jiosaavn import JIOSAAVN_BASE_URL, JioSaavnConfig, get_jiosaavn_config
from .logging import configure_logging

__all__ = [
    "JIOSAAVN_BASE_URL",
    "ConfigurationError",
    "HttpClientConfig",
    "JioSaavnConfig",
    "configure_logging",
    "get_jiosaavn_config",
    "optional_env_var",
]
