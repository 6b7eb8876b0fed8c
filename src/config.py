"""Runtime settings for projdesk.

Settings come from CLI flags first, then environment variables, then defaults.
Nothing is persisted between runs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from constants import API_BASE_ENV, DEFAULT_API_BASE, DEFAULT_TIMEOUT, TIMEOUT_ENV


class ConfigError(Exception):
    """Raised when a setting has an unusable value."""


@dataclass(frozen=True)
class Settings:
    """Connection settings for the project API."""

    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT


def normalize_base_url(value: str) -> str:
    """Strip whitespace and trailing slashes from a base URL."""
    url = value.strip().rstrip("/")
    if not url:
        raise ConfigError("API base URL is empty")
    if not url.startswith(("http://", "https://")):
        raise ConfigError(f"API base URL must start with http:// or https://: {url}")
    return url


def parse_timeout(value: str | float) -> float:
    """Parse a positive timeout in seconds."""
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout: {value!r}") from None
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive: {value!r}")
    return timeout


def load_settings(
    api_base: str | None = None,
    timeout: str | float | None = None,
    environ: dict[str, str] | None = None,
) -> Settings:
    """Resolve settings from explicit values, the environment and defaults.

    Args:
        api_base: Base URL from the command line, if given
        timeout: Request timeout from the command line, if given
        environ: Environment mapping (defaults to os.environ)

    Raises:
        ConfigError: If a value is present but invalid
    """
    env = os.environ if environ is None else environ

    base = api_base if api_base is not None else env.get(API_BASE_ENV, DEFAULT_API_BASE)
    raw_timeout = timeout if timeout is not None else env.get(TIMEOUT_ENV, DEFAULT_TIMEOUT)

    return Settings(api_base=normalize_base_url(base), timeout=parse_timeout(raw_timeout))
