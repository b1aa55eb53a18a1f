"""
Search pipeline configuration.

Values come from environment variables (the entry point loads a `.env`
file first). Everything has a working default so no configuration is
required for an interactive run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from models.schema import MAX_LINKS
from .errors import ConfigError
from .sources import SourceConfig, select_sources


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/101.0.4951.54 Safari/537.36"
)
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.5"


@dataclass
class SearchConfig:
    """Search pipeline configuration."""

    request_timeout: float = 15.0  # per HTTP request, seconds
    pipeline_timeout: Optional[float] = 30.0  # per engine, None disables
    delay: float = 1.0  # cosmetic pause per engine, seconds
    max_links: int = MAX_LINKS
    engines: Optional[List[str]] = None  # None -> all engines
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE

    def __post_init__(self):
        if not 0 < self.max_links <= MAX_LINKS:
            raise ConfigError(f"max_links must be between 1 and {MAX_LINKS}")
        if self.request_timeout <= 0:
            raise ConfigError("request_timeout must be positive")
        if self.delay < 0:
            raise ConfigError("delay must not be negative")

    @property
    def headers(self) -> dict:
        return {
            "User-Agent": self.user_agent,
            "Accept-Language": self.accept_language,
        }

    def sources(self) -> List[SourceConfig]:
        """Engines to query, in declaration order."""
        return select_sources(self.engines)

    @classmethod
    def from_env(cls) -> SearchConfig:
        """Load configuration from environment variables."""
        engines_raw = os.getenv("SEARCH_ENGINES", "").strip()
        pipeline_timeout = _env_float("SEARCH_PIPELINE_TIMEOUT", 30.0)
        return cls(
            request_timeout=_env_float("SEARCH_TIMEOUT", 15.0),
            pipeline_timeout=pipeline_timeout if pipeline_timeout > 0 else None,
            delay=_env_float("SEARCH_DELAY", 1.0),
            max_links=_env_int("SEARCH_MAX_LINKS", MAX_LINKS),
            engines=[e.strip() for e in engines_raw.split(",")] if engines_raw else None,
            user_agent=os.getenv("SEARCH_USER_AGENT", DEFAULT_USER_AGENT),
            accept_language=os.getenv("SEARCH_ACCEPT_LANGUAGE", DEFAULT_ACCEPT_LANGUAGE),
        )


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
