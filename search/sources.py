"""
Search engine table — one declarative entry per engine.

Each entry knows its endpoint, the trailing query-string parameters it
appends after the encoded query, and the CSS selectors that locate result
cards and the destination anchor inside each card.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Protocol

from .errors import ConfigError


class TokenGenerator(Protocol):
    """Produces per-request random tokens (e.g. browser session ids)."""

    def next_token(self) -> str:
        ...


class SecureTokenGenerator:
    """Fresh 16-byte hex token on every call."""

    def __init__(self, nbytes: int = 16):
        self._nbytes = nbytes

    def next_token(self) -> str:
        return secrets.token_hex(self._nbytes)


@dataclass(frozen=True)
class SourceConfig:
    """Static description of one search engine."""

    identifier: str
    base_endpoint: str
    trailing_params: Callable[[str, TokenGenerator], str]
    card_selector: str
    anchor_selector: str


# ------------------------------------------------------------------
# Trailing parameters
# ------------------------------------------------------------------

def _google_params(query: str, tokens: TokenGenerator) -> str:
    return "&sourceid=opera&ie=UTF-8&oe=UTF-8"


def _bing_params(query: str, tokens: TokenGenerator) -> str:
    # cvid mimics a browser session id; must differ on every request
    return f"&sp=-1&pq=test&sc=6-4&qs=n&sk=&cvid={tokens.next_token()}"


def _duckduckgo_params(query: str, tokens: TokenGenerator) -> str:
    return "&t=h_&ia=web"


# ------------------------------------------------------------------
# Built-in engines (declaration order is report order)
# ------------------------------------------------------------------

GOOGLE = SourceConfig(
    identifier="Google",
    base_endpoint="https://www.google.com/search?client=opera-gx&q=",
    trailing_params=_google_params,
    card_selector="div.g",
    anchor_selector=".yuRUbf > a",
)

BING = SourceConfig(
    identifier="Bing",
    base_endpoint="https://www.bing.com/search?q=",
    trailing_params=_bing_params,
    card_selector="#b_results li.b_algo",
    anchor_selector="h2 a",
)

DUCKDUCKGO = SourceConfig(
    identifier="DuckDuckGo",
    base_endpoint="https://duckduckgo.com/?q=",
    trailing_params=_duckduckgo_params,
    card_selector=".result__body",
    anchor_selector=".result__title a",
)

DEFAULT_SOURCES: List[SourceConfig] = [GOOGLE, BING, DUCKDUCKGO]

SOURCES_BY_ID: Dict[str, SourceConfig] = {s.identifier: s for s in DEFAULT_SOURCES}


def build_source_table(sources: Iterable[SourceConfig]) -> Dict[str, SourceConfig]:
    """Index sources by identifier, rejecting duplicates."""
    table: Dict[str, SourceConfig] = {}
    for source in sources:
        if source.identifier in table:
            raise ConfigError(f"Duplicate search engine identifier: {source.identifier}")
        table[source.identifier] = source
    return table


def get_source(
    identifier: str,
    table: Optional[Dict[str, SourceConfig]] = None,
    ignore_case: bool = False,
) -> SourceConfig:
    """
    Look up an engine by identifier.

    Exact match unless ignore_case is set (used for user-typed engine
    names from the command line and SEARCH_ENGINES).
    """
    table = SOURCES_BY_ID if table is None else table
    if identifier in table:
        return table[identifier]
    if ignore_case:
        lowered = identifier.strip().lower()
        for key, source in table.items():
            if key.lower() == lowered:
                return source
    raise ConfigError(
        f"Unknown search engine '{identifier}'. Choose from: {list(table.keys())}"
    )


def select_sources(identifiers: Optional[Iterable[str]] = None) -> List[SourceConfig]:
    """Resolve a list of identifiers to configs, keeping declaration order."""
    if identifiers is None:
        return list(DEFAULT_SOURCES)
    wanted = {get_source(i, ignore_case=True).identifier for i in identifiers if i.strip()}
    if not wanted:
        raise ConfigError("No search engines selected")
    return [s for s in DEFAULT_SOURCES if s.identifier in wanted]
