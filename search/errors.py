"""
Exception hierarchy for the search pipeline.

Only QueryError and ConfigError ever reach callers of perform_search;
TransportError and ParseError are contained inside a single source.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base class for search pipeline errors."""


class ConfigError(SearchError):
    """Unknown or malformed search engine configuration."""


class QueryError(SearchError, ValueError):
    """Blank or otherwise unusable search query."""


class TransportError(SearchError):
    """Network-level failure while fetching a results page."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{reason} ({url})")
        self.url = url
        self.reason = reason


class ParseError(SearchError):
    """A single result card could not be read."""
