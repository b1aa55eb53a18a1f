"""
Query Builder — turns a raw query into one engine's results-page URL.

URL = base endpoint + form-encoded query + engine trailing parameters.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional
from urllib.parse import quote_plus

from .sources import (
    DEFAULT_SOURCES,
    SecureTokenGenerator,
    SourceConfig,
    TokenGenerator,
    build_source_table,
    get_source,
)


class QueryBuilder:
    """
    Build request URLs for a fixed set of engines.

    The token generator is injectable so tests can pin the random
    session ids some engines embed in their URLs.
    """

    def __init__(
        self,
        sources: Optional[Iterable[SourceConfig]] = None,
        token_generator: Optional[TokenGenerator] = None,
    ):
        self._table: Dict[str, SourceConfig] = build_source_table(
            DEFAULT_SOURCES if sources is None else sources
        )
        self._tokens = token_generator or SecureTokenGenerator()

    def build_url(self, source_identifier: str, raw_query: str) -> str:
        """
        Build the results-page URL for one engine.

        Raises:
            ConfigError: If source_identifier is not configured
        """
        source = get_source(source_identifier, self._table)
        return (
            f"{source.base_endpoint}"
            f"{quote_plus(raw_query)}"
            f"{source.trailing_params(raw_query, self._tokens)}"
        )


_default_builder: Optional[QueryBuilder] = None


def build_url(source_identifier: str, raw_query: str) -> str:
    """Module-level shortcut using the built-in engine table."""
    global _default_builder
    if _default_builder is None:
        _default_builder = QueryBuilder()
    return _default_builder.build_url(source_identifier, raw_query)
