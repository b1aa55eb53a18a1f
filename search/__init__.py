"""
Search module: queries several web search engines in parallel and
scrapes result links from their HTML results pages.
"""

from .errors import SearchError, ConfigError, QueryError, TransportError, ParseError
from .sources import SourceConfig, SecureTokenGenerator, DEFAULT_SOURCES, get_source
from .config import SearchConfig
from .query_builder import QueryBuilder, build_url
from .fetcher import Fetcher, FetchOutcome
from .extractor import ResultExtractor
from .orchestrator import SearchOrchestrator, perform_search

__all__ = [
    "SearchError",
    "ConfigError",
    "QueryError",
    "TransportError",
    "ParseError",
    "SourceConfig",
    "SecureTokenGenerator",
    "DEFAULT_SOURCES",
    "get_source",
    "SearchConfig",
    "QueryBuilder",
    "build_url",
    "Fetcher",
    "FetchOutcome",
    "ResultExtractor",
    "SearchOrchestrator",
    "perform_search",
]
