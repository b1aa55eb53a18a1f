"""
Tests for source table and URL building.
"""

import re

import pytest

from search.errors import ConfigError
from search.query_builder import QueryBuilder, build_url
from search.sources import (
    BING,
    DEFAULT_SOURCES,
    SecureTokenGenerator,
    SourceConfig,
    build_source_table,
    get_source,
    select_sources,
)


class FixedTokens:
    """Deterministic token generator."""

    def __init__(self, *tokens):
        self._tokens = list(tokens)
        self.calls = 0

    def next_token(self) -> str:
        token = self._tokens[self.calls % len(self._tokens)]
        self.calls += 1
        return token


class TestSourceTable:

    def test_declaration_order(self):
        assert [s.identifier for s in DEFAULT_SOURCES] == ["Google", "Bing", "DuckDuckGo"]

    def test_get_source_exact_by_default(self):
        assert get_source("Bing") is BING
        with pytest.raises(ConfigError):
            get_source("bing")

    def test_get_source_ignore_case(self):
        assert get_source("bing", ignore_case=True) is BING
        assert get_source(" DuckDuckGo ", ignore_case=True).identifier == "DuckDuckGo"

    def test_get_source_unknown(self):
        with pytest.raises(ConfigError):
            get_source("AltaVista")

    def test_duplicate_identifiers_rejected(self):
        with pytest.raises(ConfigError):
            build_source_table([BING, BING])

    def test_select_sources_keeps_declaration_order(self):
        selected = select_sources(["duckduckgo", "Google"])
        assert [s.identifier for s in selected] == ["Google", "DuckDuckGo"]

    def test_select_sources_default_is_all(self):
        assert select_sources() == DEFAULT_SOURCES

    def test_select_sources_empty_list(self):
        with pytest.raises(ConfigError):
            select_sources(["", "  "])


class TestQueryBuilder:

    def setup_method(self):
        self.tokens = FixedTokens("a" * 32, "b" * 32)
        self.builder = QueryBuilder(token_generator=self.tokens)

    def test_google_url(self):
        url = self.builder.build_url("Google", "rust ownership")
        assert url == (
            "https://www.google.com/search?client=opera-gx&q=rust+ownership"
            "&sourceid=opera&ie=UTF-8&oe=UTF-8"
        )

    def test_duckduckgo_url(self):
        url = self.builder.build_url("DuckDuckGo", "rust ownership")
        assert url == "https://duckduckgo.com/?q=rust+ownership&t=h_&ia=web"

    def test_bing_url_embeds_token(self):
        url = self.builder.build_url("Bing", "rust")
        assert url == (
            "https://www.bing.com/search?q=rust"
            "&sp=-1&pq=test&sc=6-4&qs=n&sk=&cvid=" + "a" * 32
        )

    def test_token_requested_on_every_bing_call(self):
        first = self.builder.build_url("Bing", "rust")
        second = self.builder.build_url("Bing", "rust")
        assert self.tokens.calls == 2
        assert first != second

    def test_static_sources_do_not_consume_tokens(self):
        self.builder.build_url("Google", "rust")
        self.builder.build_url("DuckDuckGo", "rust")
        assert self.tokens.calls == 0

    def test_query_is_percent_encoded(self):
        url = self.builder.build_url("DuckDuckGo", "c++ & rust/go?=#")
        assert "q=c%2B%2B+%26+rust%2Fgo%3F%3D%23&t=h_" in url

    def test_unicode_query(self):
        url = self.builder.build_url("Google", "café")
        assert "q=caf%C3%A9&" in url

    def test_unknown_source(self):
        with pytest.raises(ConfigError):
            self.builder.build_url("Yahoo", "rust")

    def test_identifier_must_match_exactly(self):
        with pytest.raises(ConfigError):
            self.builder.build_url("bing", "rust")

    def test_source_outside_builder_table(self):
        builder = QueryBuilder(sources=[BING], token_generator=self.tokens)
        with pytest.raises(ConfigError):
            builder.build_url("Google", "rust")

    def test_custom_source(self):
        source = SourceConfig(
            identifier="Example",
            base_endpoint="https://search.example.com/?q=",
            trailing_params=lambda query, tokens: f"&len={len(query)}",
            card_selector=".hit",
            anchor_selector="a",
        )
        builder = QueryBuilder(sources=[source])
        assert builder.build_url("Example", "abc") == "https://search.example.com/?q=abc&len=3"


class TestSecureTokens:

    def test_token_shape(self):
        token = SecureTokenGenerator().next_token()
        assert re.fullmatch(r"[0-9a-f]{32}", token)

    def test_fresh_token_per_call(self):
        gen = SecureTokenGenerator()
        assert len({gen.next_token() for _ in range(20)}) == 20

    def test_default_builder_uses_fresh_tokens(self):
        first = build_url("Bing", "rust")
        second = build_url("Bing", "rust")
        assert first != second
        assert re.search(r"cvid=[0-9a-f]{32}$", first)
