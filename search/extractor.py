"""
Result Extractor — pull destination links out of a results page.

Rules:
  - Each engine has a card selector and an anchor selector nested in it.
  - A card without the anchor is skipped, not an error.
  - Only hrefs starting with "http" are kept (relative, javascript:,
    fragment-only and protocol-relative links are dropped).
  - First N qualifying links in document order; no de-duplication.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from selectolax.parser import HTMLParser, Node

from models.schema import MAX_LINKS, SourceResult
from .errors import ConfigError, ParseError
from .fetcher import FetchOutcome
from .sources import DEFAULT_SOURCES, SourceConfig, build_source_table, get_source

logger = logging.getLogger(__name__)


class ResultExtractor:
    """Parse engine results pages into SourceResults."""

    def __init__(
        self,
        sources: Optional[Iterable[SourceConfig]] = None,
        max_links: int = MAX_LINKS,
    ):
        self._table: Dict[str, SourceConfig] = build_source_table(
            DEFAULT_SOURCES if sources is None else sources
        )
        if max_links < 1:
            raise ConfigError(f"max_links must be at least 1, got {max_links}")
        self._max_links = min(max_links, MAX_LINKS)

    def extract(self, source_identifier: str, outcome: FetchOutcome) -> SourceResult:
        """
        Extract result links for one engine.

        A transport failure yields an empty, FAILED result. Non-200 pages
        are parsed anyway and usually come back empty.

        Raises:
            ConfigError: If source_identifier is not configured
        """
        source = get_source(source_identifier, self._table)

        if outcome.transport_error is not None:
            return SourceResult.empty(
                source.identifier, error=str(outcome.transport_error)
            )

        if outcome.http_status is not None and outcome.http_status != 200:
            logger.info(
                f"{source.identifier}: HTTP {outcome.http_status}, parsing body anyway"
            )

        html = outcome.document
        if not html.strip():
            return SourceResult.empty(source.identifier, http_status=outcome.http_status)

        tree = HTMLParser(html)
        title = _page_title(tree)
        logger.debug(f"{source.identifier}: Page title: {title}")

        links = self.extract_links(source, tree)
        logger.debug(f"{source.identifier}: Total results found: {len(links)}")

        return SourceResult(
            source_identifier=source.identifier,
            links=links,
            http_status=outcome.http_status,
            page_title=title,
        )

    def extract_links(self, source: SourceConfig, tree: HTMLParser) -> List[str]:
        """Walk result cards in document order, collecting up to max_links."""
        links: List[str] = []
        for card in tree.css(source.card_selector):
            try:
                href = _card_href(card, source.anchor_selector)
            except ParseError as e:
                logger.warning(f"{source.identifier}: skipping unreadable card: {e}")
                continue

            if href is None:
                continue
            if not href.startswith("http"):
                continue

            logger.debug(f"{source.identifier}: Found result - URL: {href}")
            links.append(href)
            if len(links) >= self._max_links:
                break
        return links


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _card_href(card: Node, anchor_selector: str) -> Optional[str]:
    """href of the first matching anchor inside a card, None if absent."""
    try:
        anchor = card.css_first(anchor_selector)
        if anchor is None:
            return None
        href = anchor.attributes.get("href")
    except (ValueError, TypeError, UnicodeDecodeError) as e:
        raise ParseError(str(e)) from e
    if not href:
        return None
    return href


def _page_title(tree: HTMLParser) -> Optional[str]:
    node = tree.css_first("title")
    if node is None:
        return None
    return node.text(strip=True) or None
