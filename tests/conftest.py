"""
Shared fixtures: fake engine results pages and a mock HTTP transport.
"""

from typing import Callable, Dict, List, Optional

import httpx
import pytest

from search.config import SearchConfig


HOSTS = {
    "www.google.com": "Google",
    "www.bing.com": "Bing",
    "duckduckgo.com": "DuckDuckGo",
}


def google_page(hrefs: List[Optional[str]], title: str = "results - Google Search") -> str:
    cards = []
    for href in hrefs:
        anchor = f'<a href="{href}"><h3>Result</h3></a>' if href is not None else "<h3>No link</h3>"
        cards.append(f'<div class="g"><div class="yuRUbf">{anchor}</div><div class="VwiC3b">snippet</div></div>')
    return f"<html><head><title>{title}</title></head><body><div id=\"search\">{''.join(cards)}</div></body></html>"


def bing_page(hrefs: List[Optional[str]], title: str = "results - Search") -> str:
    cards = []
    for href in hrefs:
        anchor = f'<h2><a href="{href}">Result</a></h2>' if href is not None else "<h2>No link</h2>"
        cards.append(f'<li class="b_algo">{anchor}<p>caption</p></li>')
    return f"<html><head><title>{title}</title></head><body><ol id=\"b_results\">{''.join(cards)}</ol></body></html>"


def duckduckgo_page(hrefs: List[Optional[str]], title: str = "results at DuckDuckGo") -> str:
    cards = []
    for href in hrefs:
        anchor = f'<a class="result__a" href="{href}">Result</a>' if href is not None else "<span>No link</span>"
        cards.append(f'<div class="result__body"><h2 class="result__title">{anchor}</h2></div>')
    return f"<html><head><title>{title}</title></head><body><div class=\"results\">{''.join(cards)}</div></body></html>"


PAGE_BUILDERS: Dict[str, Callable[..., str]] = {
    "Google": google_page,
    "Bing": bing_page,
    "DuckDuckGo": duckduckgo_page,
}


def numbered_links(source: str, count: int) -> List[str]:
    return [f"https://{source.lower()}-{i}.example.com/page" for i in range(1, count + 1)]


def engine_for(request: httpx.Request) -> str:
    return HOSTS[request.url.host]


class RecordingHandler:
    """MockTransport handler serving one fixed page per engine and recording requests."""

    def __init__(self, pages: Dict[str, str], fail: Optional[set] = None, status: int = 200):
        self.pages = pages
        self.fail = fail or set()
        self.status = status
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        engine = engine_for(request)
        if engine in self.fail:
            raise httpx.ConnectError("Name or service not known", request=request)
        return httpx.Response(self.status, text=self.pages.get(engine, ""))


@pytest.fixture
def quiet_config() -> SearchConfig:
    """Config without the cosmetic delay."""
    return SearchConfig(delay=0.0, pipeline_timeout=5.0)


@pytest.fixture
def ten_card_pages() -> Dict[str, str]:
    return {
        name: builder(numbered_links(name, 10))
        for name, builder in PAGE_BUILDERS.items()
    }
