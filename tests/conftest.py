# File: tests/conftest.py
import asyncio
from typing import Dict, List, Union

import pytest

from word_scout.config import CrawlerConfig
from word_scout.crawler.models import PageData, PageResult
from word_scout.errors import FetchError


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


class FakeClock:
    """Manually advanced clock; call it to read the current instant."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """
    In-memory page graph. Unknown URLs raise FetchError; a value that is an
    exception instance is raised as-is. Every fetch yields to the event loop
    so that sibling traversals interleave.
    """

    def __init__(
        self,
        pages: Dict[str, Union[PageResult, Exception]],
        delay: float = 0.0,
        clock: Union[FakeClock, None] = None,
        advance_by: float = 0.0,
    ) -> None:
        self.pages = pages
        self.delay = delay
        self.clock = clock
        self.advance_by = advance_by
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, url: str) -> PageResult:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if self.clock is not None:
                self.clock.advance(self.advance_by)
            page = self.pages.get(url)
            if page is None:
                raise FetchError(url, "not found")
            if isinstance(page, Exception):
                raise page
            return page
        finally:
            self.in_flight -= 1


def page(words: Union[Dict[str, int], None] = None, links: Union[List[str], None] = None) -> PageResult:
    return PageResult(word_counts=dict(words or {}), links=list(links or []))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_config():
    """Factory for CrawlerConfig with test-friendly defaults."""

    def _make(**overrides) -> CrawlerConfig:
        data = {
            "max_depth": 2,
            "timeout_seconds": 10.0,
            "parallelism": 4,
            "popular_word_count": 10,
        }
        data.update(overrides)
        return CrawlerConfig(**data)

    return _make


@pytest.fixture()
def mock_page_data() -> PageData:
    """
    Provide a simple PageData instance with HTML content.
    """
    html = (
        "<html><head><title>Hello</title><script>var hidden = 1;</script></head>"
        '<body><p>Hello, world! Hello again.</p>'
        '<a href="/link1">L1</a><a href="http://external.com/x#frag">X</a>'
        '<a href="mailto:me@example.com">Mail</a><a href="/link1">L1 again</a></body></html>'
    )
    return PageData(url="http://example.com/", content=html)
