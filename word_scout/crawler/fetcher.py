# word_scout/crawler/fetcher.py
"""
Fetcher module: downloads a page over HTTP and turns it into words and links.

Failures surface as :class:`~word_scout.errors.FetchError`; whether that aborts
the crawl is decided by the crawler, not here. No retries are attempted.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout

from word_scout.config import CrawlerConfig
from word_scout.crawler.models import PageData, PageResult
from word_scout.errors import FetchError
from word_scout.logger import logger
from word_scout.parser.html_parser import parse_html

_PARSED_TYPES = ("text/html", "application/xhtml+xml", "text/plain")


class PageFetcher(Protocol):
    """Anything that can turn a URL into words and outbound links."""

    async def fetch(self, url: str) -> PageResult:
        ...


class HttpPageFetcher:
    """aiohttp-backed :class:`PageFetcher`. Use as an async context manager."""

    def __init__(self, config: CrawlerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> HttpPageFetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.request_timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def download(self, url: str) -> Optional[PageData]:
        """
        GET *url*. Returns PageData for parseable bodies, None for other
        content types, raises FetchError on any transport or HTTP error.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                if resp.status >= 400:
                    raise FetchError(url, f"HTTP {resp.status}")
                mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
                if mime not in _PARSED_TYPES:
                    logger.debug("Skipping %s: content type %r", url, mime)
                    return None
                text = await resp.text(errors="replace")
                return PageData(url, text)
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

    async def fetch(self, url: str) -> PageResult:
        page = await self.download(url)
        if page is None:
            return PageResult()
        try:
            parsed = parse_html(page, self.config.ignored_words)
        except Exception as exc:
            raise FetchError(url, f"unparsable page: {exc}") from exc
        return parsed.to_result()


__all__ = ["PageFetcher", "HttpPageFetcher"]
