# File: word_scout/engine.py
"""word_scout.engine: wires config, HTTP fetcher and crawler together for one run."""

from __future__ import annotations

import asyncio
from typing import Optional, Sequence

from word_scout.config import CrawlerConfig, load_config
from word_scout.crawler.crawler import ParallelCrawler
from word_scout.crawler.fetcher import HttpPageFetcher
from word_scout.crawler.models import CrawlResult
from word_scout.logger import logger

__all__ = ["Engine", "start_crawl"]


async def start_crawl(cfg: CrawlerConfig, seeds: Optional[Sequence[str]] = None) -> CrawlResult:
    """
    Open an HTTP fetcher and crawl *seeds* (``cfg.start_pages`` when omitted).

    Parameters
    ----------
    cfg : CrawlerConfig
        Validated crawler configuration.
    seeds : sequence of str, optional
        Seed URLs overriding the configured start pages.
    """
    urls = list(seeds) if seeds else list(cfg.start_pages)
    async with HttpPageFetcher(cfg) as fetcher:
        crawler = ParallelCrawler(cfg, fetcher)
        return await crawler.crawl(urls)


class Engine:
    """Synchronous facade for scripts and tests."""

    @staticmethod
    def load_config(path: Optional[str]) -> CrawlerConfig:
        return load_config(path)

    def __init__(self, config: CrawlerConfig) -> None:
        self.config = config

    def run(self, seeds: Optional[Sequence[str]] = None) -> CrawlResult:
        """Run a crawl to completion and return its result."""
        logger.info("Starting crawl…")
        try:
            return asyncio.run(start_crawl(self.config, seeds))
        except Exception as exc:
            logger.error("Crawl failed: %s", exc)
            raise
