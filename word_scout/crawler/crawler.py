# === FILE: word_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, List, Sequence

from word_scout.config import CrawlerConfig
from word_scout.crawler.fetcher import PageFetcher
from word_scout.crawler.models import BranchOutcome, CrawlResult
from word_scout.crawler.state import VisitedRegistry, WordTally
from word_scout.errors import FetchError
from word_scout.logger import logger
from word_scout.ranking import sort_word_counts
from word_scout.utils import matches_any, max_parallelism

__all__ = ("ParallelCrawler", "Clock")

Clock = Callable[[], float]


@dataclass(slots=True)
class _CrawlContext:
    """State shared by reference by every traversal of one seed."""

    deadline: float
    visited: VisitedRegistry
    counts: WordTally
    slots: asyncio.Semaphore
    aborted: asyncio.Event


class ParallelCrawler:
    """
    Depth- and deadline-bounded crawler that fetches pages concurrently and
    tallies the words it finds.

    Each traversal runs as an asyncio task. At most ``pool_size`` of them do
    work (check, claim, fetch, tally) at any moment; a task gives its slot
    back before waiting on its children, so waiting parents never starve
    the pool.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        fetcher: PageFetcher,
        clock: Clock = time.monotonic,
    ) -> None:
        self.config = config
        self.fetcher = fetcher
        self.clock = clock
        self.pool_size: int = min(config.parallelism, self.max_parallelism())

    @staticmethod
    def max_parallelism() -> int:
        return max_parallelism()

    async def crawl(self, seed_urls: Sequence[str]) -> CrawlResult:
        """
        Crawl every seed in order, each seed's subtree finishing before the
        next one starts. Raises FetchError when ``on_fetch_error`` is "abort"
        and any page of a seed's subtree could not be fetched.
        """
        deadline = self.clock() + self.config.timeout_seconds
        visited = VisitedRegistry()
        counts = WordTally()
        slots = asyncio.Semaphore(self.pool_size)
        logger.info(
            "Crawl started: %d seed(s), depth %d, %d worker(s)",
            len(seed_urls), self.config.max_depth, self.pool_size,
        )
        start = time.monotonic()

        for url in seed_urls:
            ctx = _CrawlContext(deadline, visited, counts, slots, asyncio.Event())
            outcome = await self._traverse(url, self.config.max_depth, ctx)
            logger.debug("Seed %s: %d page(s) fetched", url, outcome.fetched)
            self._handle_errors(url, outcome.errors)

        duration = time.monotonic() - start
        logger.info("Crawl finished: %d URL(s) visited in %.2f s", visited.size(), duration)

        if counts.is_empty():
            return CrawlResult(word_counts={}, urls_visited=visited.size())
        return CrawlResult(
            word_counts=sort_word_counts(counts.snapshot(), self.config.popular_word_count),
            urls_visited=visited.size(),
        )

    def _handle_errors(self, seed: str, errors: List[FetchError]) -> None:
        if not errors:
            return
        if self.config.on_fetch_error == "abort":
            logger.error("Seed %s aborted: %s", seed, errors[0])
            raise errors[0]
        logger.warning("Seed %s: %d page(s) could not be fetched", seed, len(errors))

    async def _traverse(self, url: str, depth: int, ctx: _CrawlContext) -> BranchOutcome:
        outcome = BranchOutcome()
        async with ctx.slots:
            if depth == 0 or self.clock() >= ctx.deadline or ctx.aborted.is_set():
                return outcome
            if matches_any(url, self.config.ignored_urls):
                return outcome
            if not ctx.visited.claim(url):
                return outcome
            try:
                page = await self.fetcher.fetch(url)
            except FetchError as exc:
                if self.config.on_fetch_error == "abort":
                    ctx.aborted.set()
                else:
                    logger.warning("Fetch failed: %s", exc)
                outcome.errors.append(exc)
                return outcome
            ctx.counts.add_all(page.word_counts)
            outcome.fetched += 1

        # An unexpected error cancels and joins the siblings before it propagates.
        try:
            async with asyncio.TaskGroup() as group:
                children = [
                    group.create_task(self._traverse(link, depth - 1, ctx))
                    for link in page.links
                ]
        except ExceptionGroup as eg:
            raise eg.exceptions[0]
        for child in children:
            outcome.merge(child.result())
        return outcome
