"""
Crawler core: shared state, traversal and the page fetcher.
"""
from .crawler import ParallelCrawler
from .fetcher import HttpPageFetcher, PageFetcher
from .models import CrawlResult, PageResult
from .state import VisitedRegistry, WordTally

__all__ = [
    "ParallelCrawler",
    "HttpPageFetcher", "PageFetcher",
    "CrawlResult", "PageResult",
    "VisitedRegistry", "WordTally",
]
