# word_scout/crawler/models.py
"""
Data models for the WordScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union

from word_scout.errors import FetchError


@dataclass(slots=True)
class PageData:
    """Holds the URL and raw content of a fetched page (text or binary)."""

    url: str
    content: Union[str, bytes]


@dataclass(slots=True)
class PageResult:
    """What the page fetcher hands back: word occurrences and outbound links."""

    word_counts: Dict[str, int] = field(default_factory=dict)
    links: List[str] = field(default_factory=list)


@dataclass(slots=True)
class BranchOutcome:
    """Result of one traversal subtree, merged upward through the join chain."""

    fetched: int = 0
    errors: List[FetchError] = field(default_factory=list)

    def merge(self, other: BranchOutcome) -> None:
        self.fetched += other.fetched
        self.errors.extend(other.errors)


@dataclass(frozen=True, slots=True)
class CrawlResult:
    """Final output of one crawl: ranked word histogram and distinct URLs visited."""

    word_counts: Dict[str, int]
    urls_visited: int

    def to_dict(self) -> Dict[str, object]:
        return {"word_counts": dict(self.word_counts), "urls_visited": self.urls_visited}
