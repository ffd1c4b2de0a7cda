# word_scout/crawler/state.py
"""
Shared mutable state of a single crawl.

Both containers lock internally, so callers never synchronise around them.
They are safe for asyncio tasks and for plain threads alike.
"""
from __future__ import annotations

import threading
from typing import Dict, Mapping, Set


class VisitedRegistry:
    """Set of URLs whose processing has begun."""

    def __init__(self) -> None:
        self._urls: Set[str] = set()
        self._lock = threading.Lock()

    def claim(self, url: str) -> bool:
        """Insert *url* if absent. True only for the single caller that inserted it."""
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def size(self) -> int:
        with self._lock:
            return len(self._urls)

    __len__ = size

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls


class WordTally:
    """Running word -> count totals across all fetched pages."""

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}
        self._lock = threading.Lock()

    def add_all(self, word_counts: Mapping[str, int]) -> None:
        for word, delta in word_counts.items():
            with self._lock:
                self._counts[word] = self._counts.get(word, 0) + delta

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._counts

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
