# word_scout/errors.py
"""
Exception types shared by the WordScout crawler.
"""
from __future__ import annotations


class WordScoutError(Exception):
    """Base class for all WordScout errors."""


class FetchError(WordScoutError):
    """A page could not be retrieved or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class ConfigError(WordScoutError, ValueError):
    """Invalid crawler configuration, raised before crawling begins."""


__all__ = ["WordScoutError", "FetchError", "ConfigError"]
