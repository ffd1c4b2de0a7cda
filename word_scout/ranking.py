# File: word_scout/ranking.py
"""word_scout.ranking: turns the raw word tally into a bounded, ordered histogram."""

from __future__ import annotations

from typing import Dict, Mapping, Tuple


def _rank_key(item: Tuple[str, int]) -> Tuple[int, int, str]:
    word, count = item
    return (-count, -len(word), word)


def sort_word_counts(word_counts: Mapping[str, int], limit: int) -> Dict[str, int]:
    """
    Return the *limit* most popular words, most frequent first.

    Ties on count go to the longer word, then to the alphabetically smaller one.
    The returned dict preserves that order.
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")
    ranked = sorted(word_counts.items(), key=_rank_key)[:limit]
    return dict(ranked)


__all__ = ["sort_word_counts"]
