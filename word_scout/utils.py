# File: word_scout/utils.py
"""word_scout.utils: small helpers shared by the config layer and the crawler."""

from __future__ import annotations

import os
import re
from typing import Iterable, Sequence

__all__: Sequence[str] = ("max_parallelism", "matches_any")


def max_parallelism() -> int:
    """Upper bound on worker slots for this host."""
    return os.cpu_count() or 1


def matches_any(value: str, patterns: Iterable[re.Pattern[str]]) -> bool:
    """True if *value* matches one of *patterns* in full (not as a substring)."""
    return any(p.fullmatch(value) for p in patterns)
