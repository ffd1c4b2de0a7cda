# File: tests/test_state.py
"""Thread-level stress tests for the shared crawl containers."""
import random
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from word_scout.crawler.state import VisitedRegistry, WordTally


@pytest.mark.parametrize("workers", [2, 4, 8, 16])
def test_claim_has_exactly_one_winner(workers):
    registry = VisitedRegistry()
    barrier = threading.Barrier(workers)

    def contend(_):
        barrier.wait()
        return [registry.claim(f"http://example.com/{i}") for i in range(200)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        outcomes = list(pool.map(contend, range(workers)))

    for i in range(200):
        assert sum(result[i] for result in outcomes) == 1
    assert registry.size() == 200
    assert len(registry) == 200


def test_claim_is_exact_string_match():
    registry = VisitedRegistry()
    assert registry.claim("http://example.com")
    assert registry.claim("http://example.com/")
    assert not registry.claim("http://example.com")
    assert "http://example.com/" in registry
    assert "http://EXAMPLE.com" not in registry


@pytest.mark.parametrize("seed", range(5))
def test_tally_loses_no_updates(seed):
    rng = random.Random(seed)
    workers = rng.randint(2, 16)
    words = ["a", "bb", "ccc", "dddd"]
    batches = [
        {w: rng.randint(1, 9) for w in rng.sample(words, rng.randint(1, len(words)))}
        for _ in range(500)
    ]
    tally = WordTally()

    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(tally.add_all, batches))

    expected: dict[str, int] = {}
    for batch in batches:
        for word, count in batch.items():
            expected[word] = expected.get(word, 0) + count
    assert tally.snapshot() == expected


def test_tally_empty_and_snapshot_is_a_copy():
    tally = WordTally()
    assert tally.is_empty()
    tally.add_all({"x": 2})
    tally.add_all({"x": 1, "y": 4})
    snap = tally.snapshot()
    snap["x"] = 100
    assert tally.snapshot() == {"x": 3, "y": 4}
    assert len(tally) == 2
    assert not tally.is_empty()
