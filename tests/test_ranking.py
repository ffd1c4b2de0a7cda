# File: tests/test_ranking.py
import pytest

from word_scout.ranking import sort_word_counts


def test_tie_on_count_prefers_longer_word():
    assert sort_word_counts({"a": 5, "b": 5, "ab": 5}, 1) == {"ab": 5}


def test_tie_on_count_and_length_is_alphabetical():
    ranked = sort_word_counts({"b": 5, "a": 5, "ab": 5}, 3)
    assert list(ranked) == ["ab", "a", "b"]


@pytest.mark.parametrize(
    "counts,limit,expected",
    [
        ({"the": 9, "crawler": 2, "web": 4}, 2, ["the", "web"]),
        ({"the": 9, "crawler": 2, "web": 4}, 10, ["the", "web", "crawler"]),
        ({"the": 9}, 0, []),
        ({}, 5, []),
    ],
)
def test_orders_by_count_and_truncates(counts, limit, expected):
    assert list(sort_word_counts(counts, limit)) == expected


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        sort_word_counts({"a": 1}, -1)
