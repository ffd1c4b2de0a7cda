# File: tests/test_parser.py
import re

from word_scout.crawler.models import PageData
from word_scout.parser.html_parser import count_words, parse_html


def test_parse_html_links_and_words(mock_page_data):
    parsed = parse_html(mock_page_data)

    assert parsed.links == ["http://example.com/link1", "http://external.com/x"]
    assert parsed.word_counts == {
        "hello": 3,
        "world": 1,
        "again": 2,
        "l1": 2,
        "x": 1,
        "mail": 1,
    }
    assert "var" not in parsed.word_counts


def test_parse_html_ignored_words(mock_page_data):
    parsed = parse_html(mock_page_data, [re.compile(r"^.{1,2}$"), re.compile("hello")])
    assert parsed.word_counts == {"world": 1, "again": 2, "mail": 1}


def test_parse_html_plain_string_keeps_relative_links():
    parsed = parse_html('<a href="page.html#top">p</a><a href="#only-fragment">f</a>')
    assert parsed.url == ""
    assert parsed.links == ["page.html"]


def test_count_words_strips_punctuation_and_lowercases():
    assert count_words("Don't STOP -- stop! ...") == {"dont": 1, "stop": 2}


def test_to_result_copies_data(mock_page_data):
    parsed = parse_html(mock_page_data)
    result = parsed.to_result()
    result.links.append("http://other/")
    assert "http://other/" not in parsed.links


def test_unresolvable_link_is_skipped():
    html = '<p>hello</p><a href="http://[::1">broken</a><a href="/ok">ok</a>'
    parsed = parse_html(PageData(url="http://example.com/", content=html))
    assert parsed.links == ["http://example.com/ok"]
    assert parsed.word_counts == {"hello": 1, "broken": 1, "ok": 1}
