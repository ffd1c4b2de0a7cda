# === FILE: word_scout/parser/html_parser.py ===
"""HTML parsing for WordScout.

:func:`parse_html` turns raw markup (or a
:class:`~word_scout.crawler.models.PageData`) into a :class:`ParsedPage`:

* links — absolute URLs found in <a href="…"> tags, fragment removed,
  deduplicated in document order; hrefs that cannot be resolved are skipped.
* word_counts — occurrences of every visible word, lower-cased, with
  punctuation stripped.

Words fully matching one of the *ignored_words* patterns are not counted.
URLs are not canonicalised beyond resolving them against the page URL: the
crawler treats URL identity as exact string equality.
"""
from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urldefrag, urljoin

from bs4 import BeautifulSoup

from word_scout.crawler.models import PageResult
from word_scout.logger import logger
from word_scout.utils import matches_any

__all__: Sequence[str] = ("ParsedPage", "parse_html", "count_words")

_NON_WORD_RE = re.compile(r"[\W_]+")
_SKIPPED_SCHEMES = ("mailto:", "javascript:", "tel:")


@dataclass(slots=True)
class ParsedPage:
    """Lightweight representation of an HTML page."""

    url: str
    links: list[str]
    word_counts: dict[str, int] = field(default_factory=dict)

    def to_result(self) -> PageResult:
        return PageResult(word_counts=dict(self.word_counts), links=list(self.links))


def count_words(text: str, ignored_words: Iterable[re.Pattern[str]] = ()) -> dict[str, int]:
    """Count whitespace-separated words of *text* after stripping punctuation."""
    patterns = list(ignored_words)
    counter: Counter[str] = Counter()
    for token in text.split():
        word = _NON_WORD_RE.sub("", token).lower()
        if not word or matches_any(word, patterns):
            continue
        counter[word] += 1
    return dict(counter)


def parse_html(page: Any, ignored_words: Iterable[re.Pattern[str]] = ()) -> ParsedPage:
    """Parse raw HTML (string) or :class:`~word_scout.crawler.models.PageData`.

    Parameters
    ----------
    page
        Either a *str* (HTML markup) **or** an object with ``url`` and
        ``content`` attributes. Relative links can only be resolved in the
        second case.
    ignored_words
        Compiled patterns; a word matching one of them in full is skipped.
    """
    if hasattr(page, "content") and hasattr(page, "url"):
        html = page.content
        base_url = str(page.url)
    else:
        html = str(page)
        base_url = ""

    soup = BeautifulSoup(html, "html.parser")

    seen: set[str] = set()
    links: list[str] = []
    for tag in soup.find_all("a", href=True):
        href = tag["href"].strip()  # type: ignore[index,union-attr]
        if not href or href.startswith(_SKIPPED_SCHEMES) or href.startswith("#"):
            continue
        try:
            abs_url, _ = urldefrag(urljoin(base_url, href))
        except ValueError as exc:
            logger.debug("Skipping unresolvable link %r on %s: %s", href, base_url, exc)
            continue
        if abs_url not in seen:
            seen.add(abs_url)
            links.append(abs_url)

    # Visible text only
    for element in soup(["script", "style", "noscript", "template"]):
        element.decompose()
    text = " ".join(soup.stripped_strings)

    return ParsedPage(
        url=base_url,
        links=links,
        word_counts=count_words(text, ignored_words),
    )
