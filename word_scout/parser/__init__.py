from .html_parser import ParsedPage, count_words, parse_html

__all__ = ["ParsedPage", "count_words", "parse_html"]
