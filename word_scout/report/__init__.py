# File: word_scout/report/__init__.py
"""word_scout.report: JSON and HTML writers for crawl results, used by the CLI."""

from __future__ import annotations

from pathlib import Path

from .html_report import render_html
from .json_report import render_json

DEFAULT_TEMPLATE_DIR: Path = Path(__file__).parent / "templates"

__all__ = ["render_json", "render_html", "DEFAULT_TEMPLATE_DIR"]
