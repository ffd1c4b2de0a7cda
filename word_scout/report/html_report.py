# File: word_scout/report/html_report.py
"""word_scout.report.html_report: HTML report rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from word_scout.crawler.models import CrawlResult


def render_html(
    result: CrawlResult,
    template_dir: Union[Path, str],
    output_path: Union[Path, str],
) -> Path:
    """Render ``report.html.j2`` from *template_dir* and save it.

    Args:
        result: the CrawlResult to show.
        template_dir: directory holding the Jinja2 templates.
        output_path: where to write the HTML file.

    Returns:
        Path of the saved HTML file.
    """
    template_dir = Path(template_dir)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template("report.html.j2")

    context: dict[str, Any] = {
        "words": list(result.word_counts.items()),
        "urls_visited": result.urls_visited,
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
