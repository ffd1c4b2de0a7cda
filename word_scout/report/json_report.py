# word_scout/report/json_report.py

"""
JSON output for WordScout.

Serialises a CrawlResult into a file.
"""
import json
from pathlib import Path

from word_scout.crawler.models import CrawlResult


def dumps(result: CrawlResult, *, pretty: bool = False) -> str:
    """Return *result* as a JSON string; word order (the ranking) is preserved."""
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def render_json(result: CrawlResult, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Write *result* as JSON to *output_path* and return the path.

    Example:
    ```python
    from word_scout.report.json_report import render_json
    report_path = render_json(result, 'reports/result.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dumps(result, pretty=pretty), encoding="utf-8")
    return output
