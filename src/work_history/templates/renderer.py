"""Render work history entries as the plain-text report."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment, StrictUndefined

from work_history.errors import IoError
from work_history.models.entry import WorkHistoryEntry
from work_history.parsers.date_parser import format_month_year

logger = logging.getLogger(__name__)

# Every block ends with one blank line, the last one included.
REPORT_TEMPLATE = (
    "{% for entry in entries %}"
    "Work History {{ loop.index }}\n"
    "Company: {{ entry.company }}\n"
    "Position: {{ entry.position }}\n"
    "Start Date: {{ entry.start_date | month_year }}\n"
    "End Date: {{ entry.end_date | month_year }}\n"
    "Location: {{ entry.location }}\n"
    "Responsibilities: {{ entry.responsibilities }}\n"
    "\n"
    "{% endfor %}"
)

_env = Environment(autoescape=False, keep_trailing_newline=True, undefined=StrictUndefined)
_env.filters["month_year"] = format_month_year


def render_report(entries: Sequence[WorkHistoryEntry]) -> str:
    """Render entries, in the given order, numbered from 1."""
    template = _env.from_string(REPORT_TEMPLATE)
    return template.render(entries=entries)


def save_report(content: str, output_path: str | Path, encoding: str = "utf-8") -> Path:
    """Write the report, replacing any existing file.

    The parent directory must already exist. Content is encoded before the
    file is opened, so an encoding failure leaves an existing file intact.
    """
    path = Path(output_path)
    try:
        data = content.encode(encoding)
    except UnicodeEncodeError as exc:
        raise IoError("encode output file", path, exc) from exc
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise IoError("write output file", path, exc.strerror or exc) from exc
    logger.info("Wrote %d characters to %s", len(content), path)
    return path
