"""Main pipeline - read, decode, sort, render and write."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from work_history.config import ReportConfig
from work_history.errors import PathNotFoundError
from work_history.models.entry import WorkHistoryEntry
from work_history.parsers.csv_reader import read_rows
from work_history.parsers.record_decoder import decode_rows
from work_history.pipeline.sorter import sort_by_end_date
from work_history.templates.renderer import render_report, save_report

logger = logging.getLogger(__name__)

PhaseCallback = Callable[[str, str], None]


@dataclass
class PipelineResult:
    """Outcome of a successful run."""

    output_path: Path
    entries: tuple[WorkHistoryEntry, ...] = field(default_factory=tuple)
    elapsed_seconds: float = 0.0

    @property
    def entry_count(self) -> int:
        return len(self.entries)


def validate_paths(input_path: str | Path, output_path: str | Path) -> None:
    """Check the input file and the output directory exist."""
    input_path = Path(input_path)
    if not input_path.exists():
        raise PathNotFoundError("Input file", input_path)

    parent = Path(output_path).parent
    if str(parent) not in ("", ".") and not parent.exists():
        raise PathNotFoundError("Output directory", parent)


class PipelineOrchestrator:
    """Runs the whole conversion for one input file.

    Nothing is written until every row has decoded and the report is
    rendered, so a failing run leaves the output path untouched.
    """

    def __init__(self, config: ReportConfig | None = None):
        self.config = config or ReportConfig()

    def run(
        self,
        input_path: str | Path,
        output_path: str | Path | None = None,
        on_phase: PhaseCallback | None = None,
    ) -> PipelineResult:
        start = time.monotonic()
        input_path = Path(input_path)
        output_path = Path(output_path) if output_path is not None else self.config.resolved_default_output

        def _notify(phase: str, detail: str) -> None:
            logger.debug("[%s] %s", phase, detail)
            if on_phase:
                on_phase(phase, detail)

        _notify("read", f"Reading {input_path}...")
        rows = read_rows(input_path, encoding=self.config.input_encoding)

        _notify("decode", f"Decoding {len(rows)} rows...")
        entries = decode_rows(rows)

        _notify("sort", "Sorting by end date...")
        ordered = sort_by_end_date(entries)

        _notify("render", "Rendering report...")
        content = render_report(ordered)

        _notify("write", f"Writing {output_path}...")
        save_report(content, output_path, encoding=self.config.output_encoding)

        elapsed = time.monotonic() - start
        logger.info("Wrote %d entries to %s in %.3fs", len(ordered), output_path, elapsed)
        return PipelineResult(
            output_path=output_path,
            entries=tuple(ordered),
            elapsed_seconds=elapsed,
        )


def run_pipeline(
    input_path: str | Path,
    output_path: str | Path | None = None,
    config: ReportConfig | None = None,
) -> PipelineResult:
    """Convert ``input_path`` into the formatted report at ``output_path``."""
    return PipelineOrchestrator(config).run(input_path, output_path)
