"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from work_history.config import load_config
from work_history.errors import UsageError, WorkHistoryError
from work_history.pipeline.orchestrator import PipelineOrchestrator, validate_paths

USAGE = (
    "Usage: work-history <input_csv_file> [output_txt_file]\n"
    "Example: work-history work_history.csv my_output.txt\n"
    "If output file is not specified, '{default}' will be created in the current directory"
)

app = typer.Typer(
    name="work-history",
    help="Convert a work history CSV file into a formatted text report.",
    add_completion=False,
)
console = Console()


def resolve_paths(args: list[Path], default_output: str | Path) -> tuple[Path, Path]:
    """Split positional arguments into (input, output) paths."""
    if len(args) not in (1, 2):
        raise UsageError(USAGE.format(default=default_output))
    input_path = Path(args[0])
    output_path = Path(args[1]) if len(args) == 2 else Path(default_output)
    return input_path, output_path


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("work_history")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(level.upper())


@app.command()
def convert(
    paths: list[Path] = typer.Argument(
        None,
        metavar="INPUT_CSV [OUTPUT_TXT]",
        help="Work history CSV file, then optional output text file",
        show_default=False,
    ),
    config_path: Path = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Sort work history entries by end date and write the formatted report."""
    try:
        config = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    _configure_logging("DEBUG" if verbose else config.logging.level)

    try:
        input_path, output_path = resolve_paths(paths or [], config.report.default_output)
        validate_paths(input_path, output_path)

        orchestrator = PipelineOrchestrator(config.report)
        with console.status("Formatting work history...") as status:

            def on_phase(phase: str, detail: str) -> None:
                status.update(detail)

            result = orchestrator.run(input_path, output_path, on_phase=on_phase)
    except WorkHistoryError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(e.exit_code)

    console.print(
        f"[green]Successfully created {escape(str(result.output_path))}[/green]",
        soft_wrap=True,
    )
    detail = f"{result.entry_count} entries written"
    if verbose:
        detail += f" in {result.elapsed_seconds:.2f}s"
    console.print(f"[dim]{detail}[/dim]")


if __name__ == "__main__":
    app()
