"""
Waste Segregation - CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Run the mode driver.
  4. Report the result (or a single ``[ERROR]`` line) to the console.

Operation failures (missing input, unreadable file, unwritable report) end
the current command only; they are reported and the process exits normally.

Install and run::

    pip install -e .
    waste-segregation                      # interactive mode
    waste-segregation bulk items.txt       # -> items_classified.csv
    waste-segregation bulk items.txt out.csv
    waste-segregation sample               # -> sample_waste_report.csv
    waste-segregation summary out.csv
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
import typer
from typer.core import TyperGroup

UNKNOWN_COMMAND_MESSAGE = (
    "Unknown command. Use no arguments for interactive, 'bulk' or 'sample'."
)
BULK_USAGE = "Usage: waste-segregation bulk <input.txt> [output.csv]"


class _ModeGroup(TyperGroup):
    """Command group that answers an unknown first argument with a plain message."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        name = args[0] if args else ""
        if name and not name.startswith("-"):
            normalized = ctx.token_normalize_func(name) if ctx.token_normalize_func else name
            if self.get_command(ctx, name) is None and self.get_command(ctx, normalized) is None:
                typer.echo(UNKNOWN_COMMAND_MESSAGE)
                ctx.exit(0)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name="waste-segregation",
    help="Classify waste items as wet (biodegradable) or dry (non-biodegradable).",
    cls=_ModeGroup,
    invoke_without_command=True,
    no_args_is_help=False,
    add_completion=False,
    context_settings={"token_normalize_func": str.lower},
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from waste_segregation.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config, explain: bool = False):
    """Set up logging from config; ``--explain`` and ``debug`` raise the level."""
    from waste_segregation.utils.logging import configure_logging

    override = None
    if config.debug:
        override = "DEBUG"
    elif explain and config.logging.level in ("WARNING", "ERROR", "CRITICAL"):
        override = "INFO"
    configure_logging(config.logging, level_override=override)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
) -> None:
    """Classify waste items as wet or dry.

    With no command, starts interactive mode: type an item per line,
    'save <file>' to write a report, 'exit' to stop.
    """
    ctx.obj = config_path
    if ctx.invoked_subcommand is not None:
        return

    from waste_segregation.modes.interactive import run_interactive

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    run_interactive(
        keywords=config.keywords,
        default_report=Path(config.reports.interactive_default),
    )


@app.command("bulk")
def bulk(
    ctx: typer.Context,
    input_path: Optional[str] = typer.Argument(
        None,
        metavar="INPUT",
        help="Plain-text file with one item per line.",
    ),
    output_path: Optional[str] = typer.Argument(
        None,
        metavar="[OUTPUT]",
        help="Report CSV path (default: <input stem>_classified.csv).",
    ),
    explain: bool = typer.Option(
        False,
        "--explain",
        help="Log the keyword that decided each item.",
    ),
) -> None:
    """Classify every line of INPUT and write a CSV report.

    Blank lines are skipped.  Nothing is written if INPUT is missing or
    unreadable.
    """
    from waste_segregation.modes.bulk import InputNotFoundError, InputReadError, run_bulk
    from waste_segregation.reporting.csv_report import ReportWriteError

    if not input_path:
        typer.echo(BULK_USAGE)
        return

    config = _load_config_or_exit(ctx.obj)
    _configure_logging(config, explain)

    try:
        result = run_bulk(
            Path(input_path),
            Path(output_path) if output_path else None,
            keywords=config.keywords,
            suffix=config.reports.bulk_suffix,
            explain=explain,
        )
    except (InputNotFoundError, InputReadError, ReportWriteError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        return

    typer.echo(f"Classified {result.count} items. Output -> {result.output_path}")


@app.command("sample")
def sample(
    ctx: typer.Context,
    explain: bool = typer.Option(
        False,
        "--explain",
        help="Log the keyword that decided each item.",
    ),
) -> None:
    """Classify the built-in ten-item demonstration set and save it."""
    from waste_segregation.modes.sample import run_sample
    from waste_segregation.reporting.csv_report import ReportWriteError

    config = _load_config_or_exit(ctx.obj)
    _configure_logging(config, explain)

    output = Path(config.reports.sample_output)
    try:
        run_sample(output, keywords=config.keywords, explain=explain)
    except ReportWriteError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        return

    typer.echo(f"Saved {output}")


@app.command("summary")
def summary(
    ctx: typer.Context,
    report_path: str = typer.Argument(
        ...,
        metavar="REPORT",
        help="Report CSV written by bulk, sample, or an interactive save.",
    ),
) -> None:
    """Print per-category counts for a saved report."""
    from waste_segregation.reporting.csv_report import read_report
    from waste_segregation.reporting.formatters import format_category_summary

    config = _load_config_or_exit(ctx.obj)
    _configure_logging(config)

    path = Path(report_path)
    try:
        records = read_report(path)
    except (OSError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        return

    typer.echo(format_category_summary(records, title=path.name))


if __name__ == "__main__":
    app()
