from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from geofeed_tools import __version__
from geofeed_tools.errors import LoadError, OpenError
from geofeed_tools.reference import ReferenceData, load_reference_data
from geofeed_tools.render import render_verdict, render_warning
from geofeed_tools.report import diagnostics_to_dataframe, save_report
from geofeed_tools.utils.logging import get_logger, setup_logging
from geofeed_tools.validate import validate_file

HELP = (
    f"Geofeed Tools Version {__version__}\n\n"
    "Validate an RFC 8805 geofeed file: CIDR prefixes, ISO 3166-1 country codes "
    "and ISO 3166-2 subdivision codes.\n\n"
    "Examples:\n\n"
    "    geofeed-tools -v geofeed.csv\n\n"
    "    geofeed-tools -v geofeed.csv --report problems.json --report-format json"
)

app = typer.Typer(add_completion=False)

log = get_logger(__name__)


class ReportFormat(str, Enum):
    csv = "csv"
    json = "json"


def _help_callback(ctx: typer.Context, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    typer.echo(ctx.get_help())
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"geofeed-tools {__version__}")
        raise typer.Exit()


def _use_color(color: Optional[bool]) -> bool:
    if color is not None:
        return color
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def _load_reference(
        countries_file: Optional[Path],
        subdivisions_file: Optional[Path],
) -> ReferenceData:
    """
    Load the reference tables, turning LoadError into a user-facing
    message and exit code 1.
    """
    try:
        return load_reference_data(countries_file, subdivisions_file)
    except LoadError as exc:
        typer.echo(f"Failed to load {exc.dataset}: {exc}", err=True)
        raise typer.Exit(code=1)


@app.command(help=HELP, add_help_option=False)
def run(
        ctx: typer.Context,
        validate: Optional[Path] = typer.Option(
            None,
            "-v",
            "--validate",
            metavar="FILEPATH",
            help="Validate a geofeed file.",
        ),
        report: Optional[Path] = typer.Option(
            None,
            "--report",
            "-r",
            help="Also write the diagnostics to this file (CSV or JSON).",
        ),
        report_format: ReportFormat = typer.Option(
            ReportFormat.csv,
            "--report-format",
            help="Report file format: csv | json",
        ),
        countries_file: Optional[Path] = typer.Option(
            None,
            "--countries-file",
            envvar="GEOFEED_TOOLS_COUNTRIES_FILE",
            help="Use this ISO 3166-1 JSON list instead of the bundled one.",
        ),
        subdivisions_file: Optional[Path] = typer.Option(
            None,
            "--subdivisions-file",
            envvar="GEOFEED_TOOLS_SUBDIVISIONS_FILE",
            help="Use this ISO 3166-2 JSON mapping instead of the bundled one.",
        ),
        color: Optional[bool] = typer.Option(
            None,
            "--color/--no-color",
            help="Colorize output (default: on for terminals unless NO_COLOR is set).",
        ),
        log_level: str = typer.Option(
            "WARNING",
            "--log-level",
            envvar="GEOFEED_TOOLS_LOG_LEVEL",
            help="Logging level for diagnostics on stderr: DEBUG | INFO | WARNING | ERROR",
        ),
        version: bool = typer.Option(
            False,
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
        show_help: bool = typer.Option(
            False,
            "-h",
            "--help",
            callback=_help_callback,
            is_eager=True,
            help="Show this help message.",
        ),
):
    if validate is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)

    use_color = _use_color(color)
    setup_logging(log_level, use_color=use_color)
    log.info("Input: %s", validate)

    # 1) reference tables
    reference = _load_reference(countries_file, subdivisions_file)

    # 2) validate
    try:
        result = validate_file(validate, reference)
    except OpenError as exc:
        typer.echo(f"Failed to open geofeed file: {exc}", err=True)
        raise typer.Exit(code=1)

    # 3) verdict
    for line in render_verdict(result, color=use_color):
        typer.echo(line, color=use_color)

    if result.close_error is not None:
        typer.echo(
            render_warning(f"Failed to close geofeed file: {result.close_error}", color=use_color),
            err=True,
            color=use_color,
        )

    # 4) optional report
    if report is not None:
        df = diagnostics_to_dataframe(result.diagnostics)
        out = save_report(df, report, fmt=report_format.value)
        typer.echo(f"Wrote report to {out}", err=True)

    if not result.valid:
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for console_scripts."""
    try:
        app(prog_name="geofeed-tools")
    except KeyboardInterrupt:
        typer.echo("Interrupted by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
