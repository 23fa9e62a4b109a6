"""CLI interface for ghexport."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from ghexport import __version__
from ghexport.activity_config import ActivityConfig
from ghexport.config import get_config
from ghexport.exceptions import AuthenticationError, ConfigurationError
from ghexport.exporter import generate_report, run_backfill
from ghexport.models.activity import ActivityType
from ghexport.models.request import ReportFormat, ReportRequest
from ghexport.output.console import Console as OutputConsole

app = typer.Typer(
    name="ghexport",
    help="Export GitHub commits and issues into monthly Markdown or CSV reports",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"ghexport version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """ghexport - monthly GitHub activity reports."""
    pass


def _load_activity_config(config_file: Optional[Path]) -> ActivityConfig:
    return ActivityConfig.load(config_file or get_config().activity_config_path)


def _run_export(
    activity_type: ActivityType,
    owner: str,
    year: int,
    month: int,
    omit: Optional[str],
    report_format: ReportFormat,
    replace: bool,
    config_file: Optional[Path],
    verbose: bool,
    quiet: bool,
) -> None:
    setup_logging(verbose)
    output_console = OutputConsole(verbose=verbose, quiet=quiet)

    try:
        request = ReportRequest(
            owner=owner,
            year=year,
            month=month,
            omit_repo=omit,
            should_replace=replace,
            format=report_format,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()
        )
        raise typer.BadParameter(problems)

    try:
        activity_config = _load_activity_config(config_file)
        output_console.print_header(activity_type.value, owner, year, month)
        summary = asyncio.run(
            generate_report(request, activity_type, activity_config=activity_config)
        )
    except (ConfigurationError, AuthenticationError) as e:
        output_console.print_error(str(e))
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Export cancelled[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        logger.error("Unhandled error: %s", e, exc_info=verbose)
        output_console.print_error(str(e))
        raise typer.Exit(1)

    output_console.print_summary(summary)


OWNER_ARGUMENT = typer.Argument(..., help="Owner key in activity.yaml")
YEAR_ARGUMENT = typer.Argument(..., min=1, help="Report year")
MONTH_ARGUMENT = typer.Argument(..., min=1, max=12, help="Report month (1-12)")
OMIT_OPTION = typer.Option(None, "--omit", help="Repository name to leave out")
FORMAT_OPTION = typer.Option(
    ReportFormat.NL,
    "--format",
    "-f",
    case_sensitive=False,
    help="csv or nl (natural-language Markdown)",
)
REPLACE_OPTION = typer.Option(False, "--replace", help="Overwrite existing report files")
CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to activity.yaml")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Verbose output")
QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Minimal output")


@app.command()
def commits(
    owner: str = OWNER_ARGUMENT,
    year: int = YEAR_ARGUMENT,
    month: int = MONTH_ARGUMENT,
    omit: Optional[str] = OMIT_OPTION,
    report_format: ReportFormat = FORMAT_OPTION,
    replace: bool = REPLACE_OPTION,
    config_file: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """Export commits for every repository of an owner for one month.

    Examples:
        ghexport commits acme 2024 3
        ghexport commits acme 2024 3 --format csv --replace
    """
    _run_export(
        ActivityType.COMMITS, owner, year, month, omit, report_format, replace, config_file, verbose, quiet
    )


@app.command()
def issues(
    owner: str = OWNER_ARGUMENT,
    year: int = YEAR_ARGUMENT,
    month: int = MONTH_ARGUMENT,
    omit: Optional[str] = OMIT_OPTION,
    report_format: ReportFormat = FORMAT_OPTION,
    replace: bool = REPLACE_OPTION,
    config_file: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """Export issue activity for every repository of an owner for one month.

    Examples:
        ghexport issues acme 2024 3
        ghexport issues acme 2024 3 --omit website
    """
    _run_export(
        ActivityType.ISSUES, owner, year, month, omit, report_format, replace, config_file, verbose, quiet
    )


@app.command()
def backfill(
    activity_type: ActivityType = typer.Option(
        ...,
        "--type",
        "-t",
        case_sensitive=False,
        help="commits or issues",
    ),
    config_file: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """Regenerate reports for every owner and every existing month directory.

    Scans activity/development/<yyyy>/<m> and rewrites each month's
    Markdown reports for all owners configured under github.<type>.
    """
    setup_logging(verbose)
    output_console = OutputConsole(verbose=verbose, quiet=quiet)

    try:
        activity_config = _load_activity_config(config_file)
        summaries = asyncio.run(run_backfill(activity_type, activity_config=activity_config))
    except ConfigurationError as e:
        output_console.print_error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        logger.error("Unhandled error: %s", e, exc_info=verbose)
        output_console.print_error(str(e))
        raise typer.Exit(1)

    for summary in summaries:
        output_console.print_summary(summary)
    output_console.print_success(f"All missing GitHub {activity_type.value} logs have been generated!")


if __name__ == "__main__":
    app()
