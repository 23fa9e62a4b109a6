"""Rich console output for export runs."""

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table

from ghexport.models.request import ReportSummary
from ghexport.utils.dates import month_name


class Console:
    """Wrapper for rich console output."""

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.console = RichConsole()
        self.verbose = verbose
        self.quiet = quiet

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"[red]Error:[/red] {message}")

    def print_warning(self, message: str):
        """Print warning message."""
        self.console.print(f"[yellow]Warning:[/yellow] {message}")

    def print_success(self, message: str):
        """Print success message."""
        if not self.quiet:
            self.console.print(f"[green]{message}[/green]")

    def print_header(self, activity_type: str, owner: str, year: int, month: int):
        """Print run header."""
        if self.quiet:
            return

        self.console.print(
            Panel(
                f"[bold blue]GitHub {activity_type} export[/bold blue]\n"
                f"[dim]Owner: {owner} | {month_name(month)} {year}[/dim]",
                expand=False,
            )
        )

    def print_summary(self, summary: ReportSummary):
        """Print what happened to each repository."""
        if self.quiet:
            return

        table = Table(
            title=f"{summary.authenticated_owner} {summary.activity_type.value} "
            f"{month_name(summary.month)} {summary.year}",
            expand=False,
        )
        table.add_column("Outcome", style="dim")
        table.add_column("Count", justify="right")

        table.add_row("Written", str(len(summary.written)))
        table.add_row("Skipped", str(len(summary.skipped)))
        table.add_row("No activity", str(len(summary.empty)))
        table.add_row("Failed", str(len(summary.failed)))

        self.console.print(table)

        if self.verbose:
            for path in summary.written:
                self.console.print(f"[green]wrote[/green] {path}")

        for repo, error in summary.failed.items():
            self.print_warning(f"{repo}: {error}")
