"""Report renderers and writers for ghexport."""

from ghexport.output.console import Console
from ghexport.output.csv_report import render_commits_csv, render_issues_csv
from ghexport.output.markdown_report import render_commits_markdown, render_issues_markdown
from ghexport.output.renderer import render_report
from ghexport.output.report_writer import report_path, write_report

__all__ = [
    "Console",
    "render_commits_csv",
    "render_issues_csv",
    "render_commits_markdown",
    "render_issues_markdown",
    "render_report",
    "report_path",
    "write_report",
]
