"""Pick the renderer for an activity type and format."""

from collections.abc import Sequence

from ghexport.models.activity import ActivityType, CommitRecord, IssueRecord
from ghexport.models.request import ReportFormat
from ghexport.output.csv_report import render_commits_csv, render_issues_csv
from ghexport.output.markdown_report import render_commits_markdown, render_issues_markdown

_RENDERERS = {
    (ActivityType.COMMITS, ReportFormat.CSV): render_commits_csv,
    (ActivityType.COMMITS, ReportFormat.NL): render_commits_markdown,
    (ActivityType.ISSUES, ReportFormat.CSV): render_issues_csv,
    (ActivityType.ISSUES, ReportFormat.NL): render_issues_markdown,
}


def render_report(
    activity_type: ActivityType,
    report_format: ReportFormat,
    records: Sequence[CommitRecord] | Sequence[IssueRecord],
    owner: str,
    repo: str,
    year: int,
    month: int,
) -> str | None:
    """Render records in the requested format; None means nothing to write."""
    renderer = _RENDERERS[(activity_type, report_format)]
    return renderer(records, owner, repo, year, month)
