"""CSV report renderer.

The output is a simplified, line-oriented CSV inside a fenced block: free
text has commas replaced with semicolons and newlines with spaces instead
of RFC 4180 quoting. Only the file and label lists are wrapped in quotes.
"""

from collections.abc import Sequence

from ghexport.models.activity import ActivityType, CommitRecord, IssueRecord
from ghexport.output.formatting import (
    CSV_TEXT_LIMIT,
    report_header,
    sanitize_csv_field,
    sanitize_csv_list_item,
    truncate_csv_files,
    truncate_text,
)

COMMIT_COLUMNS = "Date,Owner,Repository,Author,Additions,Deletions,Files,Message"
ISSUE_COLUMNS = (
    "UpdatedAt,CreatedAt,ClosedAt,Assignee,Owner,Repository,Author,Title,State,Labels,Milestone,Body"
)


def _fenced(rows: list[str]) -> str:
    return "```csv\n" + "\n".join(rows) + "\n```\n"


def render_commits_csv(
    commits: Sequence[CommitRecord],
    owner: str,
    repo: str,
    year: int,
    month: int,
) -> str | None:
    """Render commits as a CSV report, or None when there are none."""
    if not commits:
        return None

    rows = [COMMIT_COLUMNS]
    for commit in commits:
        message = truncate_text(sanitize_csv_field(commit.message), CSV_TEXT_LIMIT)
        paths = [sanitize_csv_list_item(path) for path in commit.files]
        files = ",".join(truncate_csv_files(paths))
        rows.append(
            f"{commit.date},{owner},{commit.repo},{sanitize_csv_field(commit.author)},"
            f'{commit.additions},{commit.deletions},"{files}",{message}'
        )

    return report_header(ActivityType.COMMITS, owner, repo, year, month) + _fenced(rows)


def render_issues_csv(
    issues: Sequence[IssueRecord],
    owner: str,
    repo: str,
    year: int,
    month: int,
) -> str | None:
    """Render issues as a CSV report, or None when there are none."""
    if not issues:
        return None

    rows = [ISSUE_COLUMNS]
    for issue in issues:
        body = truncate_text(sanitize_csv_field(issue.body), CSV_TEXT_LIMIT)
        labels = ",".join(sanitize_csv_list_item(label) for label in issue.labels)
        rows.append(
            f"{issue.updated_at},{issue.created_at},{issue.closed_at or ''},{issue.assignee},"
            f"{owner},{issue.repo},{issue.author},{sanitize_csv_field(issue.title)},"
            f'{issue.state.value},"{labels}",{sanitize_csv_field(issue.milestone)},{body}'
        )

    return report_header(ActivityType.ISSUES, owner, repo, year, month) + _fenced(rows)
