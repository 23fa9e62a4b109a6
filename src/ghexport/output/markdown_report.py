"""Natural-language Markdown report renderer."""

from collections.abc import Sequence

from ghexport.models.activity import ActivityType, CommitRecord, IssueRecord, IssueState
from ghexport.output.formatting import (
    MARKDOWN_BODY_LIMIT,
    MARKDOWN_FILE_LIMIT,
    more_files_marker,
    period_label,
    report_header,
    truncate_text,
)
from ghexport.utils.dates import month_name


def render_commits_markdown(
    commits: Sequence[CommitRecord],
    owner: str,
    repo: str,
    year: int,
    month: int,
) -> str | None:
    """Render commits as a Markdown report, or None when there are none."""
    if not commits:
        return None

    period = period_label(owner, repo, year, month)
    total_additions = sum(c.additions for c in commits)
    total_deletions = sum(c.deletions for c in commits)

    lines = [
        report_header(ActivityType.COMMITS, owner, repo, year, month).rstrip("\n"),
        "",
        f"## Summary for {owner}/{repo} in {month_name(month)} {year}",
        f"Total commits in {period}: {len(commits)}",
        f"Total lines changed in {period}: +{total_additions} -{total_deletions}",
        "",
        "## Detailed Commits",
        "",
    ]

    for commit in commits:
        lines.append(f"### Commit on {commit.date} in repository {owner}/{repo} by {commit.author}")
        lines.append(f"- **Message:** {commit.message}")
        lines.append(f"- **Changes:** +{commit.additions} -{commit.deletions}")
        if commit.files:
            lines.append("- **Files Changed:**")
            lines.extend(f"  - {path}" for path in commit.files[:MARKDOWN_FILE_LIMIT])
            if len(commit.files) > MARKDOWN_FILE_LIMIT:
                lines.append(f"  - {more_files_marker(len(commit.files) - MARKDOWN_FILE_LIMIT)}")
        lines.append(f"- **URL:** {commit.url}")
        lines.append("")

    return "\n".join(lines) + "\n"


def render_issues_markdown(
    issues: Sequence[IssueRecord],
    owner: str,
    repo: str,
    year: int,
    month: int,
) -> str | None:
    """Render issues as a Markdown report, or None when there are none."""
    if not issues:
        return None

    period = period_label(owner, repo, year, month)
    open_count = sum(1 for i in issues if i.state == IssueState.OPEN)
    closed_count = sum(1 for i in issues if i.state == IssueState.CLOSED)

    lines = [
        report_header(ActivityType.ISSUES, owner, repo, year, month).rstrip("\n"),
        "",
        f"## Summary for {owner}/{repo} in {month_name(month)} {year}",
        f"Total issues in {period}: {len(issues)}",
        "",
        f"- Open issues: {open_count}",
        f"- Closed issues: {closed_count}",
        "",
        "## Detailed Issues",
        "",
    ]

    for issue in issues:
        lines.append(
            f"### Issue #{issue.number} was {issue.operation.value} on {issue.updated_at} "
            f'in repository {owner}/{repo} with title "{issue.title}"'
        )
        if issue.created_at != issue.updated_at:
            lines.append(f"- **Created on:** {issue.created_at}")
        if issue.closed_at:
            lines.append(f"- **Closed on:** {issue.closed_at}")
        lines.append(f"- **Author:** {issue.author}")
        lines.append(f"- **Assignee:** {issue.assignee}")
        lines.append(f"- **State:** {issue.state.value}")
        if issue.labels:
            lines.append(f"- **Labels:** {', '.join(issue.labels)}")
        if issue.milestone:
            lines.append(f"- **Milestone:** {issue.milestone}")
        if issue.body:
            body = truncate_text(issue.body, MARKDOWN_BODY_LIMIT)
            lines.append("- **Description:**")
            lines.append("  " + body.replace("\n", "\n  "))
        lines.append("")

    return "\n".join(lines) + "\n"
