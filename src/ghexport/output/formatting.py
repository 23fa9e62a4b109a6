"""Shared text rules for the CSV and Markdown renderers."""

from collections.abc import Sequence

from ghexport.models.activity import ActivityType
from ghexport.utils.dates import month_name

CSV_TEXT_LIMIT = 1024
CSV_FILE_LIMIT = 50
MARKDOWN_BODY_LIMIT = 500
MARKDOWN_FILE_LIMIT = 10

ELLIPSIS = "..."


def report_header(activity_type: ActivityType, owner: str, repo: str, year: int, month: int) -> str:
    """Top-level heading shared by both formats."""
    noun = activity_type.value.capitalize()
    return f"# GitHub {noun} in {repo} owned by {owner} for {month_name(month)} {year}\n\n"


def period_label(owner: str, repo: str, year: int, month: int) -> str:
    """``owner/repo in Month Year`` fragment used in summary lines."""
    return f"{owner}/{repo} for {month_name(month)} {year}"


def sanitize_csv_field(value: str) -> str:
    """Make free text safe for the line-oriented CSV: no commas, no newlines."""
    return value.replace(",", ";").replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def sanitize_csv_list_item(value: str) -> str:
    """Sanitize an entry of a quoted list, which also must not close the quotes."""
    return sanitize_csv_field(value).replace('"', "'")


def truncate_text(value: str, limit: int) -> str:
    """Cut text longer than ``limit`` to ``limit`` characters ending in an ellipsis."""
    if len(value) <= limit:
        return value
    return value[: limit - len(ELLIPSIS)] + ELLIPSIS


def more_files_marker(count: int) -> str:
    return f"...and {count} more files"


def truncate_csv_files(files: Sequence[str]) -> list[str]:
    """Keep at most ``CSV_FILE_LIMIT`` entries, the last one being a marker."""
    if len(files) <= CSV_FILE_LIMIT:
        return list(files)
    kept = CSV_FILE_LIMIT - 1
    return [*files[:kept], more_files_marker(len(files) - kept)]
