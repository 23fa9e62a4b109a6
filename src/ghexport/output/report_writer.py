"""Output paths and file writing for reports."""

from pathlib import Path

from ghexport.models.activity import ActivityType


def report_path(
    development_directory: Path,
    authenticated_owner: str,
    repo: str,
    year: int,
    month: int,
    activity_type: ActivityType,
) -> Path:
    """Deterministic output path for one (owner, repo, month, type) report.

    Month directories are not zero padded:
    ``development/2024/3/acme-widgets-github-commits.md``.
    """
    filename = f"{authenticated_owner}-{repo}-github-{activity_type.value}.md"
    return development_directory / str(year) / str(month) / filename


def write_report(content: str, output_path: Path) -> Path:
    """Write a complete report, replacing any existing file.

    Args:
        content: Fully rendered report
        output_path: Destination file

    Returns:
        Path to written file
    """
    # Ensure parent directory exists
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)

    return output_path
