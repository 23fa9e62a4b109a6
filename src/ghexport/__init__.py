"""ghexport - Export GitHub activity into monthly reports.

Commits and issues for every repository of a configured owner are written
as Markdown or CSV files under ``activity/development/<year>/<month>/``.

Example usage:
    ```python
    import asyncio

    from ghexport import ActivityType, ReportRequest, generate_report

    request = ReportRequest(owner="acme", year=2024, month=3)
    summary = asyncio.run(generate_report(request, ActivityType.COMMITS))
    print(f"Reports written: {len(summary.written)}")
    ```
"""

from ghexport._version import version as __version__
from ghexport.activity_config import ActivityConfig, OwnerSettings
from ghexport.config import Config
from ghexport.exceptions import (
    AuthenticationError,
    ConfigurationError,
    GhExportError,
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)
from ghexport.exporter import generate_report, run_backfill
from ghexport.models import (
    ActivityType,
    ActivityWindow,
    CommitRecord,
    IssueOperation,
    IssueRecord,
    IssueState,
    ReportFormat,
    ReportRequest,
    ReportSummary,
    determine_operation,
)

__all__ = [
    "__version__",
    # Entry points
    "generate_report",
    "run_backfill",
    # Configuration
    "Config",
    "ActivityConfig",
    "OwnerSettings",
    # Exceptions
    "GhExportError",
    "GitHubAPIError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
    "AuthenticationError",
    "ConfigurationError",
    # Models
    "ActivityType",
    "ActivityWindow",
    "CommitRecord",
    "IssueOperation",
    "IssueRecord",
    "IssueState",
    "ReportFormat",
    "ReportRequest",
    "ReportSummary",
    "determine_operation",
]
