"""High-level entry points shared by the single-month and backfill commands."""

import logging
import re
from typing import Optional

import httpx

from ghexport.activity_config import ActivityConfig
from ghexport.config import Config, get_config
from ghexport.exceptions import AuthenticationError
from ghexport.models.activity import ActivityType
from ghexport.models.request import ActivityWindow, ReportFormat, ReportRequest, ReportSummary
from ghexport.services.activity_fetcher import ActivityFetcher
from ghexport.services.github_rest_client import GitHubRestClient
from ghexport.services.report_driver import RepositoryDriver
from ghexport.utils.dates import get_timezone

logger = logging.getLogger(__name__)

_YEAR_DIR = re.compile(r"^\d{4}$")
_MONTH_DIR = re.compile(r"^\d{1,2}$")


async def generate_report(
    request: ReportRequest,
    activity_type: ActivityType,
    config: Optional[Config] = None,
    activity_config: Optional[ActivityConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ReportSummary:
    """Export one owner's activity for one month.

    Resolves the owner's token, builds a client for it, and runs the
    repository driver over every repository the token's account owns.

    Example usage:
        ```python
        request = ReportRequest(owner="acme", year=2024, month=3)
        summary = await generate_report(request, ActivityType.COMMITS)
        print(f"Wrote {len(summary.written)} reports")
        ```

    Args:
        request: Validated report request
        activity_type: Commits or issues
        config: Process settings (defaults to the global config)
        activity_config: Parsed activity.yaml (loaded from
            ``config.activity_config_path`` when omitted)
        transport: Optional httpx transport, used by tests

    Returns:
        ReportSummary for the run

    Raises:
        ConfigurationError: If activity.yaml is invalid or the owner is unknown
        AuthenticationError: If no token resolves or GitHub rejects it
    """
    config = config or get_config()
    if activity_config is None:
        activity_config = ActivityConfig.load(config.activity_config_path)

    settings = activity_config.owner_settings(activity_type, request.owner)
    token = settings.resolve_token(config.github_token)
    window = ActivityWindow.for_month(request.year, request.month, get_timezone(config.timezone))

    async with GitHubRestClient(token, config=config, transport=transport) as client:
        user = await client.get_authenticated_user()
        authenticated_owner = user.get("login")
        if not authenticated_owner:
            raise AuthenticationError("Could not determine the authenticated GitHub user")

        repos = [r["name"] for r in await client.list_owned_repos()]
        logger.info("Found %d repositories for %s", len(repos), authenticated_owner)

        driver = RepositoryDriver(
            ActivityFetcher(client, window.start.tzinfo),
            config.development_directory,
            settings,
        )
        return await driver.process_repositories(request, activity_type, authenticated_owner, repos, window)


def find_report_months(config: Config) -> list[tuple[int, int]]:
    """List (year, month) pairs that have a directory under ``development/``.

    Year directories are four digits; month directories are one or two
    digits between 1 and 12.
    """
    root = config.development_directory
    if not root.is_dir():
        return []

    months = []
    for year_dir in root.iterdir():
        if not (year_dir.is_dir() and _YEAR_DIR.match(year_dir.name)):
            continue
        for month_dir in year_dir.iterdir():
            if not (month_dir.is_dir() and _MONTH_DIR.match(month_dir.name)):
                continue
            month = int(month_dir.name)
            if 1 <= month <= 12:
                months.append((int(year_dir.name), month))

    return sorted(set(months))


async def run_backfill(
    activity_type: ActivityType,
    config: Optional[Config] = None,
    activity_config: Optional[ActivityConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list[ReportSummary]:
    """Regenerate reports for every configured owner and existing month directory.

    Each (owner, month) run uses Markdown output and replaces existing
    files. A failing run is logged and the scan moves on.

    Returns:
        Summaries of the runs that completed
    """
    config = config or get_config()
    if activity_config is None:
        activity_config = ActivityConfig.load(config.activity_config_path)

    owners = activity_config.owner_names(activity_type)
    summaries = []

    for year, month in find_report_months(config):
        for owner in owners:
            logger.info("Processing %s for %s %d-%d", activity_type.value, owner, year, month)
            request = ReportRequest(
                owner=owner,
                year=year,
                month=month,
                should_replace=True,
                format=ReportFormat.NL,
            )
            try:
                summaries.append(
                    await generate_report(
                        request,
                        activity_type,
                        config=config,
                        activity_config=activity_config,
                        transport=transport,
                    )
                )
            except Exception as e:
                logger.error("Error processing %s for %s %d-%d: %s", activity_type.value, owner, year, month, e)

    logger.info("All missing GitHub %s logs have been generated", activity_type.value)
    return summaries
