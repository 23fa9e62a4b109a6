"""Repository driver: skip rules, fetch, render and write per repository."""

import logging
from pathlib import Path

from ghexport.activity_config import OwnerSettings
from ghexport.models.activity import ActivityType
from ghexport.models.request import ActivityWindow, ReportRequest, ReportSummary
from ghexport.output.renderer import render_report
from ghexport.output.report_writer import report_path, write_report
from ghexport.services.activity_fetcher import ActivityFetcher

logger = logging.getLogger(__name__)


class RepositoryDriver:
    """Produces one report file per repository of the authenticated owner."""

    def __init__(
        self,
        fetcher: ActivityFetcher,
        development_directory: Path,
        owner_settings: OwnerSettings,
    ):
        self.fetcher = fetcher
        self.development_directory = development_directory
        self.owner_settings = owner_settings

    def skip_reason(
        self,
        request: ReportRequest,
        authenticated_owner: str,
        repo: str,
        output_path: Path,
    ) -> str | None:
        """Return why a repository is skipped, or None to process it."""
        if output_path.exists():
            if not request.should_replace:
                logger.warning("Skipping existing file %s. Use --replace to overwrite.", output_path)
                return "exists"
            logger.info("Replacing existing file %s as requested by --replace flag", output_path)

        if request.omit_repo and repo == request.omit_repo:
            logger.debug("Skipping repository %s/%s as requested by --omit flag", authenticated_owner, repo)
            return "omitted"

        if not self.owner_settings.should_generate(repo, request.year, request.month):
            logger.debug("Skipping repository %s/%s based on activity configuration", authenticated_owner, repo)
            return "excluded"

        return None

    async def generate(
        self,
        activity_type: ActivityType,
        request: ReportRequest,
        owner: str,
        repo: str,
        window: ActivityWindow,
    ) -> str | None:
        """Fetch and render one repository's report."""
        if activity_type == ActivityType.COMMITS:
            records = await self.fetcher.fetch_commits(owner, repo, window)
        else:
            records = await self.fetcher.fetch_issues(owner, repo, window)

        if not records:
            logger.debug("No activity found for %s/%s in %d-%02d", owner, repo, request.year, request.month)

        return render_report(activity_type, request.format, records, owner, repo, request.year, request.month)

    async def process_repositories(
        self,
        request: ReportRequest,
        activity_type: ActivityType,
        authenticated_owner: str,
        repos: list[str],
        window: ActivityWindow,
    ) -> ReportSummary:
        """Process repositories one at a time.

        A failure in one repository is logged and recorded; the remaining
        repositories are still processed.

        Args:
            request: Validated report request
            activity_type: Commits or issues
            authenticated_owner: Login of the token's account
            repos: Repository names to consider
            window: Month window for the request

        Returns:
            ReportSummary describing every repository's outcome
        """
        summary = ReportSummary(
            owner=request.owner,
            authenticated_owner=authenticated_owner,
            activity_type=activity_type,
            year=request.year,
            month=request.month,
        )

        for repo in repos:
            output_path = report_path(
                self.development_directory,
                authenticated_owner,
                repo,
                request.year,
                request.month,
                activity_type,
            )

            if self.skip_reason(request, authenticated_owner, repo, output_path):
                summary.skipped.append(repo)
                continue

            logger.info(
                "Generating monthly report for %s/%s in %d-%d",
                authenticated_owner,
                repo,
                request.year,
                request.month,
            )

            try:
                report = await self.generate(activity_type, request, authenticated_owner, repo, window)
                if report is None:
                    summary.empty.append(repo)
                    continue

                logger.info("Writing report to %s", output_path)
                summary.written.append(write_report(report, output_path))
            except Exception as e:
                logger.error("Error generating %s report for %s/%s: %s", activity_type.value, authenticated_owner, repo, e)
                summary.failed[repo] = str(e)

        return summary
