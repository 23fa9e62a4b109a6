"""Commit and issue fetcher service."""

import logging
from datetime import tzinfo

from ghexport.models.activity import CommitRecord, IssueRecord
from ghexport.models.request import ActivityWindow
from ghexport.services.github_rest_client import GitHubRestClient
from ghexport.utils.dates import parse_datetime

logger = logging.getLogger(__name__)


class ActivityFetcher:
    """Collects one repository's commits or issues for a month window."""

    def __init__(self, rest_client: GitHubRestClient, tz: tzinfo):
        self.rest_client = rest_client
        self.tz = tz

    async def fetch_commits(
        self,
        owner: str,
        repo: str,
        window: ActivityWindow,
    ) -> list[CommitRecord]:
        """Collect commits in the window with stats and changed files.

        A commit whose detail request fails is logged and left out. A
        failure while listing commits propagates to the caller.

        Args:
            owner: Repository owner
            repo: Repository name
            window: Month window

        Returns:
            CommitRecords sorted by commit time, oldest first
        """
        logger.debug("Fetching commits for %s/%s between %s and %s", owner, repo, window.since, window.until)

        stubs = await self.rest_client.list_commits(owner, repo, window.since, window.until)

        commits = []
        for stub in stubs:
            sha = stub.get("sha", "")
            try:
                detail = await self.rest_client.get_commit(owner, repo, sha)
            except Exception as e:
                logger.error("Error fetching details for commit %s, skipping... %s", sha, e)
                continue
            commits.append(CommitRecord.from_api(detail, repo, self.tz))

        commits.sort(key=lambda c: c.timestamp)
        logger.debug("Found %d commits in %s/%s", len(commits), owner, repo)

        return commits

    async def fetch_issues(
        self,
        owner: str,
        repo: str,
        window: ActivityWindow,
    ) -> list[IssueRecord]:
        """Collect issues whose last update falls inside the window.

        The API's ``since`` filter only bounds the start, so ``updated_at``
        is checked against both ends of the window here.

        Args:
            owner: Repository owner
            repo: Repository name
            window: Month window

        Returns:
            IssueRecords sorted by ``updated_at``, oldest first
        """
        logger.debug("Fetching issues for %s/%s since %s", owner, repo, window.since)

        issues_data = await self.rest_client.list_issues(owner, repo, window.since)

        in_window = []
        for data in issues_data:
            updated_at = parse_datetime(data.get("updated_at"))
            if updated_at is not None and window.contains(updated_at):
                in_window.append((updated_at, data))

        in_window.sort(key=lambda item: item[0])
        issues = [IssueRecord.from_api(data, repo, self.tz) for _, data in in_window]

        logger.debug("Found %d issues in %s/%s", len(issues), owner, repo)

        return issues
