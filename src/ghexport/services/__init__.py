"""Services for fetching activity and driving report generation."""

from ghexport.services.activity_fetcher import ActivityFetcher
from ghexport.services.github_rest_client import GitHubRestClient
from ghexport.services.report_driver import RepositoryDriver

__all__ = [
    "GitHubRestClient",
    "ActivityFetcher",
    "RepositoryDriver",
]
