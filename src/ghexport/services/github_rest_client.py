"""GitHub REST API client."""

import logging
from typing import Any, Optional

import httpx

from ghexport._version import version as __version__
from ghexport.config import Config, get_config
from ghexport.exceptions import (
    AuthenticationError,
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)
from ghexport.utils.pagination import get_next_page_url

logger = logging.getLogger(__name__)


class GitHubRestClient:
    """Async client for GitHub REST API bound to one owner's token.

    A client is built per owner from the resolved credential and passed to
    the fetchers explicitly. Requests are issued one at a time and are not
    retried.
    """

    def __init__(
        self,
        token: Optional[str],
        config: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.config = config or get_config()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"ghexport/{__version__}",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        endpoint: str,
        **kwargs,
    ) -> httpx.Response:
        """Make an API request and map error responses to exceptions."""
        client = self._get_client()
        response = await client.request(method, endpoint, **kwargs)

        if response.status_code == 401:
            raise AuthenticationError("GitHub rejected the access token (401 Unauthorized)")
        elif response.status_code == 404:
            raise GitHubNotFoundError(
                f"Resource not found: {endpoint}",
                response_body=_json_body(response),
            )
        elif response.status_code == 403:
            body = _json_body(response) or {}
            if "rate limit" in body.get("message", "").lower():
                reset = response.headers.get("x-ratelimit-reset")
                raise GitHubRateLimitError(
                    "Rate limit exceeded",
                    response_body=body,
                    reset_time=float(reset) if reset else None,
                )
            raise GitHubAPIError(
                f"Forbidden: {body.get('message', 'Unknown error')}",
                status_code=403,
                response_body=body,
            )
        elif response.status_code >= 500:
            raise GitHubAPIError(
                f"Server error: {response.status_code}",
                status_code=response.status_code,
            )
        elif response.status_code >= 400:
            body = _json_body(response) or {}
            raise GitHubAPIError(
                f"API error: {body.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_body=body,
            )

        return response

    async def get(self, endpoint: str, **kwargs) -> Any:
        """Make a GET request and return JSON response."""
        response = await self._request("GET", endpoint, **kwargs)
        return response.json()

    async def get_paginated(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        per_page: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """Fetch all pages of a list endpoint by following ``Link`` headers.

        Args:
            endpoint: API endpoint
            params: Query parameters for the first page
            per_page: Items per page, defaults to ``config.default_per_page``

        Returns:
            List of all items across all pages
        """
        all_items: list[dict[str, Any]] = []
        per_page = per_page or self.config.default_per_page
        query = {**(params or {}), "per_page": per_page}
        url: Optional[str] = endpoint

        while url:
            response = await self._request("GET", url, params=query)
            data = response.json()
            if not isinstance(data, list):
                raise GitHubAPIError(f"Expected a list from {endpoint}", status_code=response.status_code)
            all_items.extend(data)

            # Link URLs already carry the query string
            url = get_next_page_url(response.headers.get("Link"))
            query = None

        return all_items

    # Convenience methods for the endpoints the exporter uses

    async def get_authenticated_user(self) -> dict[str, Any]:
        """Get the account the token belongs to."""
        return await self.get("/user")

    async def list_owned_repos(self) -> list[dict[str, Any]]:
        """List repositories owned by the authenticated account."""
        return await self.get_paginated(
            "/user/repos",
            params={"affiliation": "owner", "sort": "full_name"},
        )

    async def list_commits(
        self,
        owner: str,
        repo: str,
        since: str,
        until: str,
        per_page: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """List commit stubs in a date range.

        Pages are requested until one comes back with fewer than
        ``per_page`` entries.
        """
        per_page = per_page or self.config.default_per_page
        all_commits: list[dict[str, Any]] = []
        page = 1

        while True:
            data = await self.get(
                f"/repos/{owner}/{repo}/commits",
                params={
                    "since": since,
                    "until": until,
                    "per_page": per_page,
                    "page": page,
                },
            )
            all_commits.extend(data)
            if len(data) < per_page:
                break
            page += 1

        logger.debug("Listed %d commits in %s/%s over %d page(s)", len(all_commits), owner, repo, page)
        return all_commits

    async def get_commit(self, owner: str, repo: str, sha: str) -> dict[str, Any]:
        """Get a single commit including stats and changed files."""
        return await self.get(f"/repos/{owner}/{repo}/commits/{sha}")

    async def list_issues(
        self,
        owner: str,
        repo: str,
        since: str,
    ) -> list[dict[str, Any]]:
        """List issues in any state updated at or after ``since``."""
        return await self.get_paginated(
            f"/repos/{owner}/{repo}/issues",
            params={"state": "all", "since": since, "sort": "updated", "direction": "asc"},
        )


def _json_body(response: httpx.Response) -> Optional[dict]:
    """Decode an error body if there is one."""
    if not response.content:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None
