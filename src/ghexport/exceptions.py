"""Exceptions for ghexport.

Exception Hierarchy:
    GhExportError (base)
    ├── GitHubAPIError (HTTP API errors with status codes)
    │   ├── GitHubRateLimitError (403 rate limit from API response)
    │   └── GitHubNotFoundError (404 not found)
    ├── AuthenticationError (token missing or rejected)
    └── ConfigurationError (activity.yaml missing, malformed, or owner unknown)

Command-line usage errors are reported by typer before any of these can occur.
"""

__all__ = [
    "GhExportError",
    "GitHubAPIError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
    "AuthenticationError",
    "ConfigurationError",
]


class GhExportError(Exception):
    """Base exception for all ghexport errors."""

    pass


class GitHubAPIError(GhExportError):
    """Base exception for GitHub API errors (HTTP responses with error status codes)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub API returns a rate limit error (HTTP 403).

    Nothing waits for the limit to reset; the error propagates to the
    repository driver, which records the repository as failed.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = 403,
        response_body: dict | None = None,
        reset_time: float | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
        self.reset_time = reset_time


class GitHubNotFoundError(GitHubAPIError):
    """Raised when a GitHub resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class AuthenticationError(GhExportError):
    """Raised when no token can be resolved or GitHub rejects it."""

    pass


class ConfigurationError(GhExportError):
    """Raised when the activity configuration is missing or malformed."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
