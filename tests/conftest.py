"""Pytest configuration and fixtures."""

from datetime import datetime
from pathlib import Path
from typing import Any

import httpx
import pytest

from ghexport.activity_config import ActivityConfig
from ghexport.config import Config, set_config


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Create a test configuration rooted in a temporary directory."""
    config = Config(
        github_token=None,
        github_api_url="https://api.github.com",
        config_directory=tmp_path,
        activity_directory=tmp_path / "activity",
    )
    set_config(config)
    return config


@pytest.fixture
def activity_config() -> ActivityConfig:
    """Activity configuration with one owner for both activity types."""
    return ActivityConfig(
        commits={"acme": {"token": "ghp_commits"}},
        issues={"acme": {"token": "ghp_issues"}},
    )


def commit_detail(
    sha: str,
    date: str,
    message: str = "Change",
    author: str = "Ada",
    additions: int = 1,
    deletions: int = 0,
    files: list[str] | None = None,
    repo: str = "widgets",
) -> dict[str, Any]:
    """Build a single-commit API payload."""
    return {
        "sha": sha,
        "html_url": f"https://github.com/acme/{repo}/commit/{sha}",
        "commit": {"message": message, "author": {"name": author, "date": date}},
        "stats": {"additions": additions, "deletions": deletions, "total": additions + deletions},
        "files": [{"filename": f} for f in (files or [])],
    }


def issue_payload(
    number: int,
    updated_at: str,
    created_at: str | None = None,
    closed_at: str | None = None,
    state: str = "open",
    state_reason: str | None = None,
    title: str = "Bug",
    body: str | None = "Something broke",
    labels: list[str] | None = None,
) -> dict[str, Any]:
    """Build an Issues API list entry."""
    return {
        "number": number,
        "title": title,
        "state": state,
        "state_reason": state_reason,
        "user": {"login": "ada"},
        "assignee": None,
        "body": body,
        "labels": [{"name": name} for name in (labels or [])],
        "milestone": None,
        "created_at": created_at or updated_at,
        "updated_at": updated_at,
        "closed_at": closed_at,
    }


class FakeGitHub:
    """In-memory GitHub REST API served through ``httpx.MockTransport``."""

    def __init__(self, login: str = "acme"):
        self.login = login
        self.repos: list[str] = []
        self.commits: dict[str, list[dict[str, Any]]] = {}
        self.issues: dict[str, list[dict[str, Any]]] = {}
        self.failing_commits: set[str] = set()
        self.failing_repos: set[str] = set()
        self.issue_page_size = 100
        self.requests: list[httpx.Request] = []

    def add_repo(self, name: str, commits=None, issues=None) -> None:
        self.repos.append(name)
        self.commits[name] = list(commits or [])
        self.issues[name] = list(issues or [])

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        params = request.url.params
        parts = path.strip("/").split("/")

        if path == "/user":
            return httpx.Response(200, json={"login": self.login})
        if path == "/user/repos":
            return httpx.Response(200, json=[{"name": name} for name in self.repos])

        if len(parts) >= 4 and parts[0] == "repos":
            repo = parts[2]
            if repo in self.failing_repos:
                return httpx.Response(500, json={"message": "boom"})
            if parts[3] == "commits" and len(parts) == 4:
                return self._list_commits(repo, params)
            if parts[3] == "commits" and len(parts) == 5:
                return self._get_commit(repo, parts[4])
            if parts[3] == "issues":
                return self._list_issues(request, repo, params)

        return httpx.Response(404, json={"message": "Not Found"})

    def _list_commits(self, repo: str, params) -> httpx.Response:
        since = datetime.fromisoformat(params["since"])
        until = datetime.fromisoformat(params["until"])
        matching = [
            c
            for c in self.commits.get(repo, [])
            if since <= datetime.fromisoformat(c["commit"]["author"]["date"].replace("Z", "+00:00")) <= until
        ]
        per_page = int(params.get("per_page", 30))
        page = int(params.get("page", 1))
        chunk = matching[(page - 1) * per_page : page * per_page]
        return httpx.Response(200, json=[{"sha": c["sha"]} for c in chunk])

    def _get_commit(self, repo: str, sha: str) -> httpx.Response:
        if sha in self.failing_commits:
            return httpx.Response(500, json={"message": "detail failed"})
        for commit in self.commits.get(repo, []):
            if commit["sha"] == sha:
                return httpx.Response(200, json=commit)
        return httpx.Response(404, json={"message": "Not Found"})

    def _list_issues(self, request: httpx.Request, repo: str, params) -> httpx.Response:
        since = datetime.fromisoformat(params["since"])
        matching = [
            i
            for i in self.issues.get(repo, [])
            if datetime.fromisoformat(i["updated_at"].replace("Z", "+00:00")) >= since
        ]
        page = int(params.get("page", 1))
        size = self.issue_page_size
        chunk = matching[(page - 1) * size : page * size]
        headers = {}
        if page * size < len(matching):
            next_url = request.url.copy_set_param("page", str(page + 1))
            headers["Link"] = f'<{next_url}>; rel="next"'
        return httpx.Response(200, json=chunk, headers=headers)


@pytest.fixture
def fake_github() -> FakeGitHub:
    """Fake GitHub API with no repositories."""
    return FakeGitHub()
