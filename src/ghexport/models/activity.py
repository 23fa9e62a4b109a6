"""Commit and issue records produced by the activity fetchers."""

from datetime import datetime, timezone, tzinfo
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from ghexport.models.operation import IssueOperation, determine_operation
from ghexport.utils.dates import format_display_datetime, parse_datetime

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ActivityType(str, Enum):
    """Kinds of activity that can be exported."""

    COMMITS = "commits"
    ISSUES = "issues"


class IssueState(str, Enum):
    """GitHub issue states."""

    OPEN = "open"
    CLOSED = "closed"


class CommitRecord(BaseModel):
    """A commit with its stats and changed files."""

    model_config = ConfigDict(frozen=True)

    url: str
    date: str  # display string
    timestamp: datetime  # sort key, carried alongside the display string
    repo: str
    message: str
    author: str
    additions: int = 0
    deletions: int = 0
    files: tuple[str, ...] = ()

    @classmethod
    def from_api(
        cls,
        data: dict[str, Any],
        repo: str,
        tz: tzinfo | None = None,
    ) -> "CommitRecord":
        """Create from a GitHub single-commit API response."""
        author_data = (data.get("commit") or {}).get("author") or {}
        stats = data.get("stats") or {}
        timestamp = parse_datetime(author_data.get("date")) or _EPOCH
        if tz is not None:
            timestamp = timestamp.astimezone(tz)
        return cls(
            url=data.get("html_url", ""),
            date=format_display_datetime(timestamp),
            timestamp=timestamp,
            repo=repo,
            message=(data.get("commit") or {}).get("message", ""),
            author=author_data.get("name") or "",
            additions=stats.get("additions") or 0,
            deletions=stats.get("deletions") or 0,
            files=tuple(f.get("filename", "") for f in data.get("files") or []),
        )


class IssueRecord(BaseModel):
    """An issue as it stood during the reported month."""

    model_config = ConfigDict(frozen=True)

    updated_at: str
    created_at: str
    closed_at: str | None = None
    updated_timestamp: datetime
    operation: IssueOperation
    assignee: str = "unassigned"
    repo: str
    title: str
    number: int
    state: IssueState
    author: str = ""
    body: str = ""
    labels: tuple[str, ...] = ()
    milestone: str = ""
    state_reason: str = ""

    @classmethod
    def from_api(
        cls,
        data: dict[str, Any],
        repo: str,
        tz: tzinfo | None = None,
    ) -> "IssueRecord":
        """Create from a GitHub Issues API response, classifying its operation."""

        def local(value: str | None) -> datetime | None:
            parsed = parse_datetime(value)
            if parsed is not None and tz is not None:
                parsed = parsed.astimezone(tz)
            return parsed

        updated = local(data.get("updated_at")) or _EPOCH
        created = local(data.get("created_at")) or _EPOCH
        closed = local(data.get("closed_at"))

        labels = []
        for label in data.get("labels") or []:
            name = label.get("name", "") if isinstance(label, dict) else str(label)
            if name and name not in labels:
                labels.append(name)

        return cls(
            updated_at=format_display_datetime(updated),
            created_at=format_display_datetime(created),
            closed_at=format_display_datetime(closed) if closed else None,
            updated_timestamp=updated,
            operation=determine_operation(updated, created, closed, data.get("state_reason")),
            assignee=(data.get("assignee") or {}).get("login") or "unassigned",
            repo=repo,
            title=data.get("title") or "",
            number=data.get("number", 0),
            state=IssueState(data.get("state", "open")),
            author=(data.get("user") or {}).get("login") or "",
            body=data.get("body") or "",
            labels=tuple(labels),
            milestone=(data.get("milestone") or {}).get("title") or "",
            state_reason=data.get("state_reason") or "",
        )
