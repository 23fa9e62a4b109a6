"""Report requests, month windows and run summaries."""

import calendar
from datetime import datetime, tzinfo
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ghexport.models.activity import ActivityType


class ReportFormat(str, Enum):
    """Output formats for a report."""

    CSV = "csv"
    NL = "nl"  # natural-language Markdown


class ReportRequest(BaseModel):
    """One export run for an owner and month."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    year: int = Field(ge=1)
    month: int = Field(ge=1, le=12)
    omit_repo: str | None = None
    should_replace: bool = False
    format: ReportFormat = ReportFormat.NL


class ActivityWindow(BaseModel):
    """Calendar-month window used for both commit and issue queries.

    ``start`` is the first day at 00:00 and ``end`` the last day at 00:00,
    both in the reporting timezone. Membership is inclusive at both ends.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @classmethod
    def for_month(cls, year: int, month: int, tz: tzinfo) -> "ActivityWindow":
        """Build the window for a year and month."""
        last_day = calendar.monthrange(year, month)[1]
        return cls(
            start=datetime(year, month, 1, tzinfo=tz),
            end=datetime(year, month, last_day, tzinfo=tz),
        )

    def contains(self, moment: datetime) -> bool:
        """Check whether a timestamp falls inside the window."""
        return self.start <= moment <= self.end

    @property
    def since(self) -> str:
        """Window start as an ISO 8601 query parameter."""
        return self.start.isoformat()

    @property
    def until(self) -> str:
        """Window end as an ISO 8601 query parameter."""
        return self.end.isoformat()


class ReportSummary(BaseModel):
    """Outcome of processing every repository for one request."""

    owner: str
    authenticated_owner: str
    activity_type: ActivityType
    year: int
    month: int
    written: list[Path] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    empty: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True when no repository failed."""
        return not self.failed
