"""Tests for data models."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from conftest import commit_detail, issue_payload
from ghexport.models.activity import CommitRecord, IssueRecord, IssueState
from ghexport.models.operation import IssueOperation
from ghexport.models.request import ActivityWindow, ReportFormat, ReportRequest
from ghexport.utils.dates import format_display_datetime, get_timezone


class TestCommitRecord:
    """Tests for CommitRecord model."""

    def test_from_api(self):
        """Test creating CommitRecord from a single-commit response."""
        data = commit_detail(
            "abc123",
            "2024-03-05T14:07:00Z",
            message="Add widget\n\nLonger description",
            additions=10,
            deletions=2,
            files=["src/widget.py", "tests/test_widget.py"],
        )

        commit = CommitRecord.from_api(data, "widgets")

        assert commit.url == "https://github.com/acme/widgets/commit/abc123"
        assert commit.date == "03/05/2024 2:07 PM"
        assert commit.timestamp == datetime(2024, 3, 5, 14, 7, tzinfo=timezone.utc)
        assert commit.message == "Add widget\n\nLonger description"
        assert commit.author == "Ada"
        assert commit.additions == 10
        assert commit.deletions == 2
        assert commit.files == ("src/widget.py", "tests/test_widget.py")

    def test_from_api_missing_fields(self):
        """Test creating CommitRecord when stats, files and author are absent."""
        data = {"html_url": "https://example.test/c", "commit": {"message": "x", "author": None}}

        commit = CommitRecord.from_api(data, "widgets")

        assert commit.author == ""
        assert commit.additions == 0
        assert commit.deletions == 0
        assert commit.files == ()

    def test_is_immutable(self):
        """Test that records cannot be modified after construction."""
        commit = CommitRecord.from_api(commit_detail("a", "2024-03-05T14:07:00Z"), "widgets")
        with pytest.raises(ValidationError):
            commit.message = "changed"

    def test_display_uses_timezone(self):
        """Test that the display date is rendered in the given timezone."""
        tz = timezone(timedelta(hours=-5))
        commit = CommitRecord.from_api(commit_detail("a", "2024-03-05T02:30:00Z"), "widgets", tz)
        assert commit.date == "03/04/2024 9:30 PM"


class TestIssueRecord:
    """Tests for IssueRecord model."""

    def test_from_api(self):
        """Test creating IssueRecord from an Issues API entry."""
        data = issue_payload(
            42,
            updated_at="2024-03-10T09:05:00Z",
            created_at="2024-02-01T12:00:00Z",
            closed_at="2024-03-10T09:05:00Z",
            state="closed",
            state_reason="completed",
            labels=["bug", "ui", "bug"],
        )
        data["assignee"] = {"login": "grace"}
        data["milestone"] = {"title": "v1.0"}

        issue = IssueRecord.from_api(data, "widgets")

        assert issue.number == 42
        assert issue.updated_at == "03/10/2024 9:05 AM"
        assert issue.created_at == "02/01/2024 12:00 PM"
        assert issue.closed_at == "03/10/2024 9:05 AM"
        assert issue.operation is IssueOperation.COMPLETED
        assert issue.state is IssueState.CLOSED
        assert issue.assignee == "grace"
        assert issue.milestone == "v1.0"
        assert issue.labels == ("bug", "ui")
        assert issue.state_reason == "completed"

    def test_from_api_defaults(self):
        """Test defaults for unassigned issues without body or milestone."""
        data = issue_payload(7, updated_at="2024-03-10T09:05:00Z", body=None)

        issue = IssueRecord.from_api(data, "widgets")

        assert issue.assignee == "unassigned"
        assert issue.body == ""
        assert issue.milestone == ""
        assert issue.closed_at is None
        assert issue.operation is IssueOperation.CREATED


class TestReportRequest:
    """Tests for ReportRequest validation."""

    def test_defaults(self):
        """Test that format defaults to natural language and replace is off."""
        request = ReportRequest(owner="acme", year=2024, month=3)
        assert request.format is ReportFormat.NL
        assert request.should_replace is False
        assert request.omit_repo is None

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_month_out_of_range(self, month):
        """Test that months outside 1-12 are rejected."""
        with pytest.raises(ValidationError):
            ReportRequest(owner="acme", year=2024, month=month)

    def test_year_must_be_positive(self):
        """Test that year 0 is rejected."""
        with pytest.raises(ValidationError):
            ReportRequest(owner="acme", year=0, month=1)


class TestActivityWindow:
    """Tests for month windows."""

    def test_for_month(self):
        """Test window bounds for March 2024."""
        window = ActivityWindow.for_month(2024, 3, timezone.utc)
        assert window.start == datetime(2024, 3, 1, tzinfo=timezone.utc)
        assert window.end == datetime(2024, 3, 31, tzinfo=timezone.utc)

    def test_leap_february(self):
        """Test that February of a leap year ends on the 29th."""
        window = ActivityWindow.for_month(2024, 2, timezone.utc)
        assert window.end.day == 29

    def test_december(self):
        """Test that December does not roll into the next year."""
        window = ActivityWindow.for_month(2023, 12, timezone.utc)
        assert window.end == datetime(2023, 12, 31, tzinfo=timezone.utc)

    def test_contains_boundaries(self):
        """Test inclusive membership at both ends of the window."""
        window = ActivityWindow.for_month(2024, 3, timezone.utc)
        assert window.contains(datetime(2024, 3, 1, tzinfo=timezone.utc))
        assert window.contains(datetime(2024, 3, 31, tzinfo=timezone.utc))
        assert not window.contains(datetime(2024, 2, 29, 23, 59, 59, tzinfo=timezone.utc))
        assert not window.contains(datetime(2024, 3, 31, 0, 0, 1, tzinfo=timezone.utc))

    def test_query_parameters(self):
        """Test ISO 8601 since/until strings."""
        window = ActivityWindow.for_month(2024, 3, get_timezone("UTC"))
        assert window.since == "2024-03-01T00:00:00+00:00"
        assert window.until == "2024-03-31T00:00:00+00:00"


class TestDisplayFormat:
    """Tests for the display date format."""

    @pytest.mark.parametrize(
        "moment,expected",
        [
            (datetime(2024, 3, 5, 0, 7), "03/05/2024 12:07 AM"),
            (datetime(2024, 3, 5, 12, 0), "03/05/2024 12:00 PM"),
            (datetime(2024, 11, 25, 23, 59), "11/25/2024 11:59 PM"),
        ],
    )
    def test_format(self, moment, expected):
        """Test 12-hour formatting around midnight and noon."""
        assert format_display_datetime(moment) == expected
