"""Tests for issue operation classification."""

from datetime import datetime, timezone

import pytest

from ghexport.models.operation import IssueOperation, determine_operation


def dt(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


CLOSED_CASES = [
    # (state_reason, created, closed, expected)
    ("reopened", "2024-03-02T10:00", "2024-03-20T10:00", IssueOperation.CREATED_AND_REOPENED),
    ("reopened", "2024-01-02T10:00", "2024-03-20T10:00", IssueOperation.REOPENED),
    ("completed", "2024-03-02T10:00", "2024-03-20T10:00", IssueOperation.CREATED_AND_COMPLETED),
    ("completed", "2023-03-02T10:00", "2024-03-20T10:00", IssueOperation.COMPLETED),
    ("not_planned", "2024-03-02T10:00", "2024-03-02T11:00", IssueOperation.CREATED_AND_IGNORED),
    ("not_planned", "2024-02-29T10:00", "2024-03-01T10:00", IssueOperation.IGNORED),
    (None, "2024-03-02T10:00", "2024-03-20T10:00", IssueOperation.CREATED_AND_CLOSED),
    (None, "2024-02-02T10:00", "2024-03-20T10:00", IssueOperation.CLOSED),
    ("duplicate", "2024-02-02T10:00", "2024-03-20T10:00", IssueOperation.CLOSED),
]

OPEN_CASES = [
    # (created, updated, expected)
    ("2024-03-02T10:00", "2024-03-02T10:00", IssueOperation.CREATED),
    ("2024-03-02T10:00", "2024-03-03T10:00", IssueOperation.UPDATED_NEW_ISSUE),
    ("2024-03-02T10:00", "2024-03-25T08:00", IssueOperation.UPDATED_NEW_ISSUE),
    ("2024-03-02T10:00", "2024-03-03T09:59", IssueOperation.CREATED),
    ("2024-02-28T10:00", "2024-03-01T10:00", IssueOperation.UPDATED),
    ("2023-03-02T10:00", "2024-03-02T10:00", IssueOperation.UPDATED),
    ("2024-04-02T10:00", "2024-03-02T10:00", IssueOperation.UPDATED),
]


class TestClosedIssues:
    """Tests for issues with a close timestamp."""

    @pytest.mark.parametrize("state_reason,created,closed,expected", CLOSED_CASES)
    def test_close_reason_and_month(self, state_reason, created, closed, expected):
        """Close reason picks the label; same-month creation adds the prefix."""
        result = determine_operation(dt("2024-03-28T00:00"), dt(created), dt(closed), state_reason)
        assert result is expected

    def test_closed_at_wins_over_update_times(self):
        """A closed issue is never labelled Created or Updated."""
        result = determine_operation(dt("2024-03-02T10:00"), dt("2024-03-02T10:00"), dt("2024-03-02T10:00"), None)
        assert result is IssueOperation.CREATED_AND_CLOSED


class TestOpenIssues:
    """Tests for issues without a close timestamp."""

    @pytest.mark.parametrize("created,updated,expected", OPEN_CASES)
    def test_created_and_updated(self, created, updated, expected):
        """Creation and update times decide between Created and Updated labels."""
        assert determine_operation(dt(updated), dt(created), None, None) is expected

    def test_reopened_reason_without_close_is_ignored(self):
        """An open issue that was reopened is classified from its timestamps."""
        result = determine_operation(dt("2024-03-02T10:00"), dt("2024-01-02T10:00"), None, "reopened")
        assert result is IssueOperation.UPDATED


class TestTotality:
    """Every branch yields exactly one defined label."""

    @pytest.mark.parametrize("closed", [True, False])
    @pytest.mark.parametrize("state_reason", [None, "completed", "not_planned", "reopened", "other"])
    @pytest.mark.parametrize("created", ["2024-03-02T10:00", "2024-02-02T10:00"])
    @pytest.mark.parametrize("updated", ["2024-03-02T10:00", "2024-03-02T20:00", "2024-03-09T10:00"])
    def test_always_returns_a_label(self, closed, state_reason, created, updated):
        """No input combination raises or returns something unexpected."""
        closed_at = dt("2024-03-10T10:00") if closed else None
        result = determine_operation(dt(updated), dt(created), closed_at, state_reason)
        assert isinstance(result, IssueOperation)
        assert result.value in {op.value for op in IssueOperation}
