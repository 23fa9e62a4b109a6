"""Issue lifecycle classification."""

from datetime import datetime, timedelta
from enum import Enum

from ghexport.utils.dates import in_same_month


class IssueOperation(str, Enum):
    """What happened to an issue during the reported month."""

    CREATED = "Created"
    CREATED_AND_CLOSED = "Created and Closed"
    CREATED_AND_REOPENED = "Created and Reopened"
    CREATED_AND_COMPLETED = "Created and Completed"
    CREATED_AND_IGNORED = "Created and Ignored"
    UPDATED = "Updated"
    UPDATED_NEW_ISSUE = "Updated a New Issue"
    CLOSED = "Closed"
    REOPENED = "Reopened"
    COMPLETED = "Completed"
    IGNORED = "Ignored"


# state_reason -> (closed label, created-and-closed label)
_CLOSE_OPERATIONS: dict[str, tuple[IssueOperation, IssueOperation]] = {
    "reopened": (IssueOperation.REOPENED, IssueOperation.CREATED_AND_REOPENED),
    "completed": (IssueOperation.COMPLETED, IssueOperation.CREATED_AND_COMPLETED),
    "not_planned": (IssueOperation.IGNORED, IssueOperation.CREATED_AND_IGNORED),
}

_DEFAULT_CLOSE = (IssueOperation.CLOSED, IssueOperation.CREATED_AND_CLOSED)


def determine_operation(
    updated_at: datetime,
    created_at: datetime,
    closed_at: datetime | None,
    state_reason: str | None,
) -> IssueOperation:
    """Classify an issue from its timestamps and close reason.

    Every combination of inputs maps to exactly one label. Month
    comparisons use the timestamps as given, so callers convert them to
    the reporting timezone first.

    Args:
        updated_at: Last update time
        created_at: Creation time
        closed_at: Close time, or None for issues that are not closed
        state_reason: GitHub ``state_reason`` ("completed", "not_planned",
            "reopened" or None)

    Returns:
        The IssueOperation for the issue
    """
    if closed_at is not None:
        closed, created_and_closed = _CLOSE_OPERATIONS.get(state_reason or "", _DEFAULT_CLOSE)
        if in_same_month(created_at, closed_at):
            return created_and_closed
        return closed

    if in_same_month(created_at, updated_at):
        if created_at == updated_at:
            return IssueOperation.CREATED
        if updated_at - created_at >= timedelta(days=1):
            return IssueOperation.UPDATED_NEW_ISSUE
        return IssueOperation.CREATED

    if created_at < updated_at:
        return IssueOperation.UPDATED

    return IssueOperation.UPDATED
