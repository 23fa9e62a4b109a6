"""Data models for ghexport."""

from ghexport.models.activity import (
    ActivityType,
    CommitRecord,
    IssueRecord,
    IssueState,
)
from ghexport.models.operation import IssueOperation, determine_operation
from ghexport.models.request import (
    ActivityWindow,
    ReportFormat,
    ReportRequest,
    ReportSummary,
)

__all__ = [
    "ActivityType",
    "ActivityWindow",
    "CommitRecord",
    "IssueOperation",
    "IssueRecord",
    "IssueState",
    "ReportFormat",
    "ReportRequest",
    "ReportSummary",
    "determine_operation",
]
