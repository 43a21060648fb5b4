"""Domain data models for Jira issues and per-branch lookup results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class IssueModel:
    key: str
    summary: str | None
    status: str | None
    resolution: str | None
    assignee: str | None
    reporter: str | None
    # None when Jira omitted the field entirely, [] when it sent no versions
    fix_versions: list[str] | None
    created: datetime | None
    updated: datetime | None


@dataclass(frozen=True, slots=True)
class IssueFound:
    branch_name: str
    issue: IssueModel


@dataclass(frozen=True, slots=True)
class LookupFailed:
    branch_name: str
    error: str


LookupResult = IssueFound | LookupFailed


def describe_result(result: LookupResult) -> str:
    """One-line console description of a lookup result."""
    if isinstance(result, IssueFound):
        issue = f"{result.issue.key} {result.issue.summary}"
        error = None
    else:
        issue = ""
        error = result.error
    return f"Result [issueKey='{result.branch_name}', issue={issue}, error='{error}']"
