"""Mapping raw Jira issue JSON into IssueModel instances."""

from __future__ import annotations

from typing import Any

import pandas as pd

from .models import IssueModel


def user_display_name(user: dict[str, Any] | None) -> str | None:
    """Display name of a Jira user, falling back to the account name."""
    if not user:
        return None
    return user.get("displayName") or user.get("name")


def _named(value: dict[str, Any] | None) -> str | None:
    if not value:
        return None
    return value.get("name")


def parse_dt(val):
    if not val:
        return None
    ts = pd.to_datetime(val, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts.to_pydatetime()


def map_issue(raw: dict[str, Any]) -> IssueModel:
    fields = raw.get("fields", {}) or {}

    fix_versions = fields.get("fixVersions")
    if fix_versions is not None:
        fix_versions = [v.get("name") for v in fix_versions if isinstance(v, dict) and v.get("name")]

    return IssueModel(
        key=raw.get("key"),
        summary=fields.get("summary"),
        status=_named(fields.get("status")),
        resolution=_named(fields.get("resolution")),
        assignee=user_display_name(fields.get("assignee")),
        reporter=user_display_name(fields.get("reporter")),
        fix_versions=fix_versions,
        created=parse_dt(fields.get("created")),
        updated=parse_dt(fields.get("updated")),
    )
