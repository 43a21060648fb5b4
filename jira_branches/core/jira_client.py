"""Jira API client wrapper (REST v2 single-issue fetch, basic auth)."""

from __future__ import annotations

from typing import Any

from jira import JIRA

from .config import JIRA_FETCH_FIELDS, JIRA_REST_API_VERSION


class JiraAPI:
    def __init__(self, server: str, username: str, password: str):
        self.server = server.rstrip("/")
        # No server-info probe and no retries: each fetch is one round trip and
        # auth problems surface per ticket rather than at connect time.
        self.client = JIRA(
            basic_auth=(username, password),
            options={"server": self.server, "rest_api_version": JIRA_REST_API_VERSION},
            get_server_info=False,
            max_retries=0,
        )

    def __enter__(self) -> JiraAPI:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        client = getattr(self, "client", None)
        if client is not None:
            client.close()

    def fetch_issue_raw(self, issue_key: str) -> dict[str, Any]:
        """Fetch one issue; ``JIRAError`` and transport errors propagate."""
        issue = self.client.issue(issue_key, fields=",".join(JIRA_FETCH_FIELDS))
        if hasattr(issue, "raw"):
            return issue.raw
        if isinstance(issue, dict):
            return issue
        raise RuntimeError(f"Unexpected issue payload type for {issue_key}: {type(issue)!r}")
