"""Shared pytest setup for the branch report suite.

Puts the project root on sys.path so `jira_branches` imports without an editable
install, and provides `make_raw_issue`, a factory for REST v2 issue payloads
whose fields can be overridden per test.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def make_raw_issue():
    """Factory for minimal raw Jira issue payloads (REST v2 shape)."""

    def _make(key="IGNITE-1", **overrides):
        fields = {
            "summary": f"Summary of {key}",
            "status": {"name": "Open"},
            "resolution": None,
            "assignee": {"displayName": "Alice", "name": "alice"},
            "reporter": {"displayName": "Bob", "name": "bob"},
            "fixVersions": [{"name": "2.1"}],
            "created": "2024-09-01T10:00:00.000+0000",
            "updated": "2024-09-02T10:00:00.000+0000",
        }
        fields.update(overrides)
        return {"key": key, "fields": fields}

    return _make
