"""Single-key issue lookup, classifying the outcome as IssueFound or LookupFailed."""

from __future__ import annotations

import logging

from jira import JIRAError
from requests import RequestException

from .jira_client import JiraAPI
from .mappers import map_issue
from .models import IssueFound, LookupFailed, LookupResult

logger = logging.getLogger(__name__)


def error_message(exc: Exception) -> str:
    if isinstance(exc, JIRAError):
        return exc.text or f"HTTP {exc.status_code}"
    return str(exc)


class IssueLookup:
    def __init__(self, api: JiraAPI):
        self.api = api

    def lookup(self, identifier: str) -> LookupResult:
        """Fetch ``identifier`` once. Failures are returned, never raised or retried."""
        logger.debug("Looking up %s", identifier)
        try:
            raw = self.api.fetch_issue_raw(identifier)
        except (JIRAError, RequestException) as exc:
            msg = error_message(exc)
            logger.warning("Lookup failed for %s: %s", identifier, msg)
            return LookupFailed(identifier, msg)
        return IssueFound(identifier, map_issue(raw))
