"""Branch processing: prefix filtering, ticket-number fallback and the closed-only filter."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from .config import CLOSED_STATUS, TICKET_NUMBER_PATTERN
from .lookup import IssueLookup
from .models import IssueFound, LookupResult

TICKET_NUMBER_RE = re.compile(TICKET_NUMBER_PATTERN)


def clean_branch_name(line: str) -> str:
    """Drop escape backslashes and surrounding whitespace from a raw script line."""
    return line.replace("\\", "").strip()


def extract_ticket_number(branch_name: str) -> str | None:
    """Return the first 4 or 5 digit run in ``branch_name``.

    The 5-digit alternative is tried first at each position, so a longer run
    of digits resolves to its first five.

    >>> extract_ticket_number("IGNITE-12345-fix")
    '12345'
    >>> extract_ticket_number("IGNITE-999-old") is None
    True
    """
    m = TICKET_NUMBER_RE.search(branch_name)
    return m.group(0) if m else None


def is_closed(result: LookupResult) -> bool:
    if not isinstance(result, IssueFound):
        return False
    status = result.issue.status or ""
    return status.casefold() == CLOSED_STATUS.casefold()


class BranchProcessor:
    def __init__(self, lookup: IssueLookup, *, on_added: Callable[[LookupResult], None] | None = None):
        self.lookup = lookup
        self.on_added = on_added

    def resolve(self, branch_name: str, prefix: str) -> LookupResult:
        """Direct lookup by branch name, then by ``<prefix>-<number>`` on failure."""
        result = self.lookup.lookup(branch_name)
        if isinstance(result, IssueFound):
            return result
        number = extract_ticket_number(branch_name)
        if number is None:
            return result
        fallback = self.lookup.lookup(f"{prefix}-{number}")
        if isinstance(fallback, IssueFound):
            return IssueFound(branch_name, fallback.issue)
        return result

    def process(self, branch_names: Iterable[str], prefix: str, closed_only: bool = False) -> list[LookupResult]:
        results: list[LookupResult] = []
        for line in branch_names:
            branch_name = clean_branch_name(line)
            if not branch_name.startswith(prefix):
                continue
            result = self.resolve(branch_name, prefix)
            if closed_only and isinstance(result, IssueFound) and not is_closed(result):
                continue
            if self.on_added:
                self.on_added(result)
            results.append(result)
        return results
