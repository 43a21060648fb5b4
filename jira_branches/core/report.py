"""Sorting and HTML rendering of branch lookup results."""

from __future__ import annotations

import html
from collections.abc import Iterable, Sequence
from datetime import datetime
from functools import cmp_to_key

import pytz

from .config import REPORT_COLSPAN, REPORT_DATE_FORMAT, TIMEZONE, UNRESOLVED_LABEL
from .models import IssueFound, LookupFailed, LookupResult


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _by_assignee_then_branch(a: IssueFound, b: IssueFound) -> int:
    return _cmp(a.issue.assignee or "", b.issue.assignee or "") or _cmp(a.branch_name, b.branch_name)


def _by_branch(a: LookupFailed, b: LookupFailed) -> int:
    return _cmp(a.branch_name, b.branch_name)


# (type of a, type of b) -> comparison; failures always sort after found issues
_COMPARATORS = {
    (IssueFound, IssueFound): _by_assignee_then_branch,
    (LookupFailed, LookupFailed): _by_branch,
    (IssueFound, LookupFailed): lambda a, b: -1,
    (LookupFailed, IssueFound): lambda a, b: 1,
}


def compare_results(a: LookupResult, b: LookupResult) -> int:
    return _COMPARATORS[(type(a), type(b))](a, b)


def sort_results(results: Iterable[LookupResult]) -> list[LookupResult]:
    return sorted(results, key=cmp_to_key(compare_results))


def format_date(value: datetime | None, timezone: str = TIMEZONE) -> str:
    if value is None:
        return ""
    tz = pytz.timezone(timezone)
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    return value.astimezone(tz).strftime(REPORT_DATE_FORMAT)


def _text(value) -> str:
    return html.escape("" if value is None else str(value))


def _cell(label: str, value) -> str:
    return f"<td><strong>{label}:</strong> {_text(value)}</td>"


def _render_failure(result: LookupFailed) -> list[str]:
    return [
        "\n<tr>",
        f'<th colspan={REPORT_COLSPAN} align="left">{_text(result.branch_name)} {_text(result.error)}</th>',
        "</tr>",
    ]


def _render_found(result: IssueFound, jira_url: str, timezone: str) -> list[str]:
    issue = result.issue
    href = html.escape(f"{jira_url.rstrip('/')}/browse/{issue.key}", quote=True)
    parts = [
        "\n<tr>",
        f'<th colspan={REPORT_COLSPAN} align="left">'
        f'<a href="{href}">{_text(result.branch_name)} {_text(issue.summary)}</a></th>',
        "</tr><tr>",
        _cell("Assignee", issue.assignee),
        _cell("Reporter", issue.reporter),
        _cell("Status", issue.status),
        _cell("Resolution", issue.resolution or UNRESOLVED_LABEL),
    ]
    if issue.fix_versions is not None:
        versions = "".join(f" {_text(v)}" for v in issue.fix_versions)
        parts.append(f"<td><strong>Version:</strong>{versions}</td>")
    parts.extend(
        [
            _cell("CreationDate", format_date(issue.created, timezone)),
            _cell("UpdateDate", format_date(issue.updated, timezone)),
            "</tr><tr><td>  </td></tr>",
        ]
    )
    return parts


def render_report(results: Sequence[LookupResult], jira_url: str, *, timezone: str = TIMEZONE) -> str:
    """Render ``results`` as a minimal HTML document, sorted for display.

    Found issues come first, grouped by assignee; failed lookups follow,
    ordered by branch name. ``results`` itself is left untouched.
    """
    parts = ["<html>\n<head></head>\n<body>\n", "<table>"]
    for result in sort_results(results):
        if isinstance(result, LookupFailed):
            parts.extend(_render_failure(result))
        else:
            parts.extend(_render_found(result, jira_url, timezone))
    parts.append("\n</table>")
    parts.append("\n</body>\n</html>\n")
    return "".join(parts)
