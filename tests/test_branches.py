import pytest

from jira_branches.core.branches import BranchProcessor, clean_branch_name, extract_ticket_number
from jira_branches.core.lookup import IssueLookup
from jira_branches.core.mappers import map_issue
from jira_branches.core.models import IssueFound, LookupFailed


class FakeLookup(IssueLookup):
    """Serves issues from a dict keyed by identifier; everything else fails."""

    def __init__(self, raw_issues):
        self.issues = {key: map_issue(raw) for key, raw in raw_issues.items()}
        self.calls = []

    def lookup(self, identifier):
        self.calls.append(identifier)
        if identifier in self.issues:
            return IssueFound(identifier, self.issues[identifier])
        return LookupFailed(identifier, f"Issue {identifier} Does Not Exist")


@pytest.mark.parametrize(
    "branch, expected",
    [
        ("IGNITE-12345-fix", "12345"),
        ("IGNITE-999-old", None),
        ("IGNITE-rework-4521", "4521"),
        ("IGNITE-1234567", "12345"),
        ("ignite-12-34-5678-90123", "5678"),
        ("IGNITE-", None),
    ],
)
def test_extract_ticket_number(branch, expected):
    assert extract_ticket_number(branch) == expected


def test_clean_branch_name():
    assert clean_branch_name("  IGNITE-200\\\n") == "IGNITE-200"
    assert clean_branch_name("\\IGNITE-\\300 ") == "IGNITE-300"


def test_only_prefixed_lines_are_considered(make_raw_issue):
    lookup = FakeLookup({"IGNITE-100": make_raw_issue("IGNITE-100"), "IGNITE-200": make_raw_issue("IGNITE-200")})
    results = BranchProcessor(lookup).process(["IGNITE-100", "  IGNITE-200\\", "NOPE-1"], "IGNITE")
    assert [r.branch_name for r in results] == ["IGNITE-100", "IGNITE-200"]
    assert lookup.calls == ["IGNITE-100", "IGNITE-200"]


def test_prefix_is_case_sensitive(make_raw_issue):
    lookup = FakeLookup({"ignite-100": make_raw_issue("IGNITE-100")})
    assert BranchProcessor(lookup).process(["ignite-100"], "IGNITE") == []
    assert lookup.calls == []


def test_fallback_keeps_original_branch_name(make_raw_issue):
    lookup = FakeLookup({"IGNITE-4521": make_raw_issue("IGNITE-4521")})
    (result,) = BranchProcessor(lookup).process(["IGNITE-rework-4521"], "IGNITE")
    assert isinstance(result, IssueFound)
    assert result.branch_name == "IGNITE-rework-4521"
    assert result.issue.key == "IGNITE-4521"
    assert lookup.calls == ["IGNITE-rework-4521", "IGNITE-4521"]


def test_failed_fallback_keeps_original_error():
    lookup = FakeLookup({})
    (result,) = BranchProcessor(lookup).process(["IGNITE-rework-4521"], "IGNITE")
    assert result == LookupFailed("IGNITE-rework-4521", "Issue IGNITE-rework-4521 Does Not Exist")


def test_no_fallback_without_ticket_number():
    lookup = FakeLookup({})
    (result,) = BranchProcessor(lookup).process(["IGNITE"], "IGNITE")
    assert isinstance(result, LookupFailed)
    assert lookup.calls == ["IGNITE"]


def test_closed_only_filter(make_raw_issue):
    lookup = FakeLookup(
        {
            "IGNITE-1000": make_raw_issue("IGNITE-1000", status={"name": "closed"}),
            "IGNITE-2000": make_raw_issue("IGNITE-2000", status={"name": "Resolved"}),
        }
    )
    lines = ["IGNITE-1000", "IGNITE-2000", "IGNITE-3000"]

    closed = BranchProcessor(lookup).process(lines, "IGNITE", closed_only=True)
    assert [r.branch_name for r in closed] == ["IGNITE-1000", "IGNITE-3000"]
    assert isinstance(closed[1], LookupFailed)

    everything = BranchProcessor(lookup).process(lines, "IGNITE", closed_only=False)
    assert len(everything) == 3


def test_duplicates_preserved_and_callback_invoked(make_raw_issue):
    lookup = FakeLookup({"IGNITE-100": make_raw_issue("IGNITE-100")})
    added = []
    results = BranchProcessor(lookup, on_added=added.append).process(["IGNITE-100", "IGNITE-100"], "IGNITE")
    assert len(results) == 2
    assert added == results
