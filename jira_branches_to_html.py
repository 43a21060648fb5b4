"""Command-line launcher for the Jira branches report.

Usage:
  python jira_branches_to_html.py

Settings come from ``$IGNITE_HOME/jira_branches.yaml`` when present,
otherwise from the defaults in ``jira_branches/core/config.py``.
"""

import sys


def main():
    """Delegate to the canonical entry point."""
    from jira_branches.app import main as _main

    return _main()


if __name__ == "__main__":
    sys.exit(main())
