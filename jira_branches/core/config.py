"""Central configuration: Jira connection defaults, file locations, report formats."""

from __future__ import annotations

from collections.abc import Sequence

# =============================================================================
# Jira Connection Settings
# =============================================================================
JIRA_DEFAULT_SERVER = "https://issues.apache.org/jira"
JIRA_REST_API_VERSION = "2"
DEFAULT_PREFIX = "IGNITE"
TIMEZONE = "UTC"

# Fields requested for every single-issue fetch
JIRA_FETCH_FIELDS: Sequence[str] = (
    "summary",
    "status",
    "resolution",
    "assignee",
    "reporter",
    "fixVersions",
    "created",
    "updated",
)

# =============================================================================
# File Locations
# Relative to the home directory (IGNITE_HOME, falling back to the cwd).
# =============================================================================
HOME_ENV_VAR = "IGNITE_HOME"
SETTINGS_FILE_NAME = "jira_branches.yaml"
SCRIPTS_DIR = "scripts"
DEFAULT_SCRIPT_NAME = "jira-branches.sh"
DEFAULT_INPUT_NAME = "jira-branches.js"
DEFAULT_OUTPUT_NAME = "jira-branches-results.html"

# =============================================================================
# Report Configuration
# =============================================================================
REPORT_DATE_FORMAT = "%m/%d/%Y"
CLOSED_STATUS = "Closed"
UNRESOLVED_LABEL = "Unresolved"
REPORT_COLSPAN = 7

# Ticket number embedded in a branch name; 5 digits are tried before 4
TICKET_NUMBER_PATTERN = r"\d{5}|\d{4}"

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL_ENV_VAR = "JIRA_BRANCHES_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
