"""Application entry point: load settings, configure logging, run the report."""

from __future__ import annotations

import logging
import os
import sys

from jira_branches.core.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR
from jira_branches.core.errors import JiraBranchesError
from jira_branches.core.service import BranchReportService
from jira_branches.core.settings import load_settings

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(base_path=None, service_factory=BranchReportService) -> int:
    configure_logging()
    try:
        settings = load_settings(base_path)
        service_factory(settings).generate_report()
    except JiraBranchesError as exc:
        logger.debug("Report generation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
