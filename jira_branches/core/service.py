"""BranchReportService: runs the branch script, looks up tickets, writes the report."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import ExitStack
from pathlib import Path

from .branches import BranchProcessor
from .console import ConsoleInput, ProcessRunner, ReportViewer
from .errors import CredentialsError, ScriptExecutionError
from .jira_client import JiraAPI
from .lookup import IssueLookup
from .models import LookupResult, describe_result
from .report import render_report
from .settings import RunSettings

logger = logging.getLogger(__name__)

ApiFactory = Callable[[str, str, str], JiraAPI]


class BranchReportService:
    def __init__(
        self,
        settings: RunSettings,
        *,
        console: ConsoleInput | None = None,
        runner: ProcessRunner | None = None,
        viewer: ReportViewer | None = None,
        api_factory: ApiFactory = JiraAPI,
    ):
        self.settings = settings
        self.console = console or ConsoleInput()
        self.runner = runner or ProcessRunner()
        self.viewer = viewer or ReportViewer()
        self.api_factory = api_factory

    def generate_report(self) -> Path:
        """Run the whole pipeline and return the path of the written report.

        Credentials are checked and the branch script is run before any Jira
        connection is opened; either failing aborts the run.
        """
        user, password = self.read_credentials()
        closed_only = self.console.confirm("Report 'Closed' issues only [y/N]: ")
        self.run_script()

        settings = self.settings
        with ExitStack() as stack:
            lines = stack.enter_context(settings.input_file.open(encoding="utf-8", errors="replace"))
            api = stack.enter_context(self.api_factory(settings.jira_url, user, password))
            processor = BranchProcessor(IssueLookup(api), on_added=self._echo_added)
            results = processor.process(lines, settings.prefix, closed_only)

        document = render_report(results, settings.jira_url, timezone=settings.timezone)
        print(document)
        settings.output_file.parent.mkdir(parents=True, exist_ok=True)
        settings.output_file.write_text(document, encoding="utf-8")
        logger.info("Wrote %d results to %s", len(results), settings.output_file)

        if not self.viewer.open(settings.output_file):
            print(f"Results have been written to: {settings.output_file}")
        return settings.output_file

    def read_credentials(self) -> tuple[str, str]:
        print(f"Need to enter credentials for JIRA [{self.settings.jira_url}]")
        user = self.console.ask("JIRA user: ")
        if not user:
            raise CredentialsError("JIRA user name cannot be empty.")
        password = self.console.ask_secret("Password: ")
        if not password:
            raise CredentialsError("JIRA password cannot be empty.")
        return user, password

    def run_script(self) -> None:
        script = self.settings.script_path
        print()
        print(f">>> Executing script: {script}")
        print()
        try:
            exit_code = self.runner.run(script)
        except OSError as exc:
            raise ScriptExecutionError(str(script), None, str(exc)) from exc
        print()
        print(f">>> Finished executing script [script={script}, exitCode={exit_code}]")
        print()
        if exit_code != 0:
            raise ScriptExecutionError(str(script), exit_code)

    @staticmethod
    def _echo_added(result: LookupResult) -> None:
        print(f"Added issue: {describe_result(result)}")
