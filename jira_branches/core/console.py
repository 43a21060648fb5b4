"""Console and process capabilities injected into the report service."""

from __future__ import annotations

import getpass
import logging
import subprocess
import webbrowser
from pathlib import Path

logger = logging.getLogger(__name__)


class ConsoleInput:
    """Interactive prompts on the terminal."""

    def ask(self, prompt: str) -> str:
        # Closed stdin reads as an empty answer
        try:
            return input(prompt)
        except EOFError:
            return ""

    def ask_secret(self, prompt: str) -> str:
        try:
            return getpass.getpass(prompt)
        except EOFError:
            return ""

    def confirm(self, prompt: str) -> bool:
        return self.ask(prompt).strip().lower() == "y"


class ProcessRunner:
    """Runs an executable from its own directory with inherited stdio."""

    def run(self, executable: Path) -> int:
        executable = executable.resolve()
        proc = subprocess.run([str(executable)], cwd=executable.parent, check=False)
        return proc.returncode


class ReportViewer:
    """Opens a generated file in the desktop's default viewer."""

    def open(self, path: Path) -> bool:
        try:
            return webbrowser.open(path.resolve().as_uri())
        except webbrowser.Error as exc:
            logger.warning("Could not open %s: %s", path, exc)
            return False
