"""Fatal errors that abort a report run."""

from __future__ import annotations


class JiraBranchesError(RuntimeError):
    """Base class for errors that terminate the whole run."""


class CredentialsError(JiraBranchesError):
    pass


class SettingsError(JiraBranchesError):
    pass


class ScriptExecutionError(JiraBranchesError):
    def __init__(self, script: str, exit_code: int | None, reason: str | None = None):
        self.script = script
        self.exit_code = exit_code
        msg = f"Failed to run script [script={script}, exitCode={exit_code}]"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
