"""Run settings: defaults from config.py, optionally overridden by a YAML file."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

import pytz
import yaml

from .config import (
    DEFAULT_INPUT_NAME,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_PREFIX,
    DEFAULT_SCRIPT_NAME,
    HOME_ENV_VAR,
    JIRA_DEFAULT_SERVER,
    SCRIPTS_DIR,
    SETTINGS_FILE_NAME,
    TIMEZONE,
)
from .errors import SettingsError


@dataclass(frozen=True, slots=True)
class RunSettings:
    jira_url: str
    prefix: str
    script_path: Path
    input_file: Path
    output_file: Path
    timezone: str = TIMEZONE


_PATH_KEYS = {"script_path", "input_file", "output_file"}


def home_dir() -> Path:
    value = os.environ.get(HOME_ENV_VAR)
    return Path(value) if value else Path.cwd()


def default_settings(base: Path) -> RunSettings:
    scripts = base / SCRIPTS_DIR
    return RunSettings(
        jira_url=JIRA_DEFAULT_SERVER,
        prefix=DEFAULT_PREFIX,
        script_path=scripts / DEFAULT_SCRIPT_NAME,
        input_file=scripts / DEFAULT_INPUT_NAME,
        output_file=scripts / DEFAULT_OUTPUT_NAME,
    )


def load_settings(base_path: str | Path | None = None) -> RunSettings:
    """Build settings for one run.

    Parameters
    ----------
    base_path : str | Path | None
        Home directory holding ``scripts/`` and the optional
        ``jira_branches.yaml``. Defaults to ``$IGNITE_HOME`` or the cwd.

    Returns
    -------
    RunSettings
        Defaults with any keys from the YAML file applied. Relative paths in
        the file are resolved against the home directory.
    """
    base = Path(base_path) if base_path is not None else home_dir()
    settings = default_settings(base)
    yaml_path = base / SETTINGS_FILE_NAME
    if not yaml_path.exists():
        return settings
    try:
        data = yaml.safe_load(yaml_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise SettingsError(f"Cannot read settings file {yaml_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {yaml_path} must contain a mapping")

    known = {f.name for f in fields(RunSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise SettingsError(f"Unknown settings in {yaml_path}: {', '.join(unknown)}")

    values = {}
    for key, value in data.items():
        if value is None:
            continue
        if key in _PATH_KEYS:
            path = Path(str(value))
            values[key] = path if path.is_absolute() else base / path
        else:
            values[key] = str(value)

    if "timezone" in values:
        try:
            pytz.timezone(values["timezone"])
        except pytz.UnknownTimeZoneError as exc:
            raise SettingsError(f"Unknown timezone in {yaml_path}: {values['timezone']}") from exc
    return replace(settings, **values)
