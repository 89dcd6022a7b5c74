"""Persistent JSON config helpers.

Stores default command-line formatting options (bundle file type, decimals,
binary units, theme and JSON style). All access is defensive: malformed or
missing config falls back to built-in defaults.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "build-sizes"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class CliDefaults:
    """Fallback values for options not given on the command line."""

    filetype: str = "js"
    decimals: int = 2
    binary: bool = False
    theme: str = "default"
    style: str = "monokai"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never breaks a run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_string(data: dict[str, object], key: str, fallback: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        return fallback
    stripped = value.strip()
    return stripped if stripped else fallback


def load_cli_defaults() -> CliDefaults:
    """Load defaults, dropping any value with the wrong type or range.

    Booleans are not accepted as ``decimals`` even though they are ints.
    """
    builtin = CliDefaults()
    data = load_config()

    decimals = data.get("decimals")
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        decimals = builtin.decimals

    binary = data.get("binary")
    if not isinstance(binary, bool):
        binary = builtin.binary

    return CliDefaults(
        filetype=_load_string(data, "filetype", builtin.filetype),
        decimals=decimals,
        binary=binary,
        theme=_load_string(data, "theme", builtin.theme),
        style=_load_string(data, "style", builtin.style),
    )


def save_cli_defaults(defaults: CliDefaults) -> None:
    """Merge ``defaults`` into the persisted config."""
    config = load_config()
    config.update(asdict(defaults))
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "CliDefaults",
    "load_config",
    "save_config",
    "load_cli_defaults",
    "save_cli_defaults",
]
