"""Persistent JSON config helpers.

Stores hidden-file preference, UI theme, and the last visited directory.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "fuzzypick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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

    Filesystem errors are ignored so an unwritable config directory never
    breaks a picker run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility; only real booleans count."""
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_last_directory() -> Path | None:
    """Return the remembered directory if it is still an existing directory."""
    value = load_config().get("last_directory")
    if not isinstance(value, str) or not value:
        return None
    path = Path(value)
    if not path.is_absolute() or not path.is_dir():
        return None
    return path


def save_last_directory(directory: Path) -> None:
    config = load_config()
    config["last_directory"] = str(directory)
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "load_last_directory",
    "load_show_hidden",
    "load_theme_name",
    "save_config",
    "save_last_directory",
    "save_show_hidden",
]
