"""Persistent JSON config helpers.

Stores the hidden-file preference and the pane layout knobs.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .viewport import DEFAULT_COLUMN_RATIO, DIR_PADDING

logger = logging.getLogger(__name__)

APP_NAME = "lazypane"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class PaneSettings:
    show_hidden: bool = False
    dir_padding: int = DIR_PADDING
    column_ratio: tuple[int, int, int] = DEFAULT_COLUMN_RATIO


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility, ``False`` unless explicitly boolean."""
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    """Persist hidden-file visibility.

    ``ViewState.hidden`` performs no I/O; the pane's owner calls this with
    ``view.show_hidden`` after a toggle that returned ``True``.
    """
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_dir_padding() -> int:
    """Return rows reserved for pane chrome.

    Booleans, negatives and non-integers fall back to ``DIR_PADDING``.
    """
    value = load_config().get("dir_padding")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DIR_PADDING
    return value


def load_column_ratio() -> tuple[int, int, int]:
    """Return the parent/current/preview column ratio.

    Anything other than three positive integers falls back to the default.
    """
    value = load_config().get("column_ratio")
    if not isinstance(value, list) or len(value) != 3:
        return DEFAULT_COLUMN_RATIO
    if any(isinstance(part, bool) or not isinstance(part, int) or part <= 0 for part in value):
        return DEFAULT_COLUMN_RATIO
    return (value[0], value[1], value[2])


def load_pane_settings() -> PaneSettings:
    return PaneSettings(
        show_hidden=load_show_hidden(),
        dir_padding=load_dir_padding(),
        column_ratio=load_column_ratio(),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "PaneSettings",
    "load_config",
    "save_config",
    "load_show_hidden",
    "save_show_hidden",
    "load_dir_padding",
    "load_column_ratio",
    "load_pane_settings",
]
