"""Persistent JSON defaults for printdir runs.

The file lives in the platform user config directory. All access is
defensive: a missing, unreadable, or malformed file falls back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .tree.types import ORDER_NAME, SIBLING_ORDERS

APP_NAME = "printdir"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class UserDefaults:
    """Validated config values merged underneath CLI flags."""

    ignore: tuple[str, ...] = ()
    no_content: tuple[str, ...] = ()
    ascii: bool = False
    order: str = ORDER_NAME
    show_hidden: bool = True
    follow_symlinks: bool = False


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_names(value: object) -> tuple[str, ...]:
    """Keep only non-empty string entries of a JSON list."""
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item)


def _coerce_bool(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def load_user_defaults() -> UserDefaults:
    data = load_config()
    order = data.get("order")
    return UserDefaults(
        ignore=_coerce_names(data.get("ignore")),
        no_content=_coerce_names(data.get("no_content")),
        ascii=_coerce_bool(data.get("ascii"), False),
        order=order if isinstance(order, str) and order in SIBLING_ORDERS else ORDER_NAME,
        show_hidden=_coerce_bool(data.get("show_hidden"), True),
        follow_symlinks=_coerce_bool(data.get("follow_symlinks"), False),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "CONFIG_PATH",
    "UserDefaults",
    "load_config",
    "load_user_defaults",
]
