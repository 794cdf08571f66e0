"""Tree-view configuration and persisted display preferences.

``TreeViewConfig`` carries the per-widget options. Preferences (default
depth, expand-all, theme) live in a small JSON file; expand and selection
state are never persisted. All file access is defensive: malformed or
missing config falls back safely.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "filetree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_EXPAND_DEPTH = 2
VIEW_PREFERENCE_KEYS = ("default_expand_depth", "expand_all")


def _coerce_int(value: object, default: int | None) -> int | None:
    """Accept real integers only; booleans and other types yield ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


@dataclass(frozen=True)
class TreeViewConfig:
    """Options recognized by one tree view.

    ``max_width`` is presentation-only: state derivation ignores it and the
    renderer truncates rows to that many columns when set.
    """

    base_path: str = ""
    default_expand_depth: int = DEFAULT_EXPAND_DEPTH
    expand_all: bool = False
    max_width: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> TreeViewConfig:
        """Build a config from loose key/value input, dropping invalid values."""
        base_path = data.get("base_path")
        depth = _coerce_int(data.get("default_expand_depth"), DEFAULT_EXPAND_DEPTH)
        expand_all = data.get("expand_all")
        max_width = _coerce_int(data.get("max_width"), None)
        return cls(
            base_path=base_path if isinstance(base_path, str) else "",
            default_expand_depth=depth if depth is not None else DEFAULT_EXPAND_DEPTH,
            expand_all=expand_all if isinstance(expand_all, bool) else False,
            max_width=max_width if max_width is not None and max_width > 0 else None,
        )

    def with_overrides(self, **changes: object) -> TreeViewConfig:
        """Return a copy with every non-``None`` keyword applied."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})


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


def save_config(data: dict[str, object]) -> bool:
    """Persist config data as pretty-printed JSON, returning success."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        return False
    return True


def load_view_config() -> TreeViewConfig:
    """Build the default ``TreeViewConfig`` from persisted preferences.

    Only the keys in ``VIEW_PREFERENCE_KEYS`` are read; per-view options such
    as ``base_path`` and ``max_width`` always come from the caller.
    """
    data = load_config()
    return TreeViewConfig.from_mapping({key: data[key] for key in VIEW_PREFERENCE_KEYS if key in data})


def save_view_defaults(config: TreeViewConfig) -> bool:
    """Persist the depth and expand-all defaults of ``config``."""
    data = load_config()
    data["default_expand_depth"] = int(config.default_expand_depth)
    data["expand_all"] = bool(config.expand_all)
    return save_config(data)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> bool:
    stripped = str(theme_name).strip()
    if not stripped:
        return False
    config = load_config()
    config["theme"] = stripped
    return save_config(config)
