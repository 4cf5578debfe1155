"""Persistent JSON config helpers.

Stores the preferred UI theme and color preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

CONFIG_PATH = Path.home() / ".config" / "gut.json"


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


def load_theme_name() -> str | None:
    """Return the configured theme name, or ``None`` when unset or invalid."""
    value = load_config().get("theme")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def load_no_color() -> bool:
    """Return persisted color preference; only explicit booleans count."""
    value = load_config().get("no_color")
    return value if isinstance(value, bool) else False
