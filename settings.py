"""JSON-based settings persistence for the dual calendar."""

import json
import logging
import os

from calendar_logic import CALENDAR_TYPES, parse_date_key
from locale_text import LABELS

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.environ.get(
    "DUAL_CALENDAR_SETTINGS",
    os.path.join(os.path.expanduser("~"), ".dual-calendar-settings.json"),
)

_DEFAULTS = {
    "marked_dates": [],
    "language": "en",
    "calendar_type": "gregorian",
    "dark_mode": False,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing or bad keys."""
    settings = dict(_DEFAULTS)
    settings["marked_dates"] = []
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings

    marked = stored.get("marked_dates")
    if isinstance(marked, list):
        keys = [k for k in marked if isinstance(k, str) and parse_date_key(k)]
        if len(keys) != len(marked):
            logger.info("Dropped %d malformed marked date(s)", len(marked) - len(keys))
        settings["marked_dates"] = keys
    elif marked is not None:
        logger.warning("Ignoring marked_dates: expected a list, got %r", type(marked).__name__)
    if isinstance(stored.get("language"), str) and stored["language"] in LABELS:
        settings["language"] = stored["language"]
    if isinstance(stored.get("calendar_type"), str) and stored["calendar_type"] in CALENDAR_TYPES:
        settings["calendar_type"] = stored["calendar_type"]
    if isinstance(stored.get("dark_mode"), bool):
        settings["dark_mode"] = stored["dark_mode"]
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2, ensure_ascii=False)


def save_setting(key: str, value) -> None:
    """Write a single entry, best effort: failures are logged, not raised."""
    settings = load_settings()
    settings[key] = value
    try:
        save_settings(settings)
    except OSError as exc:
        logger.warning("Could not save %s to %s: %s", key, _SETTINGS_PATH, exc)
