"""JSON-based settings persistence for the mini calendar."""

import json
import logging
import os

from calendar_logic import DIRECTIONS, WeekLayout

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.environ.get(
    "MINI_CALENDAR_SETTINGS",
    os.path.join(os.path.expanduser("~"), ".mini-calendar-settings.json"),
)

_DEFAULTS = {
    "week_start": WeekLayout().week_start,
    "direction": WeekLayout().direction,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings
    if not isinstance(stored, dict):
        return settings
    week_start = stored.get("week_start")
    if isinstance(week_start, int) and not isinstance(week_start, bool) and 0 <= week_start <= 6:
        settings["week_start"] = week_start
    if stored.get("direction") in DIRECTIONS:
        settings["direction"] = stored["direction"]
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def load_layout() -> WeekLayout:
    settings = load_settings()
    return WeekLayout(settings["direction"], settings["week_start"])


def save_layout(layout: WeekLayout) -> None:
    settings = load_settings()
    settings["direction"] = layout.direction
    settings["week_start"] = layout.week_start
    save_settings(settings)
