import copy
import json
from datetime import datetime
from ft.common.logger import LEVELS, log
from ft.common.setup import PATHS
from ft.core.formatting import to_save_minutes


#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.data / "settings.json"
ACTIVITY_DIR = PATHS.activities

DEFAULT_CATEGORIES = ["Deep Work", "Coding", "Reading", "Writing", "Design", "Learning", "Exercise", "Other"]
VISIBILITIES = ("public", "private")

# Default values for every setting, along with the type each one must have to be accepted from disk.
_SETTINGS_DEFAULTS = {
    "categories": DEFAULT_CATEGORIES,
    "tick_interval_ms": 1000,
    "default_focus_level": 7,
    "default_visibility": "public",
    "always_on_top": False,
    "confirm_discard": True,
    "theme": "Light",
    "log_level": "INFO",
    "log_to_console": False,
}

# Simply returns the current local time as an ISO8601 string with timezone offset.
def now_iso():
    return datetime.now().astimezone().isoformat()

# Helper to return a truly fresh, default settings dict.
def build_default_settings():
    return copy.deepcopy(_SETTINGS_DEFAULTS)

# Checks that a value loaded from disk is usable for the given key. bool is excluded from the int settings since
# it subclasses int.
def _is_valid(key, value):
    default = _SETTINGS_DEFAULTS[key]
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        if key == "default_focus_level":
            return 1 <= value <= 10
        return value > 0
    if isinstance(default, list):
        return isinstance(value, list) and len(value) > 0 and all(isinstance(v, str) and v for v in value)
    if key == "default_visibility":
        return value in VISIBILITIES
    if key == "log_level":
        return value in LEVELS
    return isinstance(value, type(default))

#endregion === Helpers and Paths ===

#region === Saving and Loading Settings ===

# Loads settings from SETTINGS_PATH, defaulting anything missing or malformed. Never raises for a missing or
# corrupt file, just falls back to defaults.
def load_settings():
    try:
        if not SETTINGS_PATH.exists():
            log.info(f"No existing settings found at '{SETTINGS_PATH}', loading default settings.")
            return build_default_settings()

        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise TypeError(f"Expected a JSON object in settings, got {type(loaded).__name__}")

        settings = build_default_settings()
        defaulted_values = set()
        for key in _SETTINGS_DEFAULTS:
            if key in loaded and _is_valid(key, loaded[key]):
                settings[key] = loaded[key]
            else:
                defaulted_values.add(key)

        if defaulted_values:
            log.warning(f"Loaded settings from '{SETTINGS_PATH}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted_values))}")
        else:
            log.info(f"Successfully loaded settings from '{SETTINGS_PATH}'.")
        return settings
    except (json.JSONDecodeError, OSError, TypeError):
        log.warning("Ran into an error while trying to load settings.json, falling back to default settings.",exc_info=True)
        return build_default_settings()

# Write the given settings to disk under SETTINGS_PATH
def save_settings(settings):
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    log.info(f"Successfully saved settings to '{SETTINGS_PATH}'")

#endregion === Saving and Loading Settings ===

#region === Activities ===

# Turns a finished session into the activity record handed to the save collaborator. Duration comes in as
# seconds and is stored as whole minutes.
def build_activity(category, duration_seconds, note="", focus_level=7, visibility="public"):
    activity = {
        "category": category,
        "duration_minutes": to_save_minutes(duration_seconds),
        "focus_level": int(focus_level),
        "visibility": visibility,
        "created_at": now_iso(),
    }
    note = (note or "").strip()
    if note:
        activity["note"] = note
    return activity

# Writes a finished activity as its own JSON file in ACTIVITY_DIR. Errors propagate so the caller can tell the
# user the save didn't happen.
def save_activity(activity):
    ACTIVITY_DIR.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    final_path = ACTIVITY_DIR / f"activity_{ts}.json"
    with open(final_path, "w", encoding="utf-8") as f:
        json.dump(activity, f, indent=2)
    log.info(f"Saved {activity['duration_minutes']}m '{activity['category']}' activity to '{final_path}'")
    return final_path

# Returns every saved activity, oldest first. Unreadable files are skipped with a warning.
def load_activities():
    activities = []
    if not ACTIVITY_DIR.exists():
        return activities
    for path in sorted(ACTIVITY_DIR.glob("activity_*.json")):
        try:
            with open(path, "r", encoding="utf-8") as f:
                activities.append(json.load(f))
        except (json.JSONDecodeError, OSError):
            log.warning(f"Skipping unreadable activity file '{path}'",exc_info=True)
    return activities

#endregion === Activities ===
