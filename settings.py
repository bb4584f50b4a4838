import json
import os
import sys

from loguru import logger

from color_logic import MalformedHexError, normalize_hex

# --- Constants ---
SETTINGS_FILE = "settings.json"
SETTINGS_ENV = "PALETTE_GRID_SETTINGS"
LOG_LEVEL_ENV = "PALETTE_GRID_LOG_LEVEL"

DEFAULT_SETTINGS = {
    "base_color": "#3366cc",
    "warmth": 50,
    "show_hex": True,
    "show_rgb": True,
    "show_hsl": True,
    "log_level": "INFO",
}


def settings_path():
    return os.environ.get(SETTINGS_ENV, SETTINGS_FILE)


def known_log_level(level):
    """
    Upper-cased loguru level name, or None when loguru does not know it.
    """
    if not isinstance(level, str):
        return None
    name = level.upper()
    try:
        logger.level(name)
    except ValueError:
        return None
    return name


def _clean(settings):
    try:
        settings["base_color"] = normalize_hex(settings["base_color"])
    except MalformedHexError as e:
        logger.warning(f"Ignoring base_color from settings: {e}")
        settings["base_color"] = DEFAULT_SETTINGS["base_color"]

    try:
        warmth = int(settings["warmth"])
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Ignoring warmth from settings: {settings['warmth']!r}")
        warmth = DEFAULT_SETTINGS["warmth"]
    settings["warmth"] = max(0, min(100, warmth))

    level = known_log_level(settings["log_level"])
    if level is None:
        logger.warning(f"Ignoring log_level from settings: {settings['log_level']!r}")
        level = DEFAULT_SETTINGS["log_level"]
    settings["log_level"] = level

    for key in ("show_hex", "show_rgb", "show_hsl"):
        settings[key] = bool(settings[key])
    return settings


def load_settings(path=None):
    """
    Defaults, overlaid with whatever known keys the settings file holds.
    A missing file is not an error; an unreadable one is logged and skipped.
    """
    settings = dict(DEFAULT_SETTINGS)
    path = path or settings_path()

    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read settings from {path}: {e}")
            data = {}

        if not isinstance(data, dict):
            logger.warning(f"Settings file {path} does not hold an object, using defaults")
            data = {}

        unknown = set(data) - set(DEFAULT_SETTINGS)
        if unknown:
            logger.debug(f"Unknown settings ignored: {sorted(unknown)}")
        settings.update({k: v for k, v in data.items() if k in DEFAULT_SETTINGS})

    return _clean(settings)


def configure_logging(level=None):
    """
    Swap loguru's default sink for one on stderr at the requested level.
    The environment variable wins over the argument.
    """
    env_level = os.environ.get(LOG_LEVEL_ENV)
    rejected = []
    for candidate in (env_level, level):
        if candidate is None or candidate == "":
            continue
        name = known_log_level(candidate)
        if name is not None:
            break
        rejected.append(candidate)
    else:
        name = DEFAULT_SETTINGS["log_level"]

    logger.remove()
    logger.add(sys.stderr, level=name)
    for candidate in rejected:
        logger.warning(f"Unknown log level {candidate!r}, using {name}")
    return name
