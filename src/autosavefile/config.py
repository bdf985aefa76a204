"""Configuration for AutoSaveFile"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Config:
    """Live auto-save settings; the host may change them at any time"""

    # Delimited by "," ";" or ":"; suffixes, or regexes when USE_REGEX is on
    IGNORED_FILE_TYPES = os.getenv("AUTOSAVE_IGNORED_FILE_TYPES", "")
    USE_REGEX = _env_bool("AUTOSAVE_USE_REGEX", "true")

    SAVE_ALL_FILES_ON_FOCUS_LOST = _env_bool("AUTOSAVE_SAVE_ALL_ON_FOCUS_LOST", "true")

    # Seconds; reserved, not enforced
    TIME_DELAY = _env_int("AUTOSAVE_TIME_DELAY", 5)

    DEBUG = _env_bool("DEBUG", "false")


config = Config()
