"""Env configuration adapter producing a SaveConfig snapshot."""

from __future__ import annotations

from ..config import Config
from ..config import config as live_config
from ..core.config_model import SaveConfig


def load_save_config(settings: Config | None = None) -> SaveConfig:
    """Copy the live settings into an immutable snapshot."""
    settings = settings if settings is not None else live_config
    return SaveConfig.from_raw(
        settings.IGNORED_FILE_TYPES,
        use_regex=settings.USE_REGEX,
        save_on_app_deactivate=settings.SAVE_ALL_FILES_ON_FOCUS_LOST,
        time_delay_seconds=settings.TIME_DELAY,
    )
