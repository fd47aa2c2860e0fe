"""Per-user directories for clocktui's config file and exported logs."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "clocktui"


def get_config_dir() -> Path:
    """Directory holding config.toml (``CLOCKTUI_CONFIG_DIR`` overrides)."""
    override = os.environ.get("CLOCKTUI_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir(APP_NAME))


def get_data_dir() -> Path:
    """Directory for exported debug logs (``CLOCKTUI_DATA_DIR`` overrides)."""
    override = os.environ.get("CLOCKTUI_DATA_DIR")
    if override:
        return Path(override)
    return Path(user_data_dir(APP_NAME))


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def get_debug_log_path() -> Path:
    return get_data_dir() / "debug.log"
