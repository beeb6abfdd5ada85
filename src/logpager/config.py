"""Persisted viewer settings.

The pager remembers the chosen theme, the width of the tag column and the year
used for logcat timestamps (which carry none) in a single TOML file. A missing
or broken file is never fatal: the viewer starts with defaults and the next save
overwrites it.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

import tomli_w
from platformdirs import user_config_dir

from logpager.models import AppConfig

logger = logging.getLogger(__name__)

APP_NAME = "logpager"
CONFIG_DIR_ENV = "LOGPAGER_CONFIG_DIR"
CONFIG_FILE_NAME = "config.toml"


def get_config_dir() -> Path:
    """Directory holding the settings file; $LOGPAGER_CONFIG_DIR wins over the platform default."""
    if override := os.environ.get(CONFIG_DIR_ENV):
        return Path(override)
    return Path(user_config_dir(APP_NAME))


def config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def load_config() -> AppConfig:
    path = config_path()
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return AppConfig()
    except OSError as e:
        logger.warning("Cannot read %s, using defaults: %s", path, e)
        return AppConfig()

    # ValidationError and TOMLDecodeError are both ValueErrors
    try:
        return AppConfig.model_validate(tomllib.loads(raw.decode()))
    except ValueError as e:
        logger.warning("Ignoring invalid settings in %s: %s", path, e)
        return AppConfig()


def save_config(config: AppConfig) -> None:
    """Write the settings, leaving out unset optional values such as the year."""
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomli_w.dumps(config.model_dump(exclude_none=True)))
    logger.debug("Saved settings to %s", path)
