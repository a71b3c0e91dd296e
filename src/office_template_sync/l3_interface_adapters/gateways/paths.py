"""Shared path constants for configuration and logs."""

from __future__ import annotations

from platformdirs import user_config_path, user_log_path

APP_NAME = 'office-template-sync'

CONFIG_DIR = user_config_path(APP_NAME)
LOG_DIR = user_log_path(APP_NAME)

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]

OFFICE_TEMPLATES_FOLDER = 'Custom Office Templates'
