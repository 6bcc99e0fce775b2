# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "humantime"

# HUMANTIME_CONFIG_DIR overrides the platform config directory
CONFIG_PATH: Path = Path(
    os.environ.get("HUMANTIME_CONFIG_DIR") or platformdirs.user_config_path(APP_NAME)
)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

DATE_ORDERS = ("DMY", "MDY", "YMD")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Configuration(TypedDict):
    # languages handed to the natural-language date parser
    languages: list[str]
    # None lets the date parser guess from the language
    date_order: Optional[str]
    # None means the system's local timezone
    timezone: Optional[str]
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "languages": ["en"],
        "date_order": None,
        "timezone": None,
        "log_level": "WARNING",
    }
