# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from humantime import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        defaults = configuration.get_default_configuration()

        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = defaults
            return

        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(
                f"configuration file {configuration.APP_CONFIG_PATH} must be a mapping"
            )

        # Fill settings added after the file was written
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value

        if loaded["date_order"] is not None:
            loaded["date_order"] = str(loaded["date_order"]).upper()
            if loaded["date_order"] not in configuration.DATE_ORDERS:
                raise ValueError(
                    f"date_order must be one of {', '.join(configuration.DATE_ORDERS)}"
                )
        loaded["log_level"] = str(loaded["log_level"]).upper()
        if loaded["log_level"] not in configuration.LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(configuration.LOG_LEVELS)}"
            )

        self._config = loaded  # type: ignore[assignment]

    def reload(self) -> None:
        self._config = None

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)


CONFIGURATION_REPO = ConfigurationRepository()
