# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table

from humantime import configuration as app_configuration
from humantime import state as app_state
from humantime.repository.configuration import CONFIGURATION_REPO
from humantime.view import result as result_view


def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    if app_state.get_json_output():
        result_view.json_view(dict(config))
        return

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("languages", ", ".join(config["languages"]))
    table.add_row("date_order", config["date_order"] or "auto")
    table.add_row("timezone", config["timezone"] or "local")
    table.add_row("log_level", config["log_level"])
    table.add_row("config_path", str(app_configuration.APP_CONFIG_PATH))

    console.print(table)
