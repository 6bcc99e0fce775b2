# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from humantime import state as app_state
from humantime.parse.period import PERIOD_NAMES, get_period_range
from humantime.terminal.common import get_now
from humantime.time import datetime_to_iso_str
from humantime.view import result as result_view


def complete_period(incomplete: str) -> list[str]:
    """Return the named periods for shell completion."""
    return [name for name in PERIOD_NAMES if name.startswith(incomplete)]


def period(
    name: Annotated[
        list[str],
        typer.Argument(
            help="today, yesterday, this/last week, this/last month, this/last year",
            autocompletion=complete_period,
        ),
    ],
) -> None:
    """Show the [start, end) range of a named period."""
    period_name = " ".join(name)
    calendar_range = get_period_range(period_name, get_now())

    if app_state.get_json_output():
        result_view.json_view(
            {
                "period": period_name,
                "start": datetime_to_iso_str(calendar_range["start"]),
                "end": datetime_to_iso_str(calendar_range["end"]),
            }
        )
        return
    result_view.period_view(period_name, calendar_range)
