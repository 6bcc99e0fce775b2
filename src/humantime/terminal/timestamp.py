# SPDX-License-Identifier: MIT

from typing import Annotated, cast

import pendulum
import typer

from humantime import state as app_state
from humantime.parse.timestamp import parse_timestamp
from humantime.terminal.common import fail, get_now, get_resolver
from humantime.time import datetime_to_iso_str
from humantime.view import result as result_view


def timestamp(
    text: Annotated[
        list[str],
        typer.Argument(help="e.g. 9am, 2 hours ago, yesterday at 3pm, this week"),
    ],
) -> None:
    """Parse a timestamp."""
    input = " ".join(text)
    result = parse_timestamp(input, get_now(), get_resolver())
    if result["error"] is not None:
        fail(result["error"])
    time = cast(pendulum.DateTime, result["time"])

    if app_state.get_json_output():
        result_view.json_view({"input": input, "time": datetime_to_iso_str(time)})
        return
    result_view.timestamp_view(input, time)
