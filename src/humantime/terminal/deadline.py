# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from humantime import state as app_state
from humantime.parse.deadline import parse_deadline_args
from humantime.terminal.common import fail, get_now, get_resolver
from humantime.time import datetime_to_iso_str, format_time_until
from humantime.view import result as result_view


def deadline(
    text: Annotated[
        Optional[list[str]],
        typer.Argument(help="e.g. +5m, +2d, friday 5pm, tomorrow at 3pm"),
    ] = None,
) -> None:
    """Parse a deadline; it must resolve to a future time."""
    now = get_now()
    result = parse_deadline_args(text or [], now, get_resolver())
    if result["error"] is not None:
        fail(result["error"])
    time = cast(pendulum.DateTime, result["time"])

    input = " ".join(text or [])
    if app_state.get_json_output():
        result_view.json_view(
            {
                "input": input,
                "time": datetime_to_iso_str(time),
                "due": format_time_until(time, now),
            }
        )
        return
    result_view.deadline_view(input, time, now)
