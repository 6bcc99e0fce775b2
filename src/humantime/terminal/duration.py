# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from humantime import state as app_state
from humantime.parse.duration import parse_duration
from humantime.parse.validate import validate_and_suggest
from humantime.terminal.common import fail
from humantime.view import result as result_view


def duration(
    text: Annotated[
        list[str],
        typer.Argument(help="e.g. 2h, 1h30m, 2.5 hours, 1 hour 30 minutes"),
    ],
) -> None:
    """Parse a duration."""
    input = " ".join(text)
    error = validate_and_suggest("duration", input)
    if error is not None:
        fail(error)

    value = parse_duration(input)["duration"]
    if app_state.get_json_output():
        result_view.json_view({"input": input, "seconds": value.total_seconds()})
        return
    result_view.duration_view(input, value)
