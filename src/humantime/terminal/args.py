# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from humantime import state as app_state
from humantime.parse.args import merge_parsed_args, parse_args, resolve_parsed_args
from humantime.terminal.common import fail, get_now, get_resolver
from humantime.view import result as result_view


def args(
    tokens: Annotated[
        Optional[list[str]],
        typer.Argument(help='e.g. on myproject/mytask 9am to 5pm with note "standup"'),
    ] = None,
    project: Annotated[Optional[str], typer.Option("--project", "-p")] = None,
    task: Annotated[Optional[str], typer.Option("--task", "-t")] = None,
    note: Annotated[Optional[str], typer.Option("--note", "-n")] = None,
    start: Annotated[Optional[str], typer.Option("--start", "-s")] = None,
    end: Annotated[Optional[str], typer.Option("--end", "-e")] = None,
) -> None:
    """Extract project, task, note and start/end times from a command line."""
    parsed_args = parse_args(tokens or [])
    merge_parsed_args(parsed_args, project, task, note, start, end)

    error = resolve_parsed_args(parsed_args, get_now(), get_resolver())
    if error is not None:
        fail(error)

    if app_state.get_json_output():
        result_view.json_view(result_view.parsed_args_to_json(parsed_args))
        return
    result_view.parsed_args_view(parsed_args)
