# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from humantime import state as app_state
from humantime.initialize import configure_logging
from humantime.terminal import configuration
from humantime.terminal.args import args
from humantime.terminal.common import parse_reference_time
from humantime.terminal.custom_typer import AliasedTyperGroup
from humantime.terminal.deadline import deadline
from humantime.terminal.duration import duration
from humantime.terminal.period import period
from humantime.terminal.timestamp import timestamp

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="humantime - parse human time expressions",
    no_args_is_help=True,
)
app.command(name="args, a")(args)
app.command(name="duration, d")(duration)
app.command(name="timestamp, ts")(timestamp)
app.command(name="deadline, dl")(deadline)
app.command(name="period, p")(period)
app.command(name="config, c")(configuration.view)


@app.callback()
def main_callback(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Print results and errors as JSON",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log parser decisions to stderr",
        ),
    ] = False,
    now: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--now",
            parser=parse_reference_time,
            help="Reference time instead of the clock, e.g. 2026-01-15T18:00",
        ),
    ] = None,
) -> None:
    """
    humantime - parse human time expressions

    Global options that apply to all commands.
    """
    app_state.set_json_output(json_output)
    app_state.set_reference_time(now)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
