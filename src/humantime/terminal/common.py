# SPDX-License-Identifier: MIT

from typing import NoReturn, Optional

import pendulum
import typer

from humantime import state as app_state
from humantime.parse.errors import TimeParseError
from humantime.parse.natural import DateparserResolver
from humantime.repository.configuration import CONFIGURATION_REPO
from humantime.time import now_local
from humantime.view import error as error_view


def get_now() -> pendulum.DateTime:
    """The reference instant for this invocation, read once per command."""
    reference_time = app_state.get_reference_time()
    timezone = CONFIGURATION_REPO.get_config()["timezone"]
    if reference_time is not None:
        return reference_time.in_tz(timezone) if timezone else reference_time
    return now_local(timezone)


def get_resolver() -> DateparserResolver:
    config = CONFIGURATION_REPO.get_config()
    return DateparserResolver(
        languages=config["languages"], date_order=config["date_order"]
    )


def fail(error: TimeParseError) -> NoReturn:
    if app_state.get_json_output():
        error_view.error_json_view(error)
        raise typer.Exit(code=1)
    raise typer.BadParameter(error.format_with_examples(), param_hint=error.field)


def parse_reference_time(value: Optional[str]) -> Optional[pendulum.DateTime]:
    if value is None:
        return None
    try:
        parsed = pendulum.parse(value, tz="local")
    except ValueError as e:
        raise typer.BadParameter(f"Incorrect datetime format: {e}")
    if not isinstance(parsed, pendulum.DateTime):
        raise typer.BadParameter("--now needs a date and time, e.g. 2026-01-15T18:00")
    return parsed
