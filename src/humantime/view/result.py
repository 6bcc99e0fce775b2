# SPDX-License-Identifier: MIT

from typing import Any

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from humantime.model.parsed_args import ParsedArgs
from humantime.model.result import CalendarRange
from humantime.time import (
    datetime_to_display_str,
    datetime_to_display_str_optional,
    datetime_to_iso_str,
    datetime_to_iso_str_optional,
    duration_to_str,
    format_deadline,
    format_time_until,
)


def __key_value_table(rows: list[tuple[str, str]]) -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("field", style="cyan")
    table.add_column("value", style="magenta")
    for field, value in rows:
        table.add_row(field, value)
    return table


def duration_view(input: str, duration: pendulum.Duration) -> None:
    console = Console()
    console.print(
        __key_value_table(
            [
                ("input", input),
                ("duration", duration_to_str(duration)),
                ("seconds", f"{duration.total_seconds():g}"),
            ]
        )
    )


def timestamp_view(input: str, time: pendulum.DateTime) -> None:
    console = Console()
    console.print(
        __key_value_table(
            [
                ("input", input),
                ("time", datetime_to_display_str(time)),
                ("iso", datetime_to_iso_str(time)),
            ]
        )
    )


def deadline_view(input: str, deadline: pendulum.DateTime, now: pendulum.DateTime) -> None:
    console = Console()
    console.print(
        __key_value_table(
            [
                ("input", input),
                ("deadline", format_deadline(deadline, now)),
                ("due", format_time_until(deadline, now)),
                ("iso", datetime_to_iso_str(deadline)),
            ]
        )
    )


def period_view(period: str, calendar_range: CalendarRange) -> None:
    console = Console()
    console.print(
        __key_value_table(
            [
                ("period", period),
                ("start", datetime_to_display_str(calendar_range["start"])),
                ("end", datetime_to_display_str(calendar_range["end"])),
            ]
        )
    )


def parsed_args_view(parsed_args: ParsedArgs) -> None:
    rows = [
        ("project", parsed_args["project_sid"] if parsed_args["has_project"] else ""),
        ("task", parsed_args["task_sid"] if parsed_args["has_task"] else ""),
        ("note", parsed_args["note"] if parsed_args["has_note"] else ""),
        ("start", datetime_to_display_str_optional(parsed_args["timestamp_start"]) or ""),
        ("end", datetime_to_display_str_optional(parsed_args["timestamp_end"]) or ""),
    ]
    console = Console()
    console.print(__key_value_table(rows))


def json_view(data: dict[str, Any]) -> None:
    console = Console()
    console.print_json(data=data)


def parsed_args_to_json(parsed_args: ParsedArgs) -> dict[str, Any]:
    return {
        **parsed_args,
        "timestamp_start": datetime_to_iso_str_optional(parsed_args["timestamp_start"]),
        "timestamp_end": datetime_to_iso_str_optional(parsed_args["timestamp_end"]),
    }
