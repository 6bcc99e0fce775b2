# SPDX-License-Identifier: MIT

from typing import Any

from rich.console import Console

from humantime.parse.errors import TimeParseError, to_user_error


def error_envelope(error: TimeParseError) -> dict[str, Any]:
    user_error = to_user_error(error)
    return {
        "error": {
            **user_error,
            "examples": list(error.examples),
        }
    }


def error_json_view(error: TimeParseError) -> None:
    console = Console()
    console.print_json(data=error_envelope(error))
