# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from humantime.parse.duration import parse_duration
from humantime.parse.errors import (
    TimeParseError,
    new_duration_error,
    new_timestamp_error,
)
from humantime.parse.natural import DateResolver
from humantime.parse.timestamp import parse_timestamp


def validate_and_suggest(
    input_type: str,
    input: str,
    now: Optional[pendulum.DateTime] = None,
    resolver: Optional[DateResolver] = None,
) -> Optional[TimeParseError]:
    """
    Check a duration or timestamp string and return the canonical,
    example-bearing error when it does not parse.

    Raises:
        ValueError: If input_type is not "duration" or "timestamp"
    """
    match input_type:
        case "duration":
            if not parse_duration(input)["valid"]:
                return new_duration_error(input)
        case "timestamp":
            if parse_timestamp(input, now, resolver)["error"] is not None:
                return new_timestamp_error(input)
        case _:
            raise ValueError(f"unknown input type: {input_type}")
    return None
