# SPDX-License-Identifier: MIT

from typing import TYPE_CHECKING, Optional, TypedDict

import pendulum

if TYPE_CHECKING:
    from humantime.parse.errors import TimeParseError


class DurationResult(TypedDict):
    duration: pendulum.Duration
    valid: bool


class TimestampResult(TypedDict):
    time: Optional[pendulum.DateTime]
    error: Optional["TimeParseError"]


class DeadlineResult(TypedDict):
    time: Optional[pendulum.DateTime]
    error: Optional["TimeParseError"]


class CalendarRange(TypedDict):
    """Half-open ``[start, end)`` range for one named period."""

    start: pendulum.DateTime
    end: pendulum.DateTime
