# SPDX-License-Identifier: MIT

import logging
import re
from typing import Optional

import pendulum

from humantime.model.result import DeadlineResult
from humantime.parse.errors import new_deadline_error
from humantime.parse.natural import DEFAULT_RESOLVER, DateResolver
from humantime.time import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
    is_same_day,
    now_local,
)

logger = logging.getLogger(__name__)

# +5m, +1h, +2d, +1w
_RELATIVE_PATTERN = re.compile(r"^\+(\d+)([A-Za-z])$")

SECONDS_PER_RELATIVE_UNIT: dict[str, int] = {
    "s": 1,
    "m": SECONDS_PER_MINUTE,
    "h": SECONDS_PER_HOUR,
    "d": SECONDS_PER_DAY,
    "w": SECONDS_PER_WEEK,
}


def _parse_relative_deadline(
    input: str, number: str, unit: str, now: pendulum.DateTime
) -> DeadlineResult:
    try:
        amount = int(number)
    except ValueError:
        return {
            "time": None,
            "error": new_deadline_error(input, "invalid duration: too large"),
        }
    if amount <= 0:
        return {
            "time": None,
            "error": new_deadline_error(input, "invalid duration: must be positive"),
        }

    seconds_per_unit = SECONDS_PER_RELATIVE_UNIT.get(unit)
    if seconds_per_unit is None:
        return {
            "time": None,
            "error": new_deadline_error(input, f"invalid time unit: {unit}"),
        }

    try:
        deadline = now + pendulum.duration(seconds=amount * seconds_per_unit)
    except OverflowError:
        return {
            "time": None,
            "error": new_deadline_error(input, "invalid duration: too large"),
        }
    return {"time": deadline, "error": None}


def parse_deadline(
    input: str,
    now: Optional[pendulum.DateTime] = None,
    resolver: Optional[DateResolver] = None,
) -> DeadlineResult:
    """
    Parse a deadline expression into a future instant.

    Supports relative shorthand ("+5m", "+1h", "+2d", "+1w"), natural language
    ("friday 5pm", "tomorrow 2pm", "in 5 minutes") and absolute dates
    ("2026-01-15 14:00"). A time earlier today rolls over to the same time
    tomorrow; any other past instant is an error.
    """
    if now is None:
        now = now_local()
    text = input.strip()
    if text == "":
        return {"time": None, "error": new_deadline_error(text, "deadline is required")}

    match = _RELATIVE_PATTERN.match(text)
    if match is not None:
        return _parse_relative_deadline(text, match.group(1), match.group(2), now)

    resolved = (resolver or DEFAULT_RESOLVER).resolve(text, now)
    if resolved is None:
        return {"time": None, "error": new_deadline_error(text)}

    if resolved <= now:
        if not is_same_day(resolved, now):
            logger.debug("deadline %r resolved to past %s", text, resolved.isoformat())
            return {
                "time": None,
                "error": new_deadline_error(text, "deadline must be in the future"),
            }
        resolved = resolved.add(days=1)
        logger.debug("rolled deadline %r over to %s", text, resolved.isoformat())

    return {"time": resolved, "error": None}


def parse_deadline_args(
    args: list[str],
    now: Optional[pendulum.DateTime] = None,
    resolver: Optional[DateResolver] = None,
) -> DeadlineResult:
    if len(args) == 0:
        return {"time": None, "error": new_deadline_error("", "deadline is required")}
    return parse_deadline(" ".join(args), now, resolver)
