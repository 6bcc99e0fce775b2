# SPDX-License-Identifier: MIT

import logging
import re
from decimal import Decimal, InvalidOperation

import pendulum

from humantime.model.result import DurationResult
from humantime.template.result import get_invalid_duration_result

logger = logging.getLogger(__name__)

MICROSECONDS_PER_UNIT: dict[str, int] = {
    "h": 3_600_000_000,
    "hr": 3_600_000_000,
    "hrs": 3_600_000_000,
    "hour": 3_600_000_000,
    "hours": 3_600_000_000,
    "m": 60_000_000,
    "min": 60_000_000,
    "mins": 60_000_000,
    "minute": 60_000_000,
    "minutes": 60_000_000,
    "s": 1_000_000,
    "sec": 1_000_000,
    "secs": 1_000_000,
    "second": 1_000_000,
    "seconds": 1_000_000,
    "ms": 1_000,
}

_NUMBER = r"\d+(?:\.\d*)?|\.\d+"

# e.g. 1h30m, 45s, 2.5h, -1h, 500ms
_COMPACT_PART = re.compile(rf"({_NUMBER})(ms|h|m|s)", re.IGNORECASE | re.ASCII)
_COMPACT_PATTERN = re.compile(
    rf"^([-+]?)((?:(?:{_NUMBER})(?:ms|h|m|s))+)$", re.IGNORECASE | re.ASCII
)

# e.g. 2 hours, 30 mins, 1 hour 30 minutes, 1h 30m, 2hr
_UNIT_WORD = (
    r"hours|hour|hrs|hr|h|minutes|minute|mins|min|m|seconds|second|secs|sec|s"
)
_LOOSE_PATTERN = re.compile(
    rf"^(\d+(?:\.\d+)?)\s*({_UNIT_WORD})?\s*(?:(\d+(?:\.\d+)?)\s*({_UNIT_WORD}))?$",
    re.IGNORECASE | re.ASCII,
)

_DURATION_INDICATORS = ("h", "m", "s")

MAX_DURATION_INPUT_LENGTH = 64


def unit_to_microseconds(value: Decimal, unit: str) -> int:
    """Unknown units count as hours."""
    per_unit = MICROSECONDS_PER_UNIT.get(unit.lower(), MICROSECONDS_PER_UNIT["h"])
    return int(value * per_unit)


def _parse_compact(text: str) -> DurationResult | None:
    if text == "0":
        return {"duration": pendulum.duration(), "valid": True}

    match = _COMPACT_PATTERN.match(text)
    if match is None:
        return None

    total = 0
    quantity = Decimal(0)
    for number, unit in _COMPACT_PART.findall(match.group(2)):
        quantity += Decimal(number)
        total += unit_to_microseconds(Decimal(number), unit)
    # a nonzero quantity below microsecond precision
    if total == 0 and quantity != 0:
        return None
    if match.group(1) == "-":
        total = -total

    return {"duration": pendulum.duration(microseconds=total), "valid": True}


def _parse_loose(text: str) -> DurationResult | None:
    match = _LOOSE_PATTERN.match(text)
    if match is None:
        return None

    first_value, first_unit, second_value, second_unit = match.groups()

    quantity = Decimal(first_value)
    total = unit_to_microseconds(quantity, first_unit or "h")
    if second_value is not None:
        quantity += Decimal(second_value)
        total += unit_to_microseconds(Decimal(second_value), second_unit)

    if total == 0 and (first_unit is None or quantity != 0):
        return None

    return {"duration": pendulum.duration(microseconds=total), "valid": True}


def parse_duration(input: str) -> DurationResult:
    """
    Parse a human-readable duration.

    Accepts compact forms ("2h", "1h30m", "45s", "2.5h", "-1h") and looser
    spelled-out forms ("2 hours", "30 mins", "1 hour 30 minutes", "1h 30m").
    A number without a unit is read as hours. Never raises: unparseable input
    gives ``valid=False`` with a zero duration.
    """
    text = input.strip()
    if text == "" or len(text) > MAX_DURATION_INPUT_LENGTH:
        return get_invalid_duration_result()

    try:
        result = _parse_compact(text)
        if result is None:
            logger.debug("%r is not a compact duration, trying loose grammar", text)
            result = _parse_loose(text)
    except (InvalidOperation, OverflowError) as e:
        logger.debug("duration %r out of range: %s", text, e)
        return get_invalid_duration_result()

    if result is None:
        return get_invalid_duration_result()
    return result


def is_duration_like(s: str) -> bool:
    text = s.strip().lower()
    if text == "" or not ("0" <= text[0] <= "9"):
        return False

    if any(indicator in text for indicator in _DURATION_INDICATORS):
        return True

    try:
        float(text)
    except ValueError:
        return False
    return True
