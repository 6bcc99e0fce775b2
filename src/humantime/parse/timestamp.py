# SPDX-License-Identifier: MIT

import logging
import re
from typing import Optional

import pendulum

from humantime.model.result import TimestampResult
from humantime.parse.errors import new_timestamp_error
from humantime.parse.natural import DEFAULT_RESOLVER, DateResolver
from humantime.parse.period import period_start
from humantime.time import now_local

logger = logging.getLogger(__name__)

# Natural-language libraries disagree on where weeks and quarters begin, so
# these phrases are resolved locally.
_PERIOD_PATTERN = re.compile(
    r"^(this|current|last|previous)\s+(hour|day|week|month|quarter|year)$",
    re.IGNORECASE,
)


def parse_timestamp(
    input: str,
    now: Optional[pendulum.DateTime] = None,
    resolver: Optional[DateResolver] = None,
) -> TimestampResult:
    """
    Parse a timestamp expression into an instant.

    Empty input and "now" give the current instant, "this week" style phrases
    give the start of that period, and anything else ("9am", "2 hours ago",
    "yesterday at 3pm", "2026-01-15 14:00") goes to the natural-language
    resolver with ``now`` as the reference.
    """
    if now is None:
        now = now_local()
    text = input.strip()

    if text == "" or text.lower() == "now":
        return {"time": now, "error": None}

    match = _PERIOD_PATTERN.match(text)
    if match is not None:
        return {"time": period_start(match.group(1), match.group(2), now), "error": None}

    resolved = (resolver or DEFAULT_RESOLVER).resolve(text, now)
    if resolved is None:
        logger.debug("could not resolve timestamp %r", text)
        return {"time": None, "error": new_timestamp_error(text)}

    return {"time": resolved, "error": None}
