# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

import pendulum

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY


def now_local(tz: Optional[str] = None) -> pendulum.DateTime:
    return pendulum.now(tz or "local")


def python_to_pendulum(
    python_value: datetime.datetime, tz: pendulum.Timezone | pendulum.FixedTimezone
) -> pendulum.DateTime:
    """Naive values are read as wall-clock time in ``tz``; aware values are converted."""
    pendulum_value = pendulum.instance(python_value, tz=tz)
    return pendulum_value.in_tz(tz)


def is_same_day(first: pendulum.DateTime, second: pendulum.DateTime) -> bool:
    """Calendar-day comparison in the timezone of ``second``."""
    return first.in_tz(second.timezone).date() == second.date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_to_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD ddd HH:mm:ss")


def datetime_to_display_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_str(datetime)


def duration_to_str(duration: datetime.timedelta) -> str:
    total_microseconds = (
        duration.days * SECONDS_PER_DAY + duration.seconds
    ) * 1_000_000 + duration.microseconds
    sign = "-" if total_microseconds < 0 else ""
    total_microseconds = abs(total_microseconds)

    seconds, microseconds = divmod(total_microseconds, 1_000_000)
    hours, seconds = divmod(seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(seconds, SECONDS_PER_MINUTE)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds or microseconds:
        if microseconds:
            parts.append(f"{seconds}.{microseconds:06d}".rstrip("0") + "s")
        else:
            parts.append(f"{seconds}s")
    if len(parts) == 0:
        return "0s"
    return sign + " ".join(parts)


def format_deadline(deadline: pendulum.DateTime, now: pendulum.DateTime) -> str:
    """
    Format a deadline for display relative to ``now``.

    Examples: "Today at 2:30 PM", "Tomorrow at 10:00 AM", "Friday at 5:00 PM",
    "Mon, Mar 2 at 9:00 AM".
    """
    local_deadline = deadline.in_tz(now.timezone)

    if is_same_day(local_deadline, now):
        date_part = "Today"
    elif is_same_day(local_deadline, now.add(days=1)):
        date_part = "Tomorrow"
    elif local_deadline - now < datetime.timedelta(days=7):
        date_part = local_deadline.format("dddd")
    else:
        date_part = local_deadline.format("ddd, MMM D")

    time_part = local_deadline.format("h:mm A")

    return f"{date_part} at {time_part}"


def format_time_until(deadline: pendulum.DateTime, now: pendulum.DateTime) -> str:
    seconds = int((deadline - now).total_seconds())
    if seconds < 0:
        return "overdue"

    if seconds < SECONDS_PER_MINUTE:
        return "less than a minute"
    if seconds < SECONDS_PER_HOUR:
        minutes = seconds // SECONDS_PER_MINUTE
        if minutes == 1:
            return "in 1 minute"
        return f"in {minutes} minutes"
    if seconds < SECONDS_PER_DAY:
        hours = seconds // SECONDS_PER_HOUR
        minutes = (seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
        hour_part = "in 1 hour" if hours == 1 else f"in {hours} hours"
        if minutes > 0:
            return f"{hour_part} {minutes} minutes"
        return hour_part
    if seconds < SECONDS_PER_WEEK:
        days = seconds // SECONDS_PER_DAY
        if days == 1:
            return "in 1 day"
        return f"in {days} days"

    weeks = seconds // SECONDS_PER_WEEK
    if weeks == 1:
        return "in 1 week"
    return f"in {weeks} weeks"
