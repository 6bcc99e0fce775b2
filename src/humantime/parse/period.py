# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from humantime.model.period import PeriodModifier, PeriodUnit
from humantime.model.result import CalendarRange
from humantime.time import now_local

PERIOD_NAMES: tuple[str, ...] = (
    "today",
    "yesterday",
    "this week",
    "last week",
    "this month",
    "last month",
    "this year",
    "last year",
)

_CURRENT_MODIFIERS = (PeriodModifier.THIS, PeriodModifier.CURRENT)


def start_of_day(now: pendulum.DateTime) -> pendulum.DateTime:
    return now.start_of("day")


def start_of_week(now: pendulum.DateTime) -> pendulum.DateTime:
    """Midnight of the most recent Monday."""
    return now.start_of("day").subtract(days=now.weekday())


def start_of_quarter(now: pendulum.DateTime) -> pendulum.DateTime:
    first_month = ((now.month - 1) // 3) * 3 + 1
    return now.start_of("month").set(month=first_month)


def period_start(
    modifier: str, unit: str, now: Optional[pendulum.DateTime] = None
) -> pendulum.DateTime:
    """
    Start of the current or previous hour/day/week/month/quarter/year.

    "this" and "current" select the period containing ``now``; "last" and
    "previous" select the one before it. An unknown unit yields ``now``.
    """
    if now is None:
        now = now_local()
    previous = modifier.lower() not in _CURRENT_MODIFIERS

    match unit.lower():
        case PeriodUnit.HOUR:
            start = now.start_of("hour")
            return start.subtract(hours=1) if previous else start
        case PeriodUnit.DAY:
            start = start_of_day(now)
            return start.subtract(days=1) if previous else start
        case PeriodUnit.WEEK:
            start = start_of_week(now)
            return start.subtract(days=7) if previous else start
        case PeriodUnit.MONTH:
            start = now.start_of("month")
            return start.subtract(months=1) if previous else start
        case PeriodUnit.QUARTER:
            start = start_of_quarter(now)
            return start.subtract(months=3) if previous else start
        case PeriodUnit.YEAR:
            start = now.start_of("year")
            return start.subtract(years=1) if previous else start
    return now


def get_period_range(
    period: str, now: Optional[pendulum.DateTime] = None
) -> CalendarRange:
    """
    Calendar range for a named period such as "today", "this week" or
    "last month".

    Matching is loose: names starting with "today" or "yesterday", or
    containing "week", "month" or "year". For week/month/year ranges a
    "this"/"current" prefix selects the current period and anything else the
    previous one. Unrecognized names fall back to today.
    """
    if now is None:
        now = now_local()
    name = period.lower()
    current = name.startswith(_CURRENT_MODIFIERS)

    if name.startswith("today"):
        start = start_of_day(now)
        end = start.add(days=1)
    elif name.startswith("yesterday"):
        start = start_of_day(now).subtract(days=1)
        end = start.add(days=1)
    elif "week" in name:
        start = start_of_week(now)
        if not current:
            start = start.subtract(days=7)
        end = start.add(days=7)
    elif "month" in name:
        start = now.start_of("month")
        if not current:
            start = start.subtract(months=1)
        end = start.add(months=1)
    elif "year" in name:
        start = now.start_of("year")
        if not current:
            start = start.subtract(years=1)
        end = start.add(years=1)
    else:
        start = start_of_day(now)
        end = start.add(days=1)

    return {"start": start, "end": end}
