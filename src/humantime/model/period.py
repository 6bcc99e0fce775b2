# SPDX-License-Identifier: MIT

from enum import StrEnum


class PeriodModifier(StrEnum):
    THIS = "this"
    CURRENT = "current"
    LAST = "last"
    PREVIOUS = "previous"


class PeriodUnit(StrEnum):
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
