# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

from humantime.model.user_error import UserError

DURATION_EXAMPLES: tuple[str, ...] = (
    "1h30m",
    "90m",
    "2 hours",
    "30 minutes",
    "1h 30m",
    "2.5h",
)

TIMESTAMP_EXAMPLES: tuple[str, ...] = (
    "9am",
    "5:30pm",
    "14:30",
    "yesterday at 3pm",
    "2 hours ago",
    "now",
)

DEADLINE_EXAMPLES: tuple[str, ...] = (
    "+5m",
    "+1h30m",
    "in 5 minutes",
    "tomorrow at 3pm",
    "friday 5pm",
    "next monday",
)

DATE_RANGE_EXAMPLES: tuple[str, ...] = (
    "today",
    "yesterday",
    "this week",
    "last week",
    "this month",
    "last month",
)


class TimeParseError(Exception):
    """
    A parse failure carrying the offending input and how to fix it.

    Parsers return these as values; the terminal layer converts them with
    to_user_error() before showing them.
    """

    def __init__(
        self,
        field: str,
        input: str,
        message: str,
        examples: Iterable[str] = (),
        suggestion: Optional[str] = None,
    ) -> None:
        self._field = field
        self._input = input
        self._message = message
        self._examples = tuple(examples)
        self._suggestion = suggestion
        super().__init__(f"invalid {field} '{input}': {message}")

    @property
    def field(self) -> str:
        return self._field

    @property
    def input(self) -> str:
        return self._input

    @property
    def message(self) -> str:
        return self._message

    @property
    def examples(self) -> tuple[str, ...]:
        return self._examples

    @property
    def suggestion(self) -> Optional[str]:
        return self._suggestion

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeParseError):
            return NotImplemented
        return (
            self.field == other.field
            and self.input == other.input
            and self.message == other.message
            and self.examples == other.examples
            and self.suggestion == other.suggestion
        )

    def __hash__(self) -> int:
        return hash(
            (self.field, self.input, self.message, self.examples, self.suggestion)
        )

    def __repr__(self) -> str:
        return (
            f"TimeParseError(field={self.field!r}, input={self.input!r}, "
            f"message={self.message!r})"
        )

    def format_with_examples(self) -> str:
        text = str(self)

        if len(self.examples) > 0:
            text += "\n\nValid examples:\n"
            for example in self.examples:
                text += f"  - {example}\n"

        if self.suggestion:
            text += f"\n{self.suggestion}"

        return text


def new_duration_error(input: str) -> TimeParseError:
    return TimeParseError(
        "duration",
        input,
        "could not parse duration",
        DURATION_EXAMPLES,
        "Durations can be specified as hours (h), minutes (m), or seconds (s).",
    )


def new_timestamp_error(input: str, message: str = "could not parse time") -> TimeParseError:
    return TimeParseError(
        "timestamp",
        input,
        message,
        TIMESTAMP_EXAMPLES,
        "Try using natural language like '9am', '2 hours ago', or '14:30'.",
    )


def new_deadline_error(
    input: str, message: str = "could not parse deadline"
) -> TimeParseError:
    return TimeParseError(
        "deadline",
        input,
        message,
        DEADLINE_EXAMPLES,
        "Deadlines can be relative (+5m) or absolute (friday 5pm).",
    )


def new_date_range_error(input: str) -> TimeParseError:
    return TimeParseError(
        "date range",
        input,
        "could not parse date range",
        DATE_RANGE_EXAMPLES,
        "Use period names like 'today', 'this week', or 'last month'.",
    )


def to_user_error(error: TimeParseError) -> UserError:
    suggestion = error.suggestion
    if not suggestion and len(error.examples) > 0:
        suggestion = f"Try: {', '.join(error.examples[:3])}"

    return {
        "message": error.message,
        "field": error.field,
        "value": error.input,
        "suggestion": suggestion,
    }
