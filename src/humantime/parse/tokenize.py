# SPDX-License-Identifier: MIT

# Prefix matching means any token that merely starts with one of these words
# counts as time-like, e.g. a project called "mayday" or "marketing".
TIME_LIKE_WORDS: tuple[str, ...] = (
    "now",
    "today",
    "yesterday",
    "tomorrow",
    "hour",
    "hours",
    "minute",
    "minutes",
    "second",
    "seconds",
    "day",
    "days",
    "week",
    "weeks",
    "month",
    "months",
    "year",
    "years",
    "ago",
    "last",
    "this",
    "next",
    "previous",
    "current",
    "am",
    "pm",
    "morning",
    "afternoon",
    "evening",
    "night",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)

QUOTE_CHARACTERS = ("'", '"')


def tokenize(input: str) -> list[str]:
    """
    Split input on whitespace, keeping quoted spans together.

    Either quote character opens a span that only the same character closes;
    the other quote character inside it is literal. An unterminated span runs
    to the end of the input.
    """
    tokens: list[str] = []
    current: list[str] = []
    quote_char = ""

    for character in input:
        if quote_char == "" and character in QUOTE_CHARACTERS:
            quote_char = character
            continue
        if character == quote_char:
            quote_char = ""
            continue
        if character.isspace() and quote_char == "":
            if len(current) > 0:
                tokens.append("".join(current))
                current = []
            continue
        current.append(character)

    if len(current) > 0:
        tokens.append("".join(current))

    return tokens


def is_time_like(token: str) -> bool:
    """
    Whether a token looks like part of a time expression.

    Anything starting with an ASCII digit counts, so bare numbers such as the
    "2" in "2 hours ago" stay with the timestamp instead of becoming a project.
    """
    token_lower = token.lower()
    if token_lower.startswith(TIME_LIKE_WORDS):
        return True

    return len(token) > 0 and "0" <= token[0] <= "9"
