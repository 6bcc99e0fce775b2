# SPDX-License-Identifier: MIT

import logging
import re
from enum import StrEnum
from typing import Optional

import pendulum

from humantime.model.parsed_args import ParsedArgs
from humantime.parse.errors import TimeParseError
from humantime.parse.natural import DateResolver
from humantime.parse.sid import normalize_sid, parse_project_task
from humantime.parse.timestamp import parse_timestamp
from humantime.parse.tokenize import is_time_like, tokenize
from humantime.template.parsed_args import get_parsed_args_template
from humantime.time import now_local

logger = logging.getLogger(__name__)

SKIP_WORDS = frozenset({"block", "working", "work", "all", "at", "from", "note"})
PROJECT_KEYWORDS = frozenset({"on", "to", "of"})
END_KEYWORDS = frozenset({"end", "ended", "until", "to"})

# with note "..." / with note '...'
_NOTE_PATTERN = re.compile(r"with\s+note\s+(['\"])(.+?)\1", re.IGNORECASE | re.DOTALL)


class TokenClass(StrEnum):
    SKIP = "skip"
    PROJECT_KEYWORD = "project_keyword"
    END_KEYWORD = "end_keyword"
    # "to" introduces either a project ("to myproject") or an end time ("9am to 5pm")
    PROJECT_OR_END_KEYWORD = "project_or_end_keyword"
    VALUE = "value"


class ScanState(StrEnum):
    SCANNING = "scanning"
    EXPECT_PROJECT = "expect_project"
    EXPECT_PROJECT_OR_END = "expect_project_or_end"


class TimestampTarget(StrEnum):
    START = "start"
    END = "end"


KEYWORD_TRANSITIONS: dict[TokenClass, ScanState] = {
    TokenClass.PROJECT_KEYWORD: ScanState.EXPECT_PROJECT,
    TokenClass.PROJECT_OR_END_KEYWORD: ScanState.EXPECT_PROJECT_OR_END,
    TokenClass.END_KEYWORD: ScanState.SCANNING,
}


def classify_token(token: str) -> TokenClass:
    token_lower = token.lower()
    if token_lower in SKIP_WORDS:
        return TokenClass.SKIP

    is_project_keyword = token_lower in PROJECT_KEYWORDS
    is_end_keyword = token_lower in END_KEYWORDS
    if is_project_keyword and is_end_keyword:
        return TokenClass.PROJECT_OR_END_KEYWORD
    if is_project_keyword:
        return TokenClass.PROJECT_KEYWORD
    if is_end_keyword:
        return TokenClass.END_KEYWORD
    return TokenClass.VALUE


class ArgumentScanner:
    """Single left-to-right pass over tokens, filling a ParsedArgs."""

    def __init__(self, parsed_args: ParsedArgs) -> None:
        self.parsed_args = parsed_args
        self.state = ScanState.SCANNING
        self.target = TimestampTarget.START
        self.timestamp_tokens: list[str] = []

    def scan(self, tokens: list[str]) -> None:
        for index, token in enumerate(tokens):
            token_class = classify_token(token)

            if token_class == TokenClass.SKIP:
                continue

            if token_class in KEYWORD_TRANSITIONS:
                if token_class == TokenClass.END_KEYWORD:
                    self.__switch_to_end()
                self.state = KEYWORD_TRANSITIONS[token_class]
                continue

            match self.state:
                case ScanState.EXPECT_PROJECT:
                    self.__take_project_or_timestamp(token)
                case ScanState.EXPECT_PROJECT_OR_END:
                    if is_time_like(token):
                        self.__switch_to_end()
                    self.__take_project_or_timestamp(token)
                case ScanState.SCANNING:
                    if index == 0 and self.__is_command_word(token, tokens):
                        continue
                    self.timestamp_tokens.append(token)

        self.__flush()

    def __take_project_or_timestamp(self, token: str) -> None:
        self.state = ScanState.SCANNING
        if is_time_like(token):
            self.timestamp_tokens.append(token)
            return

        project_sid, task_sid = parse_project_task(token)
        self.parsed_args["raw_project"] = token
        self.parsed_args["project_sid"] = project_sid
        self.parsed_args["task_sid"] = task_sid
        self.parsed_args["has_project"] = project_sid != ""
        self.parsed_args["has_task"] = task_sid != ""

    def __is_command_word(self, token: str, tokens: list[str]) -> bool:
        # "blocks on myproject": the leading word names the command
        if is_time_like(token) or len(tokens) < 2:
            return False
        return tokens[1].lower() in PROJECT_KEYWORDS

    def __switch_to_end(self) -> None:
        self.__flush()
        self.target = TimestampTarget.END

    def __flush(self) -> None:
        if len(self.timestamp_tokens) == 0:
            return

        raw_timestamp = " ".join(self.timestamp_tokens)
        if self.target == TimestampTarget.END:
            self.parsed_args["raw_timestamp_end"] = raw_timestamp
            self.parsed_args["has_end"] = True
        else:
            self.parsed_args["raw_timestamp_start"] = raw_timestamp
            self.parsed_args["has_start"] = True
        self.timestamp_tokens = []


def parse_args(args: list[str]) -> ParsedArgs:
    """
    Extract project/task, note and raw start/end timestamps from command tokens.

    Example: ["on", "myproject/mytask", "9am", "to", "5pm", "with", "note",
    '"standup"'] gives project "myproject", task "mytask", note "standup",
    start "9am" and end "5pm". Timestamps stay raw until resolve_parsed_args().
    """
    parsed_args = get_parsed_args_template()
    if len(args) == 0:
        return parsed_args

    full_input = " ".join(args)

    # notes may contain spaces, so pull them out before tokenizing; the first
    # one wins and every note clause is dropped
    note_match = _NOTE_PATTERN.search(full_input)
    if note_match is not None:
        parsed_args["note"] = note_match.group(2)
        parsed_args["has_note"] = True
        full_input = _NOTE_PATTERN.sub("", full_input)

    ArgumentScanner(parsed_args).scan(tokenize(full_input))

    logger.debug(
        "parsed %r: project=%r task=%r start=%r end=%r",
        args,
        parsed_args["project_sid"],
        parsed_args["task_sid"],
        parsed_args["raw_timestamp_start"],
        parsed_args["raw_timestamp_end"],
    )
    return parsed_args


def merge_parsed_args(
    parsed_args: ParsedArgs,
    project: Optional[str] = None,
    task: Optional[str] = None,
    note: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> None:
    """Explicit flag values win over natural-language values; empty ones are ignored."""
    if project:
        parsed_args["project_sid"] = project
        parsed_args["has_project"] = True
    if task:
        parsed_args["task_sid"] = task
        parsed_args["has_task"] = True
    if note:
        parsed_args["note"] = note
        parsed_args["has_note"] = True
    if start:
        parsed_args["raw_timestamp_start"] = start
        parsed_args["has_start"] = True
    if end:
        parsed_args["raw_timestamp_end"] = end
        parsed_args["has_end"] = True


def resolve_parsed_args(
    parsed_args: ParsedArgs,
    now: Optional[pendulum.DateTime] = None,
    resolver: Optional[DateResolver] = None,
) -> Optional[TimeParseError]:
    """
    Convert raw strings into typed values in place.

    Identifiers are normalized, the start timestamp defaults to ``now`` and the
    end timestamp is only resolved when present. Returns the first parse error.
    """
    if now is None:
        now = now_local()

    if parsed_args["raw_project"] != "" and parsed_args["project_sid"] == "":
        project_sid, task_sid = parse_project_task(parsed_args["raw_project"])
        parsed_args["project_sid"] = project_sid
        parsed_args["task_sid"] = task_sid
        parsed_args["has_project"] = project_sid != ""
        parsed_args["has_task"] = task_sid != ""

    if parsed_args["project_sid"] != "":
        parsed_args["project_sid"] = normalize_sid(parsed_args["project_sid"])
    if parsed_args["task_sid"] != "":
        parsed_args["task_sid"] = normalize_sid(parsed_args["task_sid"])

    if parsed_args["raw_timestamp_start"] != "":
        start_result = parse_timestamp(parsed_args["raw_timestamp_start"], now, resolver)
        if start_result["error"] is not None:
            return start_result["error"]
        parsed_args["timestamp_start"] = start_result["time"]
    else:
        parsed_args["timestamp_start"] = now

    if parsed_args["raw_timestamp_end"] != "":
        end_result = parse_timestamp(parsed_args["raw_timestamp_end"], now, resolver)
        if end_result["error"] is not None:
            return end_result["error"]
        parsed_args["timestamp_end"] = end_result["time"]

    return None
