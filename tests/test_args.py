"""Tests for argument extraction, flag merging and resolution."""

import pendulum
import pytest

from humantime.parse.args import (
    TokenClass,
    classify_token,
    merge_parsed_args,
    parse_args,
    resolve_parsed_args,
)
from humantime.template.parsed_args import get_parsed_args_template
from conftest import FakeResolver


class TestClassifyToken:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("block", TokenClass.SKIP),
            ("At", TokenClass.SKIP),
            ("on", TokenClass.PROJECT_KEYWORD),
            ("of", TokenClass.PROJECT_KEYWORD),
            ("until", TokenClass.END_KEYWORD),
            ("ENDED", TokenClass.END_KEYWORD),
            ("to", TokenClass.PROJECT_OR_END_KEYWORD),
            ("9am", TokenClass.VALUE),
            ("myproject", TokenClass.VALUE),
        ],
    )
    def test_classes(self, token, expected):
        assert classify_token(token) == expected


class TestParseArgs:
    def test_full_command(self):
        parsed = parse_args(
            ["on", "myproject/mytask", "9am", "to", "5pm", "with", "note", '"standup"']
        )

        assert parsed["project_sid"] == "myproject"
        assert parsed["task_sid"] == "mytask"
        assert parsed["note"] == "standup"
        assert parsed["raw_timestamp_start"] == "9am"
        assert parsed["raw_timestamp_end"] == "5pm"
        assert parsed["has_project"]
        assert parsed["has_task"]
        assert parsed["has_note"]
        assert parsed["has_start"]
        assert parsed["has_end"]

    def test_empty(self):
        assert parse_args([]) == get_parsed_args_template()

    def test_project_only(self):
        parsed = parse_args(["on", "myproject"])

        assert parsed["project_sid"] == "myproject"
        assert parsed["task_sid"] == ""
        assert parsed["has_project"]
        assert not parsed["has_task"]
        assert not parsed["has_start"]

    def test_multi_word_timestamp_before_project(self):
        parsed = parse_args(["2", "hours", "ago", "on", "client"])

        assert parsed["raw_timestamp_start"] == "2 hours ago"
        assert parsed["project_sid"] == "client"

    def test_to_introduces_project(self):
        parsed = parse_args(["switch", "to", "myproject"])

        assert parsed["project_sid"] == "myproject"
        assert not parsed["has_end"]

    def test_to_introduces_end_time(self):
        parsed = parse_args(["9am", "to", "5pm", "on", "proj"])

        assert parsed["raw_timestamp_start"] == "9am"
        assert parsed["raw_timestamp_end"] == "5pm"
        assert parsed["project_sid"] == "proj"

    def test_until_introduces_end_time(self):
        parsed = parse_args(["on", "proj", "from", "9am", "until", "noon", "today"])

        assert parsed["raw_timestamp_start"] == "9am"
        assert parsed["raw_timestamp_end"] == "noon today"

    def test_end_without_start(self):
        parsed = parse_args(["ended", "5pm"])

        assert not parsed["has_start"]
        assert parsed["raw_timestamp_end"] == "5pm"

    def test_time_like_token_after_project_keyword_is_a_timestamp(self):
        parsed = parse_args(["on", "yesterday"])

        assert not parsed["has_project"]
        assert parsed["raw_timestamp_start"] == "yesterday"

    def test_skip_words_are_dropped(self):
        parsed = parse_args(["working", "on", "myproject", "from", "9am"])

        assert parsed["project_sid"] == "myproject"
        assert parsed["raw_timestamp_start"] == "9am"

    def test_leading_command_word_is_ignored(self):
        parsed = parse_args(["blocks", "on", "myproject"])

        assert parsed["project_sid"] == "myproject"
        assert not parsed["has_start"]

    def test_single_quoted_note(self):
        parsed = parse_args(["on", "proj", "with", "note", "'fix the login bug'"])

        assert parsed["note"] == "fix the login bug"
        assert parsed["project_sid"] == "proj"
        assert not parsed["has_start"]

    def test_note_keeps_keywords(self):
        parsed = parse_args(["9am", "with", "note", '"talk to team until done"'])

        assert parsed["note"] == "talk to team until done"
        assert parsed["raw_timestamp_start"] == "9am"
        assert not parsed["has_end"]
        assert not parsed["has_project"]

    def test_repeated_note_clauses_are_all_removed(self):
        parsed = parse_args(
            ["on", "p", "with", "note", '"a"', "with", "note", '"b"']
        )

        assert parsed["note"] == "a"
        assert parsed["project_sid"] == "p"
        assert not parsed["has_start"]
        assert parsed["raw_timestamp_start"] == ""

    def test_quoted_project_name(self):
        parsed = parse_args(["on", '"my project"'])

        assert parsed["project_sid"] == "my project"
        assert parsed["raw_project"] == "my project"

    def test_time_prefixed_project_name_is_read_as_time(self):
        parsed = parse_args(["on", "marketing"])

        assert not parsed["has_project"]
        assert parsed["raw_timestamp_start"] == "marketing"


class TestMergeParsedArgs:
    def test_flag_overrides(self):
        parsed = get_parsed_args_template()
        parsed["project_sid"] = "original"
        parsed["has_project"] = True

        merge_parsed_args(parsed, project="override")

        assert parsed["project_sid"] == "override"

    def test_empty_flag_keeps_value(self):
        parsed = get_parsed_args_template()
        parsed["project_sid"] = "original"
        parsed["has_project"] = True

        merge_parsed_args(parsed, project="")

        assert parsed["project_sid"] == "original"
        assert parsed["has_project"]

    def test_all_flags(self):
        parsed = parse_args(["on", "a/b", "9am", "to", "5pm"])

        merge_parsed_args(parsed, "p", "t", "n", "8am", "4pm")

        assert parsed["project_sid"] == "p"
        assert parsed["task_sid"] == "t"
        assert parsed["note"] == "n"
        assert parsed["raw_timestamp_start"] == "8am"
        assert parsed["raw_timestamp_end"] == "4pm"
        assert parsed["has_note"]

    def test_flags_set_presence(self):
        parsed = get_parsed_args_template()

        merge_parsed_args(parsed, task="t", end="5pm")

        assert parsed["has_task"]
        assert parsed["has_end"]
        assert not parsed["has_project"]
        assert not parsed["has_start"]


class TestResolveParsedArgs:
    def test_start_defaults_to_now(self, now, fake_resolver):
        parsed = parse_args(["on", "proj"])

        error = resolve_parsed_args(parsed, now, fake_resolver)

        assert error is None
        assert parsed["timestamp_start"] == now
        assert parsed["timestamp_end"] is None
        assert not parsed["has_start"]

    def test_resolves_both_ends(self, now):
        nine = pendulum.datetime(2026, 1, 15, 9, tz="UTC")
        five = pendulum.datetime(2026, 1, 15, 17, tz="UTC")
        resolver = FakeResolver({"9am": nine, "5pm": five})
        parsed = parse_args(["9am", "to", "5pm"])

        error = resolve_parsed_args(parsed, now, resolver)

        assert error is None
        assert parsed["timestamp_start"] == nine
        assert parsed["timestamp_end"] == five

    def test_start_error_is_returned(self, now, fake_resolver):
        parsed = parse_args(["on", "proj", "12:99"])

        error = resolve_parsed_args(parsed, now, fake_resolver)

        assert error is not None
        assert error.field == "timestamp"
        assert error.input == "12:99"

    def test_end_error_is_returned(self, now):
        resolver = FakeResolver({"9am": pendulum.datetime(2026, 1, 15, 9, tz="UTC")})
        parsed = parse_args(["9am", "until", "12:99"])

        error = resolve_parsed_args(parsed, now, resolver)

        assert error is not None
        assert error.input == "12:99"

    def test_identifiers_are_normalized(self, now, fake_resolver):
        parsed = parse_args(["on", '"My Client/Big Task"'])

        resolve_parsed_args(parsed, now, fake_resolver)

        assert parsed["project_sid"] == "my-client"
        assert parsed["task_sid"] == "big-task"

    def test_raw_project_is_split_when_needed(self, now, fake_resolver):
        parsed = get_parsed_args_template()
        parsed["raw_project"] = "proj/task"

        resolve_parsed_args(parsed, now, fake_resolver)

        assert parsed["project_sid"] == "proj"
        assert parsed["task_sid"] == "task"
        assert parsed["has_project"]
        assert parsed["has_task"]

    def test_period_phrase_is_resolved_without_resolver(self, now, fake_resolver):
        parsed = parse_args(["this", "week", "on", "proj"])

        resolve_parsed_args(parsed, now, fake_resolver)

        assert parsed["timestamp_start"] == pendulum.datetime(2026, 1, 12, tz="UTC")
        assert fake_resolver.calls == []
