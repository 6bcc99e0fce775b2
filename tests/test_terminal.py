"""Command-line tests driven through typer's CliRunner."""

import json

import pytest
from typer.testing import CliRunner

from humantime import configuration
from humantime.parse.validate import validate_and_suggest
from humantime.repository.configuration import CONFIGURATION_REPO
from humantime.terminal.app import app
from humantime.terminal.period import complete_period
from humantime.view.error import error_envelope

NOW = "2026-01-15T18:00:00+00:00"

runner = CliRunner()


def invoke_json(*args: str):
    result = runner.invoke(app, ["--json", "--now", NOW, *args])
    return result, json.loads(result.stdout)


class TestDurationCommand:
    def test_json(self):
        result, data = invoke_json("duration", "1h30m")

        assert result.exit_code == 0
        assert data == {"input": "1h30m", "seconds": 5400.0}

    def test_joins_words(self):
        result, data = invoke_json("d", "2", "hours")

        assert result.exit_code == 0
        assert data["seconds"] == 7200.0

    def test_table(self):
        result = runner.invoke(app, ["duration", "1h30m"])

        assert result.exit_code == 0
        assert "1h 30m" in result.stdout

    def test_invalid_is_bad_parameter(self):
        result = runner.invoke(app, ["duration", "abc"])

        assert result.exit_code == 2

    def test_invalid_json_envelope(self):
        result, data = invoke_json("duration", "abc")

        assert result.exit_code == 1
        assert data["error"]["field"] == "duration"
        assert data["error"]["value"] == "abc"
        assert data["error"]["message"] == "could not parse duration"
        assert "1h30m" in data["error"]["examples"]

    def test_error_matches_validation(self):
        result, data = invoke_json("duration", "0.0000000001s")

        assert result.exit_code == 1
        assert data == error_envelope(validate_and_suggest("duration", "0.0000000001s"))


class TestTimestampCommand:
    def test_period_phrase(self):
        result, data = invoke_json("timestamp", "this", "week")

        assert result.exit_code == 0
        assert data["time"] == "2026-01-12T00:00:00+00:00"

    def test_natural_language(self):
        result, data = invoke_json("ts", "2", "hours", "ago")

        assert result.exit_code == 0
        assert data["time"] == "2026-01-15T16:00:00+00:00"

    def test_configured_timezone(self):
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text("timezone: Asia/Tokyo\n")
        CONFIGURATION_REPO.reload()

        result, data = invoke_json("timestamp", "now")

        assert result.exit_code == 0
        assert data["time"] == "2026-01-16T03:00:00+09:00"

    def test_invalid(self):
        result, data = invoke_json("timestamp", "xyzzy", "plugh")

        assert result.exit_code == 1
        assert data["error"]["field"] == "timestamp"


class TestDeadlineCommand:
    def test_relative(self):
        result, data = invoke_json("deadline", "+90m")

        assert result.exit_code == 0
        assert data["time"] == "2026-01-15T19:30:00+00:00"
        assert data["due"] == "in 1 hour 30 minutes"

    def test_rollover(self):
        result, data = invoke_json("dl", "5pm")

        assert result.exit_code == 0
        assert data["time"] == "2026-01-16T17:00:00+00:00"

    def test_missing(self):
        result, data = invoke_json("deadline")

        assert result.exit_code == 1
        assert data["error"]["message"] == "deadline is required"

    def test_table(self):
        result = runner.invoke(app, ["--now", NOW, "deadline", "+2d"])

        assert result.exit_code == 0
        assert "in 2 days" in result.stdout


class TestPeriodCommand:
    def test_json(self):
        result, data = invoke_json("period", "last", "month")

        assert result.exit_code == 0
        assert data == {
            "period": "last month",
            "start": "2025-12-01T00:00:00+00:00",
            "end": "2026-01-01T00:00:00+00:00",
        }

    def test_completion(self):
        assert complete_period("this") == ["this week", "this month", "this year"]


class TestArgsCommand:
    def test_json(self):
        result, data = invoke_json(
            "args", "on", "myproject/mytask", "9am", "to", "5pm", "with", "note", '"standup"'
        )

        assert result.exit_code == 0
        assert data["project_sid"] == "myproject"
        assert data["task_sid"] == "mytask"
        assert data["note"] == "standup"
        assert data["raw_timestamp_start"] == "9am"
        assert data["raw_timestamp_end"] == "5pm"
        assert data["timestamp_start"] == "2026-01-15T09:00:00+00:00"
        assert data["timestamp_end"] == "2026-01-15T17:00:00+00:00"

    def test_flags_override(self):
        result, data = invoke_json("args", "-p", "override", "--", "on", "original", "this", "week")

        assert result.exit_code == 0
        assert data["project_sid"] == "override"
        assert data["timestamp_start"] == "2026-01-12T00:00:00+00:00"

    def test_start_defaults_to_now(self):
        result, data = invoke_json("a", "on", "proj")

        assert result.exit_code == 0
        assert data["project_sid"] == "proj"
        assert data["timestamp_start"] == NOW
        assert data["timestamp_end"] is None
        assert data["has_start"] is False


class TestConfigCommand:
    def test_json(self):
        result, data = invoke_json("config")

        assert result.exit_code == 0
        assert data["languages"] == ["en"]
        assert data["log_level"] == "WARNING"


class TestGlobalOptions:
    def test_bad_reference_time(self):
        result = runner.invoke(app, ["--now", "not a time", "duration", "2h"])

        assert result.exit_code == 2

    @pytest.mark.parametrize("alias", ["d", "duration"])
    def test_aliases(self, alias):
        result = runner.invoke(app, ["--json", alias, "45s"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["seconds"] == 45.0
