# SPDX-License-Identifier: MIT

from humantime.model.parsed_args import ParsedArgs


def get_parsed_args_template() -> ParsedArgs:
    return {
        "project_sid": "",
        "task_sid": "",
        "note": "",
        "raw_project": "",
        "raw_timestamp_start": "",
        "raw_timestamp_end": "",
        "timestamp_start": None,
        "timestamp_end": None,
        "has_project": False,
        "has_task": False,
        "has_note": False,
        "has_start": False,
        "has_end": False,
    }
