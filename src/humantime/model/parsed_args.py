# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class ParsedArgs(TypedDict):
    project_sid: str
    task_sid: str
    note: str
    raw_project: str
    raw_timestamp_start: str
    raw_timestamp_end: str
    # only meaningful after resolve_parsed_args
    timestamp_start: Optional[pendulum.DateTime]
    timestamp_end: Optional[pendulum.DateTime]
    has_project: bool
    has_task: bool
    has_note: bool
    has_start: bool
    has_end: bool
