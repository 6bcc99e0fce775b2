# SPDX-License-Identifier: MIT

import re

MAX_SID_LENGTH = 32

_SID_PATTERN = re.compile(r"^[a-zA-Z0-9\-_.]+$")
_REPEATED_HYPHENS = re.compile(r"-{2,}")

# would collide with subcommand names
RESERVED_SIDS = frozenset({"edit", "create", "delete", "list", "show", "set"})


def validate_sid(sid: str) -> bool:
    if sid == "" or len(sid) > MAX_SID_LENGTH:
        return False
    if sid.lower() in RESERVED_SIDS:
        return False
    return _SID_PATTERN.match(sid) is not None


def convert_to_sid(display_name: str) -> str:
    """Convert a display name to a simplified ID: "My Client Project!" -> "my-client-project"."""
    result = display_name.lower().replace(" ", "-")
    result = "".join(
        character
        for character in result
        if character.isalnum() or character in "-_."
    )
    result = _REPEATED_HYPHENS.sub("-", result).strip("-")
    return result[:MAX_SID_LENGTH]


def parse_project_task(input: str) -> tuple[str, str]:
    """Split "project/task" notation. The task part is empty when absent."""
    project, _, task = input.partition("/")
    return project.strip(), task.strip()


def normalize_sid(input: str) -> str:
    sid = input.strip()
    if validate_sid(sid):
        return sid
    return convert_to_sid(sid)
