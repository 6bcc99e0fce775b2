# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

import pendulum

_json_output: ContextVar[bool] = ContextVar("json_output", default=False)
_reference_time: ContextVar[Optional[pendulum.DateTime]] = ContextVar(
    "reference_time", default=None
)


def set_json_output(value: bool) -> None:
    _json_output.set(value)


def get_json_output() -> bool:
    return _json_output.get()


def set_reference_time(value: Optional[pendulum.DateTime]) -> None:
    _reference_time.set(value)


def get_reference_time() -> Optional[pendulum.DateTime]:
    return _reference_time.get()
