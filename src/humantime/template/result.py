# SPDX-License-Identifier: MIT

import pendulum

from humantime.model.result import DurationResult


def get_invalid_duration_result() -> DurationResult:
    return {"duration": pendulum.duration(), "valid": False}
