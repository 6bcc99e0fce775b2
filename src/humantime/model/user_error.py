# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class UserError(TypedDict):
    message: str
    field: str
    value: str
    suggestion: Optional[str]
