# SPDX-License-Identifier: MIT

from typing import TypedDict


class Tags(TypedDict):
    tags: list[str]
