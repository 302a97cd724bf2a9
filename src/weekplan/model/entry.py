# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, Union

import pendulum

from weekplan.model.entity_id import EntityId


class _EntryBase(TypedDict):
    id: Optional[EntityId]
    week: str  # YYYY-W##
    day: str  # lowercase weekday name
    description: str
    tags: list[str]
    done: bool
    created: pendulum.DateTime


class Block(_EntryBase):
    kind: Literal["block"]
    planned_start: str
    planned_end: str
    # Recorded later with `wk actual`
    actual_start: Optional[str]
    actual_end: Optional[str]


class Note(_EntryBase):
    kind: Literal["note"]


class Unplanned(_EntryBase):
    kind: Literal["unplanned"]
    actual_start: str
    actual_end: str


type Entry = Union[Block, Note, Unplanned]
