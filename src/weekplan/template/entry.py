# SPDX-License-Identifier: MIT

from weekplan.model.entity_type import EntryKind
from weekplan.model.entry import Block, Note, Unplanned
from weekplan.time import now_utc


def get_block_template() -> Block:
    return {
        "id": None,
        "kind": EntryKind.BLOCK,
        "week": "",  # Must be set
        "day": "",  # Must be set
        "description": "",
        "planned_start": "",  # Must be set
        "planned_end": "",  # Must be set
        "actual_start": None,
        "actual_end": None,
        "tags": [],
        "done": False,
        "created": now_utc(),
    }


def get_note_template() -> Note:
    return {
        "id": None,
        "kind": EntryKind.NOTE,
        "week": "",  # Must be set
        "day": "",  # Must be set
        "description": "",
        "tags": [],
        "done": False,
        "created": now_utc(),
    }


def get_unplanned_template() -> Unplanned:
    # Unplanned entries record something that already happened
    return {
        "id": None,
        "kind": EntryKind.UNPLANNED,
        "week": "",  # Must be set
        "day": "",  # Must be set
        "description": "",
        "actual_start": "",  # Must be set
        "actual_end": "",  # Must be set
        "tags": [],
        "done": True,
        "created": now_utc(),
    }
