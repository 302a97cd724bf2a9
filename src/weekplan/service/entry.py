# SPDX-License-Identifier: MIT

"""
Entry operations.

Every token is parsed before the repository is touched, so a failed
command never leaves a partial entry behind.
"""

import logging
from typing import Optional

from weekplan.exception import MissingArgument, NoteHasNoTimes, NotFound
from weekplan.model.entity_id import EntityId
from weekplan.model.entity_type import EntryKind
from weekplan.model.entry import Block, Entry, Note, Unplanned
from weekplan.parse import extract_tags, parse_time_range, resolve_day
from weekplan.repository.entry import ENTRY_REPO
from weekplan.template.entry import (
    get_block_template,
    get_note_template,
    get_unplanned_template,
)
from weekplan.time import Clock, now_local

logger = logging.getLogger(__name__)


def add_block(
    day_token: str,
    time_range: str,
    description: str,
    tag: Optional[str] = None,
    clock: Clock = now_local,
) -> Block:
    week, day = resolve_day(day_token, clock)
    start, end = parse_time_range(time_range)
    clean_description, tags = extract_tags(description, tag)

    block = get_block_template()
    block["week"] = week
    block["day"] = day
    block["description"] = clean_description
    block["planned_start"] = start
    block["planned_end"] = end
    block["tags"] = tags

    ENTRY_REPO.insert_entry(block)
    logger.info("added block %s on %s %s", block["id"], week, day)
    return block


def add_note(
    day_token: str,
    text: str,
    tag: Optional[str] = None,
    clock: Clock = now_local,
) -> Note:
    if not text.strip():
        raise MissingArgument("note text required")

    week, day = resolve_day(day_token, clock)
    clean_text, tags = extract_tags(text, tag)

    note = get_note_template()
    note["week"] = week
    note["day"] = day
    note["description"] = clean_text
    note["tags"] = tags

    ENTRY_REPO.insert_entry(note)
    logger.info("added note %s on %s %s", note["id"], week, day)
    return note


def add_unplanned(
    day_token: str,
    time_range: str,
    description: str,
    tag: Optional[str] = None,
    clock: Clock = now_local,
) -> Unplanned:
    week, day = resolve_day(day_token, clock)
    start, end = parse_time_range(time_range)
    if not description.strip():
        raise MissingArgument("description required")
    clean_description, tags = extract_tags(description, tag)

    unplanned = get_unplanned_template()
    unplanned["week"] = week
    unplanned["day"] = day
    unplanned["description"] = clean_description
    unplanned["actual_start"] = start
    unplanned["actual_end"] = end
    unplanned["tags"] = tags

    ENTRY_REPO.insert_entry(unplanned)
    logger.info("added unplanned %s on %s %s", unplanned["id"], week, day)
    return unplanned


def record_actual(id: EntityId, time_range: str) -> tuple[str, str]:
    start, end = parse_time_range(time_range)

    entry = ENTRY_REPO.get_entry(id)
    if entry is not None and entry["kind"] == EntryKind.NOTE:
        raise NoteHasNoTimes(id)

    if ENTRY_REPO.update_actual_time(id, start, end) == 0:
        raise NotFound(id)
    logger.info("recorded actual time %s-%s for %s", start, end, id)
    return start, end


def set_done(id: EntityId, done: bool) -> None:
    if ENTRY_REPO.set_done(id, done) == 0:
        raise NotFound(id)
    logger.info("set %s done=%s", id, done)


def mark_done(id: EntityId) -> None:
    set_done(id, True)


def mark_undone(id: EntityId) -> None:
    set_done(id, False)


def remove_entry(id: EntityId) -> None:
    if ENTRY_REPO.delete(id) == 0:
        raise NotFound(id)
    logger.info("deleted %s", id)


def get_entry(id: EntityId) -> Entry:
    entry = ENTRY_REPO.get_entry(id)
    if entry is None:
        raise NotFound(id)
    return entry
