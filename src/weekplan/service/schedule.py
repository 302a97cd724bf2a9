# SPDX-License-Identifier: MIT

from typing import Callable, Optional

from weekplan.exception import InvalidDay, InvalidWeek
from weekplan.model.entity_type import EntryKind
from weekplan.model.entry import Entry
from weekplan.model.schedule import DaySchedule, ScheduleLine, WeekSchedule
from weekplan.parse import format_time_range, resolve_day
from weekplan.query.sort import sort_entries
from weekplan.repository.entry import ENTRY_REPO
from weekplan.time import Clock, now_local
from weekplan.week import (
    DAYS,
    current_week_key,
    day_date_caption,
    next_week_key,
    parse_week_key,
    previous_week_key,
    week_date_range,
)

NOTE_MARKER = "•"
DONE_MARKER = "✓"
UNPLANNED_MARKER = "⚡"
BLANK_MARKER = " "
ACTUAL_ARROW = "→"


def status_marker(entry: Entry) -> str:
    if entry["kind"] == EntryKind.NOTE:
        return NOTE_MARKER
    if entry["kind"] == EntryKind.UNPLANNED:
        return UNPLANNED_MARKER
    if entry["done"]:
        return DONE_MARKER
    return BLANK_MARKER


def time_annotation(entry: Entry) -> str:
    if entry["kind"] == EntryKind.NOTE:
        return ""
    if entry["kind"] == EntryKind.UNPLANNED:
        return format_time_range(entry["actual_start"], entry["actual_end"])
    planned = format_time_range(entry["planned_start"], entry["planned_end"])
    if entry["actual_start"] is not None:
        actual = format_time_range(entry["actual_start"], entry["actual_end"])
        return f"{planned} {ACTUAL_ARROW} {actual}"
    return planned


def tag_annotation(tags: list[str]) -> str:
    return " ".join(f"#{tag}" for tag in tags)


def render_entry(entry: Entry) -> ScheduleLine:
    return {
        "id": entry["id"] or "",
        "is_note": entry["kind"] == EntryKind.NOTE,
        "status_marker": status_marker(entry),
        "time_annotation": time_annotation(entry),
        "description": entry["description"],
        "tag_annotation": tag_annotation(entry["tags"]),
    }


def day_schedule(week: str, day: str) -> DaySchedule:
    entries = sort_entries(ENTRY_REPO.query_by_week_day(week, day))
    return {
        "day": day,
        "title": day.capitalize(),
        "date": day_date_caption(week, day),
        "lines": [render_entry(entry) for entry in entries],
    }


def week_schedule(week: str, day: Optional[str] = None) -> WeekSchedule:
    """
    Build the schedule for ``week``, optionally limited to a single ``day``.

    All seven days are present (empty ones included) unless ``day`` is given.
    """
    parse_week_key(week)
    if day is not None and day not in DAYS:
        raise InvalidDay(day)

    days = DAYS if day is None else [day]
    return {
        "week": week,
        "date_range": week_date_range(week),
        "previous_week": _adjacent_week(previous_week_key, week),
        "next_week": _adjacent_week(next_week_key, week),
        "days": [day_schedule(week, schedule_day) for schedule_day in days],
    }


def _adjacent_week(step: Callable[[str], str], week: str) -> Optional[str]:
    try:
        return step(week)
    except InvalidWeek:
        return None


def select_week(
    week: Optional[str] = None,
    last_week: bool = False,
    next_week: bool = False,
    clock: Clock = now_local,
) -> str:
    """Week shown by a listing: explicit week, else the current one shifted."""
    if week is not None:
        parse_week_key(week)
        return week

    selected = current_week_key(clock)
    if last_week:
        selected = previous_week_key(selected)
    elif next_week:
        selected = next_week_key(selected)
    return selected


def resolve_day_filter(token: Optional[str], clock: Clock = now_local) -> Optional[str]:
    """Weekday named by a listing's day argument; the token's week is ignored."""
    if token is None:
        return None
    _, day = resolve_day(token, clock)
    return day
