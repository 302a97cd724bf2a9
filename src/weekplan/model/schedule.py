# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from weekplan.model.entity_id import EntityId


class ScheduleLine(TypedDict):
    id: EntityId
    is_note: bool
    status_marker: str
    time_annotation: str
    description: str
    tag_annotation: str


class DaySchedule(TypedDict):
    day: str
    title: str
    date: str
    lines: list[ScheduleLine]


class WeekSchedule(TypedDict):
    week: str
    date_range: str
    # None at the edges of the calendar
    previous_week: Optional[str]
    next_week: Optional[str]
    days: list[DaySchedule]
