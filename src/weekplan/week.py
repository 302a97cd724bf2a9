# SPDX-License-Identifier: MIT

"""
Week key arithmetic.

Week keys look like ``2025-W06``. Stepping forward or backward wraps at
week 52: week 53 is never produced by stepping, even in years that have an
ISO week 53. Keys derived from an explicit calendar date use the true ISO
week and may therefore be ``W53``.
"""

import re

import pendulum

from weekplan.exception import InvalidDay, InvalidWeek
from weekplan.time import Clock, date_to_display_str, now_local

DAYS: list[str] = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]

LAST_WEEK_NUMBER = 52

_WEEK_KEY_PATTERN = re.compile(r"^(\d{4})-W(\d{2})$", re.ASCII)


def format_week_key(year: int, week_number: int) -> str:
    return f"{year:04d}-W{week_number:02d}"


def parse_week_key(week: str) -> tuple[int, int]:
    match = _WEEK_KEY_PATTERN.match(week)
    if match is None:
        raise InvalidWeek(week)
    year = int(match.group(1))
    week_number = int(match.group(2))
    if week_number < 1 or week_number > 53:
        raise InvalidWeek(week)
    try:
        # the whole week, Monday to Sunday, must be a representable date
        _anchor_monday(year, week_number).add(days=6)
    except (ValueError, OverflowError):
        raise InvalidWeek(week)
    return year, week_number


def is_week_key(week: str) -> bool:
    try:
        parse_week_key(week)
    except InvalidWeek:
        return False
    return True


def week_key_for_date(date: pendulum.Date) -> str:
    year, week_number, _ = date.isocalendar()
    return format_week_key(year, week_number)


def current_week_key(clock: Clock = now_local) -> str:
    return week_key_for_date(clock().date())


def next_week_key(week: str) -> str:
    year, week_number = parse_week_key(week)
    week_number += 1
    if week_number > LAST_WEEK_NUMBER:
        year += 1
        week_number = 1
    return _stepped_key(year, week_number)


def previous_week_key(week: str) -> str:
    year, week_number = parse_week_key(week)
    week_number -= 1
    if week_number < 1:
        year -= 1
        week_number = LAST_WEEK_NUMBER
    return _stepped_key(year, week_number)


def _stepped_key(year: int, week_number: int) -> str:
    # stepping past year 1 or year 9999 leaves the calendar
    week = format_week_key(year, week_number)
    parse_week_key(week)
    return week


def day_offset(day: str) -> int:
    """Zero-based position of ``day`` in the week (monday=0 ... sunday=6)."""
    try:
        return DAYS.index(day)
    except ValueError:
        raise InvalidDay(day)


def week_monday(week: str) -> pendulum.Date:
    """
    Return the Monday that anchors ``week``.

    The anchor is the Monday on or before January 1 of the key's year,
    advanced by whole weeks. This matches ISO numbering whenever January 1
    falls on Monday to Thursday.
    """
    return _anchor_monday(*parse_week_key(week))


def _anchor_monday(year: int, week_number: int) -> pendulum.Date:
    jan_1 = pendulum.date(year, 1, 1)
    first_monday = jan_1.subtract(days=jan_1.weekday())
    return first_monday.add(days=(week_number - 1) * 7)


def day_date(week: str, day: str) -> pendulum.Date:
    return week_monday(week).add(days=day_offset(day))


def day_date_caption(week: str, day: str) -> str:
    return date_to_display_str(day_date(week, day))


def week_date_range(week: str) -> str:
    """Caption for the whole week, e.g. 'Feb 3 - Feb 9'."""
    monday = week_monday(week)
    sunday = monday.add(days=6)
    return f"{date_to_display_str(monday)} - {date_to_display_str(sunday)}"
