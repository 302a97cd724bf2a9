# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum

from weekplan.exception import (
    InvalidDate,
    InvalidDay,
    InvalidTimeFormat,
    InvalidTimeRange,
)
from weekplan.time import Clock, now_local
from weekplan.week import DAYS, next_week_key, week_key_for_date

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
_CLOCK_PATTERN = re.compile(r"^\d{1,2}:\d{2}$", re.ASCII)
_TIME_RANGE_PATTERN = re.compile(r"^\d{1,2}:\d{2}-\d{1,2}:\d{2}$", re.ASCII)
_HASHTAG_PATTERN = re.compile(r"#(\w+)")

NEXT_WEEK_PREFIX = "+"


def resolve_day(token: str, clock: Clock = now_local) -> tuple[str, str]:
    """
    Resolve a day token into a ``(week_key, day)`` pair.

    Accepted tokens, checked in this order:
        today        the current local date
        YYYY-MM-DD   an explicit calendar date (true ISO week)
        monday       a weekday of the current week
        +monday      a weekday of the following week

    Raises:
        InvalidDate: the token looks like a date but is not a real one
        InvalidDay: the token is none of the above
    """
    token = token.strip().lower()

    if token == "today":
        today = clock().date()
        return week_key_for_date(today), DAYS[today.weekday()]

    if _DATE_PATTERN.match(token):
        try:
            date = cast(pendulum.Date, pendulum.parse(token, exact=True))
        except ValueError:
            raise InvalidDate(token)
        return week_key_for_date(date), DAYS[date.weekday()]

    next_week = False
    day = token
    if day.startswith(NEXT_WEEK_PREFIX):
        next_week = True
        day = day[len(NEXT_WEEK_PREFIX) :]

    if day not in DAYS:
        raise InvalidDay(day)

    week = week_key_for_date(clock().date())
    if next_week:
        week = next_week_key(week)
    return week, day


def is_day_token(token: str) -> bool:
    """Whether ``token`` has the shape of a day argument (not whether it is a real date)."""
    token = token.strip().lower()
    if token == "today" or token in DAYS:
        return True
    if token.startswith(NEXT_WEEK_PREFIX) and token[len(NEXT_WEEK_PREFIX) :] in DAYS:
        return True
    return _DATE_PATTERN.match(token) is not None


def parse_time_range(token: str) -> tuple[str, str]:
    """
    Parse ``H:MM-HH:MM`` into zero-padded ``(start, end)`` clock strings.

    Hours and minutes are not range checked and end may precede start;
    ``25:00-26:00`` is accepted.
    """
    parts = [part.strip() for part in token.split("-")]
    if len(parts) != 2 or not all(parts):
        raise InvalidTimeRange(token)

    start, end = parts
    if not _CLOCK_PATTERN.match(start) or not _CLOCK_PATTERN.match(end):
        raise InvalidTimeFormat(token)

    return _pad_clock(start), _pad_clock(end)


def _pad_clock(clock_str: str) -> str:
    return clock_str.rjust(5, "0")


def is_time_range(token: str) -> bool:
    return _TIME_RANGE_PATTERN.match(token) is not None


def format_time_range(start: Optional[str], end: Optional[str]) -> str:
    return f"{start or ''}-{end or ''}"


def extract_tags(text: str, tag: Optional[str] = None) -> tuple[str, list[str]]:
    """
    Split hashtags out of ``text``.

    The explicit ``tag`` comes first, followed by the hashtags in the order
    they appear. Tags are lowercased and de-duplicated keeping the first
    position. The returned text has every hashtag removed and is stripped
    at both ends.
    """
    tags: list[str] = []
    if tag:
        tags.append(tag.lower())
    tags += [match.lower() for match in _HASHTAG_PATTERN.findall(text)]

    clean_text = _HASHTAG_PATTERN.sub("", text).strip()
    return clean_text, list(dict.fromkeys(tags))
