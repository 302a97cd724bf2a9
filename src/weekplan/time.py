# SPDX-License-Identifier: MIT

from typing import Callable, cast

import pendulum

type Clock = Callable[[], pendulum.DateTime]


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def fixed_clock(instant: pendulum.DateTime) -> Clock:
    """Return a clock that always reports ``instant`` in local time."""

    def clock() -> pendulum.DateTime:
        return instant.in_tz("local")

    return clock


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def date_to_display_str(date: pendulum.Date) -> str:
    """Format a calendar date the way schedules caption it, e.g. 'Feb 3'."""
    return date.format("MMM D")
