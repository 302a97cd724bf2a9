# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from weekplan.exception import InvalidWeek, MissingArgument
from weekplan.parse import is_day_token, is_time_range
from weekplan.week import parse_week_key

DEFAULT_DAY = "today"


def parse_week(week_param: Optional[str]) -> Optional[str]:
    if week_param is None:
        return None
    week = week_param.strip().upper()
    try:
        parse_week_key(week)
    except InvalidWeek as error:
        raise typer.BadParameter(str(error))
    return week


def split_day_time_text(args: list[str]) -> tuple[str, str, str]:
    """
    Split ``[day] <start>-<end> <text...>`` arguments.

    The day may be omitted when the first argument already looks like a
    time range, in which case today is used.
    """
    if not args:
        raise MissingArgument("time range required (expected HH:MM-HH:MM)")
    if is_time_range(args[0]):
        return DEFAULT_DAY, args[0], " ".join(args[1:])
    if len(args) < 2:
        raise MissingArgument("time range required (expected HH:MM-HH:MM)")
    return args[0], args[1], " ".join(args[2:])


def split_day_text(args: list[str]) -> tuple[str, str]:
    """Split ``[day] <text...>``; the first argument is a day only if it looks like one."""
    if args and is_day_token(args[0]):
        return args[0], " ".join(args[1:])
    return DEFAULT_DAY, " ".join(args)
