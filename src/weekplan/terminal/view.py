# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from weekplan import state
from weekplan.service.schedule import resolve_day_filter, select_week, week_schedule
from weekplan.terminal.completion import complete_day
from weekplan.terminal.error import exit_on_error
from weekplan.terminal.parse import parse_week
from weekplan.view.view.views.week import week_report


@exit_on_error
def ls(
    day: Annotated[
        Optional[str],
        typer.Argument(
            help="Only show this day (monday, +monday, today or YYYY-MM-DD)",
            autocompletion=complete_day,
        ),
    ] = None,
    last_week: Annotated[
        bool, typer.Option("--last", help="Show last week")
    ] = False,
    next_week: Annotated[
        bool, typer.Option("--next", help="Show next week")
    ] = False,
    week: Annotated[
        Optional[str],
        typer.Option(
            "--week",
            "-w",
            parser=parse_week,
            help="Show a specific week (e.g. 2025-W06)",
        ),
    ] = None,
) -> None:
    """
    List the entries of the current week or of a single day.
    """
    if last_week and next_week:
        raise typer.BadParameter("--last and --next cannot be combined")

    clock = state.get_clock()
    selected_week = select_week(week, last_week, next_week, clock)
    day_filter = resolve_day_filter(day, clock)

    week_report(week_schedule(selected_week, day_filter), day_filter)
