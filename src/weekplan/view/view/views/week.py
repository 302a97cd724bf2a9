# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from weekplan.model.schedule import DaySchedule, ScheduleLine, WeekSchedule
from weekplan.service.schedule import DONE_MARKER, UNPLANNED_MARKER
from weekplan.view.view.views.header import header

TIME_COLUMN_WIDTH = 23
RULE_WIDTH = 50

NOTE_COLOR = "yellow"
DONE_COLOR = "green"
UNPLANNED_COLOR = "bright_magenta"
ID_COLOR = "bright_black"
TAG_COLOR = "cyan"


def week_report(
    schedule: WeekSchedule,
    day_filter: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Print a week schedule.

    Days without entries are skipped unless the listing was limited to a
    single day, in which case that day is printed even when empty.
    """
    console = console or Console(highlight=False)

    header(console, schedule["week"], schedule["date_range"])
    console.print()
    console.print(f"Week {schedule['week']} ({schedule['date_range']})", soft_wrap=True)
    console.print(Rule(style="bright_black"), width=RULE_WIDTH)

    for day in schedule["days"]:
        if not day["lines"] and day_filter is None:
            continue
        day_report(day, console)
    console.print()


def day_report(day: DaySchedule, console: Console) -> None:
    console.print()
    console.print(f"[bold]{day['day'].upper()}[/bold] ({day['date']})", soft_wrap=True)
    for line in day["lines"]:
        console.print(f"  {format_line(line)}", soft_wrap=True)


def format_line(line: ScheduleLine) -> str:
    tags = ""
    if line["tag_annotation"]:
        tags = f" [{TAG_COLOR}]{escape(line['tag_annotation'])}[/{TAG_COLOR}]"

    if line["is_note"]:
        return (
            f"[{NOTE_COLOR}]{line['status_marker']}[/{NOTE_COLOR}] "
            f"{escape(line['description'])}{tags}"
        )

    marker = line["status_marker"]
    if marker == UNPLANNED_MARKER:
        marker = f"[{UNPLANNED_COLOR}]{marker}[/{UNPLANNED_COLOR}]"
    elif marker == DONE_MARKER:
        marker = f"[{DONE_COLOR}]{marker}[/{DONE_COLOR}]"

    time_column = line["time_annotation"].ljust(TIME_COLUMN_WIDTH)
    return (
        f"[{ID_COLOR}]\\[{line['id']}][/{ID_COLOR}] {marker} {time_column} "
        f"{escape(line['description'])}{tags}"
    )
