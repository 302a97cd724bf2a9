# SPDX-License-Identifier: MIT

"""Read-only web grid of a week's schedule."""

import logging
from html import escape
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from weekplan import state
from weekplan.exception import InvalidWeek
from weekplan.model.schedule import DaySchedule, ScheduleLine, WeekSchedule
from weekplan.repository.entry import ENTRY_REPO
from weekplan.service.schedule import DONE_MARKER, UNPLANNED_MARKER, week_schedule
from weekplan.week import current_week_key

logger = logging.getLogger(__name__)

app = FastAPI(title="weekplan", docs_url=None, redoc_url=None)

PAGE_STYLE = """
body { font-family: system-ui, sans-serif; margin: 1.5rem; background: #fafafa; color: #222; }
header { display: flex; align-items: baseline; gap: 1rem; }
header a { text-decoration: none; color: #555; }
.grid { display: grid; grid-template-columns: repeat(7, 1fr); gap: .5rem; margin-top: 1rem; }
.day { background: #fff; border: 1px solid #ddd; border-radius: 6px; padding: .5rem; min-height: 8rem; }
.day h2 { font-size: .95rem; margin: 0 0 .5rem; }
.day h2 small { color: #888; font-weight: normal; }
.entry { font-size: .85rem; margin-bottom: .4rem; }
.entry .time { color: #666; display: block; }
.entry .id { color: #aaa; font-family: monospace; }
.entry .tags { color: #2a7ab0; }
.entry.done .description { text-decoration: line-through; color: #777; }
.entry.unplanned { border-left: 3px solid #c05ac0; padding-left: .3rem; }
.entry.note { font-style: italic; color: #7a6a00; }
"""


def _selected_week(week: Optional[str]) -> str:
    if week is None or week == "":
        return current_week_key(state.get_clock())
    return week.strip().upper()


def _line_classes(line: ScheduleLine) -> str:
    classes = ["entry"]
    if line["is_note"]:
        classes.append("note")
    elif line["status_marker"] == UNPLANNED_MARKER:
        classes.append("unplanned")
    elif line["status_marker"] == DONE_MARKER:
        classes.append("done")
    return " ".join(classes)


def render_line(line: ScheduleLine) -> str:
    tags = ""
    if line["tag_annotation"]:
        tags = f' <span class="tags">{escape(line["tag_annotation"])}</span>'

    if line["is_note"]:
        return (
            f'<div class="{_line_classes(line)}">'
            f'{escape(line["status_marker"])} '
            f'<span class="description">{escape(line["description"])}</span>{tags}'
            "</div>"
        )

    return (
        f'<div class="{_line_classes(line)}">'
        f'<span class="time">{escape(line["status_marker"])} '
        f'{escape(line["time_annotation"])}</span>'
        f'<span class="description">{escape(line["description"])}</span>{tags} '
        f'<span class="id">{escape(line["id"])}</span>'
        "</div>"
    )


def render_day(day: DaySchedule) -> str:
    lines = "".join(render_line(line) for line in day["lines"])
    return (
        '<section class="day">'
        f'<h2>{escape(day["title"])} <small>{escape(day["date"])}</small></h2>'
        f"{lines}"
        "</section>"
    )


def _week_link(week: Optional[str], label: str) -> str:
    if week is None:
        return ""
    return f'<a href="/?week={escape(week)}">{label}</a>'


def render_page(schedule: WeekSchedule) -> str:
    days = "".join(render_day(day) for day in schedule["days"])
    week = escape(schedule["week"])
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>Week {week}</title>"
        f"<style>{PAGE_STYLE}</style>"
        "</head><body>"
        "<header>"
        f"{_week_link(schedule['previous_week'], '&larr; prev')}"
        f'<h1>Week {week} <small>{escape(schedule["date_range"])}</small></h1>'
        f"{_week_link(schedule['next_week'], 'next &rarr;')}"
        "</header>"
        f'<main class="grid">{days}</main>'
        "</body></html>"
    )


def _schedule_or_400(week: Optional[str]) -> WeekSchedule:
    selected = _selected_week(week)
    # the CLI may have written entries since the last request
    ENTRY_REPO.refresh()
    try:
        return week_schedule(selected)
    except InvalidWeek as error:
        logger.info("rejected week %r", week)
        raise HTTPException(status_code=400, detail=str(error))


@app.get("/", response_class=HTMLResponse)
async def index(week: Optional[str] = None) -> str:
    """The seven-day grid for ``week`` (default: the current week)."""
    return render_page(_schedule_or_400(week))


@app.get("/api/week")
async def api_week(week: Optional[str] = None) -> WeekSchedule:
    return _schedule_or_400(week)
