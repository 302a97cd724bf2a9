# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from weekplan import state
from weekplan.exception import MissingArgument
from weekplan.service import entry as entry_service
from weekplan.terminal.completion import complete_day, complete_tag
from weekplan.terminal.error import exit_on_error
from weekplan.terminal.parse import split_day_text, split_day_time_text
from weekplan.version.version import checkpoint

TagOption = Annotated[
    Optional[str],
    typer.Option(
        "--tag",
        "-t",
        help="Tag for the entry (or use #hashtag in the text)",
        autocompletion=complete_tag,
    ),
]


def _echo(message: str) -> None:
    Console(highlight=False).print(message, markup=False, soft_wrap=True)


def _tag_suffix(tags: list[str]) -> str:
    if not tags:
        return ""
    return f" [{','.join(tags)}]"


@exit_on_error
def add(
    args: Annotated[
        list[str],
        typer.Argument(
            help="[day] <start>-<end> <description>; day defaults to today",
            autocompletion=complete_day,
        ),
    ],
    tag: TagOption = None,
) -> None:
    """
    Add a planned time block.
    """
    day_token, time_range, description = split_day_time_text(args)
    block = entry_service.add_block(
        day_token, time_range, description, tag, clock=state.get_clock()
    )
    checkpoint(f"add block: {block['id']}")

    _echo(
        f"[{block['id']}] Added: {block['day']} "
        f"{block['planned_start']}-{block['planned_end']} "
        f"{block['description']}{_tag_suffix(block['tags'])}"
    )


@exit_on_error
def note(
    args: Annotated[
        list[str],
        typer.Argument(
            help="[day] <text>; day defaults to today",
            autocompletion=complete_day,
        ),
    ],
    tag: TagOption = None,
) -> None:
    """
    Add a floating note to a day.
    """
    day_token, text = split_day_text(args)
    new_note = entry_service.add_note(day_token, text, tag, clock=state.get_clock())
    checkpoint(f"add note: {new_note['id']}")

    _echo(
        f"[{new_note['id']}] Note added to {new_note['day']}: "
        f"{new_note['description']}{_tag_suffix(new_note['tags'])}"
    )


@exit_on_error
def actual(
    args: Annotated[
        list[str],
        typer.Argument(
            help="<id> <start>-<end>, or with --unplanned: [day] <start>-<end> <description>",
        ),
    ],
    unplanned: Annotated[
        bool,
        typer.Option("--unplanned", "-u", help="Record an unplanned block"),
    ] = False,
    tag: TagOption = None,
) -> None:
    """
    Record the actual time of a block, or an unplanned block.
    """
    if unplanned:
        day_token, time_range, description = split_day_time_text(args)
        entry = entry_service.add_unplanned(
            day_token, time_range, description, tag, clock=state.get_clock()
        )
        checkpoint(f"add unplanned: {entry['id']}")

        _echo(
            f"[{entry['id']}] ⚡ Unplanned: {entry['day']} "
            f"{entry['actual_start']}-{entry['actual_end']} "
            f"{entry['description']}{_tag_suffix(entry['tags'])}"
        )
        return

    if len(args) < 2:
        raise MissingArgument("usage: wk actual <id> <start>-<end>")

    id = args[0]
    start, end = entry_service.record_actual(id, args[1])
    checkpoint(f"record actual: {id}")

    _echo(f"[{id}] Actual time recorded: {start}-{end}")


@exit_on_error
def done(id: Annotated[str, typer.Argument(help="Entry id")]) -> None:
    """
    Mark an entry as done.
    """
    entry_service.mark_done(id)
    checkpoint(f"done: {id}")

    _echo(f"[{id}] ✓ Marked done")


@exit_on_error
def undone(id: Annotated[str, typer.Argument(help="Entry id")]) -> None:
    """
    Unmark an entry as done.
    """
    entry_service.mark_undone(id)
    checkpoint(f"undone: {id}")

    _echo(f"[{id}] Unmarked done")


@exit_on_error
def rm(id: Annotated[str, typer.Argument(help="Entry id")]) -> None:
    """
    Remove an entry.
    """
    entry_service.remove_entry(id)
    checkpoint(f"remove: {id}")

    _echo(f"[{id}] Deleted")
