# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from weekplan.logger import configure_logging
from weekplan.terminal import configuration, entry
from weekplan.terminal.custom_typer import OrderedAliasedTyperGroup
from weekplan.terminal.serve import serve
from weekplan.terminal.view import ls
from weekplan.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="wk - plan your week in time blocks and track what really happened",
    no_args_is_help=True,
)
app.command(name="add, a")(entry.add)
app.command(name="note, n")(entry.note)
app.command(name="actual, ac")(entry.actual)
app.command(name="done, d")(entry.done)
app.command(name="undone, u")(entry.undone)
app.command(name="rm")(entry.rm)
app.command(name="ls, l")(ls)
app.command(name="serve, s")(serve)
app.add_typer(configuration.app, name="config, c", help="View or change settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress the header before schedules",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output to stderr",
        ),
    ] = False,
) -> None:
    """
    wk - plan your week in time blocks and track what really happened

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
