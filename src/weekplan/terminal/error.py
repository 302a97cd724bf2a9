# SPDX-License-Identifier: MIT

import logging
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from weekplan.exception import WeekplanError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

error_console = Console(stderr=True, highlight=False)


def exit_on_error(command: Callable[P, R]) -> Callable[P, R]:
    """Report a weekplan error on stderr and exit 1 instead of raising."""

    @wraps(command)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return command(*args, **kwargs)
        except WeekplanError as error:
            logger.debug("%s failed: %r", command.__name__, error)
            error_console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)
            raise typer.Exit(1)

    return wrapper
