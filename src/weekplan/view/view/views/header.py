# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from weekplan.view.state import get_show_header


def header(console: Console, title: str, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        console: Console to print on
        title: Main header text, usually the week key
        sub_header: Optional dimmed caption, usually the week's date range
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    console.print(Padding(f"[dark_orange]wk[/dark_orange] [bold]{title}[/bold]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
