# SPDX-License-Identifier: MIT

"""Presentation state shared by the terminal printers."""

from contextvars import ContextVar

# Context variable for controlling header visibility in schedules
# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    """Set whether the header should be printed before a schedule.

    Args:
        value: True to show the header, False to hide it
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Get whether the header should be printed before a schedule."""
    return _show_header_var.get()
