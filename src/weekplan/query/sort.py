# SPDX-License-Identifier: MIT

from functools import total_ordering
from typing import Any, Optional

from weekplan.model.entity_type import EntryKind
from weekplan.model.entry import Entry


@total_ordering
class StartKey:
    """
    Ordering key for an optional ``HH:MM`` start time.

    Present times compare by ``(hour, minute)``. An absent time compares
    greater than every present one and equal to other absent ones.
    """

    __slots__ = ("_clock",)

    def __init__(self, start: Optional[str]) -> None:
        self._clock: Optional[tuple[int, int]] = None
        if start is not None:
            hour, minute = start.split(":")
            self._clock = (int(hour), int(minute))

    @property
    def is_absent(self) -> bool:
        return self._clock is None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, StartKey):
            return NotImplemented
        return self._clock == other._clock

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, StartKey):
            return NotImplemented
        if self._clock is None:
            return False
        if other._clock is None:
            return True
        return self._clock < other._clock

    def __hash__(self) -> int:
        return hash(self._clock)

    def __repr__(self) -> str:
        if self._clock is None:
            return "StartKey(None)"
        return f"StartKey('{self._clock[0]:02d}:{self._clock[1]:02d}')"


def effective_start(entry: Entry) -> Optional[str]:
    """Planned start, else actual start, else None."""
    if entry["kind"] == EntryKind.BLOCK:
        return entry["planned_start"] or entry["actual_start"]
    if entry["kind"] == EntryKind.UNPLANNED:
        return entry["actual_start"]
    return None


def sort_entries(entries: list[Entry]) -> list[Entry]:
    """Order a day's entries by effective start, then by creation time."""
    return sorted(
        entries,
        key=lambda entry: (StartKey(effective_start(entry)), entry["created"]),
    )
