# SPDX-License-Identifier: MIT


class WeekplanError(ValueError):
    """Base class for every user-facing weekplan failure."""

    pass


class InvalidDay(WeekplanError):
    def __init__(self, token: str) -> None:
        super().__init__(f"invalid day: {token}")
        self.token = token


class InvalidDate(WeekplanError):
    def __init__(self, token: str) -> None:
        super().__init__(f"invalid date format: {token}")
        self.token = token


class InvalidTimeRange(WeekplanError):
    def __init__(self, token: str) -> None:
        super().__init__(f"invalid time range: {token} (expected HH:MM-HH:MM)")
        self.token = token


class InvalidTimeFormat(WeekplanError):
    def __init__(self, token: str) -> None:
        super().__init__(f"invalid time format: {token} (expected HH:MM-HH:MM)")
        self.token = token


class InvalidWeek(WeekplanError):
    def __init__(self, token: str) -> None:
        super().__init__(f"invalid week: {token} (expected YYYY-W##)")
        self.token = token


class NotFound(WeekplanError):
    def __init__(self, id: str) -> None:
        super().__init__(f"Block not found: {id}")
        self.id = id


class MissingArgument(WeekplanError):
    pass


class NoteHasNoTimes(WeekplanError):
    def __init__(self, id: str) -> None:
        super().__init__(f"[{id}] is a note and cannot record actual time")
        self.id = id
