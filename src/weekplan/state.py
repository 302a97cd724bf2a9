# SPDX-License-Identifier: MIT

from contextvars import ContextVar, Token

from weekplan.time import Clock, now_local

_clock: ContextVar[Clock] = ContextVar("clock", default=now_local)


def set_clock(value: Clock) -> Token[Clock]:
    return _clock.set(value)


def reset_clock(token: Token[Clock]) -> None:
    _clock.reset(token)


def get_clock() -> Clock:
    return _clock.get()
