from __future__ import annotations

import threading
from enum import Enum

from deprecate_notice.sink import DEFAULT_SINK, NoticeSink


class NoticeState(str, Enum):
    ARMED = "armed"
    FIRED = "fired"


class OneShotNotice:
    """Reports its message through a sink at most once.

    Calls made while notices are suppressed leave the notice armed.
    """

    __slots__ = ("_lock", "_state", "message", "sink")

    def __init__(self, message: str, *, sink: NoticeSink | None = None) -> None:
        self.message = message
        self.sink = DEFAULT_SINK if sink is None else sink
        self._state = NoticeState.ARMED
        self._lock = threading.Lock()

    @property
    def state(self) -> NoticeState:
        return self._state

    @property
    def fired(self) -> bool:
        return self._state is NoticeState.FIRED

    def __call__(self) -> None:
        if self._state is NoticeState.FIRED:
            return
        with self._lock:
            if self._state is NoticeState.FIRED or self.sink.suppressed():
                return
            self._state = NoticeState.FIRED
        self.sink.log(self.message, stacklevel=3)

    def __repr__(self) -> str:
        return f"OneShotNotice({self.message!r}, state={self._state.value})"


def format_removal(old_name: str, new_name: str | None = None) -> str:
    if new_name:
        return f"'{old_name}' is deprecated and will be removed. Please use '{new_name}' instead."
    return f"'{old_name}' is deprecated and will be removed."


def warn_once_message(message: str, *, sink: NoticeSink | None = None) -> OneShotNotice:
    return OneShotNotice(message, sink=sink)


def warn_once(
    old_name: str,
    new_name: str | None = None,
    *,
    sink: NoticeSink | None = None,
) -> OneShotNotice:
    return warn_once_message(format_removal(old_name, new_name), sink=sink)


def warn(old_name: str, new_name: str, *, sink: NoticeSink | None = None) -> None:
    """Report a rename on every call, without deduplication."""
    target = DEFAULT_SINK if sink is None else sink
    if not target.suppressed():
        target.log(f"'{old_name}' is deprecated. Use '{new_name}' instead.", stacklevel=2)
