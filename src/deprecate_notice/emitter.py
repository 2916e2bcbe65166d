from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

Listener = Callable[..., Any]


@runtime_checkable
class SupportsEvents(Protocol):
    """What ``event()`` needs from a host emitter."""

    def on(self, name: str, listener: Listener) -> Any: ...

    def remove_listener(self, name: str, listener: Listener) -> Any: ...

    def emit(self, name: str, *args: Any) -> Any: ...

    def listener_count(self, name: str) -> int: ...


@dataclass(slots=True)
class EventEmitter:
    """Synchronous named-event emitter. Listeners run in registration order."""

    _listeners: dict[str, list[Listener]] = field(default_factory=dict)

    def on(self, name: str, listener: Listener) -> "EventEmitter":
        if not callable(listener):
            raise TypeError("listener must be callable.")
        self._listeners.setdefault(name, []).append(listener)
        return self

    def remove_listener(self, name: str, listener: Listener) -> "EventEmitter":
        listeners = self._listeners.get(name)
        if listeners and listener in listeners:
            listeners.remove(listener)
            if not listeners:
                del self._listeners[name]
        return self

    def emit(self, name: str, *args: Any) -> bool:
        listeners = tuple(self._listeners.get(name, ()))
        for listener in listeners:
            listener(*args)
        return bool(listeners)

    def listener_count(self, name: str) -> int:
        return len(self._listeners.get(name, ()))
