from __future__ import annotations

from typing import Any

from deprecate_notice import deprecate
from deprecate_notice.emitter import EventEmitter


def _collector(into: list[tuple[Any, ...]]):
    def listener(*args: Any) -> None:
        into.append(args)

    return listener


def test_event_without_old_listeners_does_nothing(notices: list[str]) -> None:
    emitter = EventEmitter()
    deprecate.event(emitter, "old", "new")

    emitter.emit("new", 1, 2)

    assert notices == []
    assert emitter.listener_count("old") == 0


def test_event_re_emits_for_old_listeners(notices: list[str]) -> None:
    emitter = EventEmitter()
    old_calls: list[tuple[Any, ...]] = []
    deprecate.event(emitter, "old", "new")
    emitter.on("old", _collector(old_calls))

    emitter.emit("new", 1, "x")
    emitter.emit("new", 2, "y")

    assert old_calls == [(1, "x"), (2, "y")]
    assert notices == [
        "'old event' is deprecated and will be removed. Please use 'new event' instead."
    ]


def test_internal_event_omits_replacement(notices: list[str]) -> None:
    emitter = EventEmitter()
    deprecate.event(emitter, "crashed", "-internal-crashed")
    emitter.on("crashed", lambda *args: None)

    emitter.emit("-internal-crashed")

    assert notices == ["'crashed event' is deprecated and will be removed."]


def test_event_transformer_reshapes_arguments(notices: list[str]) -> None:
    emitter = EventEmitter()
    old_calls: list[tuple[Any, ...]] = []
    deprecate.event(
        emitter,
        "resize",
        "resized",
        lambda details: [details["width"], details["height"]],
    )
    emitter.on("resize", _collector(old_calls))

    emitter.emit("resized", {"width": 800, "height": 600})

    assert old_calls == [(800, 600)]


def test_event_transformer_can_cancel_re_emission(notices: list[str]) -> None:
    emitter = EventEmitter()
    old_calls: list[tuple[Any, ...]] = []
    deprecate.event(
        emitter,
        "old",
        "new",
        lambda value: [value] if value > 0 else None,
    )
    emitter.on("old", _collector(old_calls))

    emitter.emit("new", -1)
    emitter.emit("new", 3)

    assert old_calls == [(3,)]
    assert len(notices) == 1


def test_empty_list_transform_still_re_emits(notices: list[str]) -> None:
    emitter = EventEmitter()
    old_calls: list[tuple[Any, ...]] = []
    deprecate.event(emitter, "old", "new", lambda *args: [])
    emitter.on("old", _collector(old_calls))

    emitter.emit("new", "dropped")

    assert old_calls == [()]


def test_subscription_cancel_stops_bridging(notices: list[str]) -> None:
    emitter = EventEmitter()
    old_calls: list[tuple[Any, ...]] = []
    subscription = deprecate.event(emitter, "old", "new")
    emitter.on("old", _collector(old_calls))

    assert subscription.name == "new"
    assert emitter.listener_count("new") == 1
    subscription.cancel()
    emitter.emit("new", 1)

    assert old_calls == []
    assert emitter.listener_count("new") == 0
    assert notices == []


def test_new_listeners_still_receive_original_arguments(notices: list[str]) -> None:
    emitter = EventEmitter()
    new_calls: list[tuple[Any, ...]] = []
    deprecate.event(emitter, "old", "new", lambda value: [value * 2])
    emitter.on("new", _collector(new_calls))
    emitter.on("old", lambda value: None)

    emitter.emit("new", 4)

    assert new_calls == [(4,)]
