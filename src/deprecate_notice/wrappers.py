from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, ParamSpec, TypeVar

from deprecate_notice.emitter import Listener, SupportsEvents
from deprecate_notice.errors import InvalidDeprecationTargetError
from deprecate_notice.once import OneShotNotice, warn_once
from deprecate_notice.sink import DEFAULT_SINK, NoticeSink

LOGGER = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")
T = TypeVar("T")

INTERNAL_EVENT_PREFIX = "-"
_PATCHED_MARKER = "__deprecate_notice_patched__"
_MISSING = object()

EventTransformer = Callable[..., Any]


def _function_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__name__", type(fn).__name__)


def _forward(fn: Callable[P, R], notice: OneShotNotice) -> Callable[P, R]:
    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        notice()
        return fn(*args, **kwargs)

    return wrapper


def remove_function(
    fn: Callable[P, Any],
    removed_name: str,
    *,
    sink: NoticeSink | None = None,
) -> Callable[P, None]:
    """Wrap a function that has no replacement.

    The wrapper warns once and calls ``fn``, but always returns ``None``.
    """
    if not callable(fn):
        raise InvalidDeprecationTargetError(
            target=f"{removed_name} function",
            detail="is invalid or does not exist.",
        )
    notice = warn_once(f"{_function_name(fn)} function", sink=sink)

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> None:
        notice()
        fn(*args, **kwargs)

    return wrapper


def rename_function(
    fn: Callable[P, R],
    new_name: str,
    *,
    sink: NoticeSink | None = None,
) -> Callable[P, R]:
    notice = warn_once(f"{_function_name(fn)} function", f"{new_name} function", sink=sink)
    return _forward(fn, notice)


def move_api(
    fn: Callable[P, R],
    old_usage: str,
    new_usage: str,
    *,
    sink: NoticeSink | None = None,
) -> Callable[P, R]:
    """Like ``rename_function``, for call shapes described by free-form usage text."""
    return _forward(fn, warn_once(old_usage, new_usage, sink=sink))


def deprecated(
    new_name: str | None = None,
    *,
    sink: NoticeSink | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator for marking a function as deprecated, optionally naming its successor."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        return _forward(func, warn_once(func.__qualname__, new_name, sink=sink))

    return decorator


@dataclass(frozen=True, slots=True)
class Subscription:
    """Listener installed by ``event()`` on the new event name."""

    emitter: SupportsEvents
    name: str
    listener: Listener

    def cancel(self) -> None:
        self.emitter.remove_listener(self.name, self.listener)


def _pass_through(*args: Any) -> tuple[Any, ...]:
    return args


def event(
    emitter: SupportsEvents,
    old_name: str,
    new_name: str,
    transformer: EventTransformer | None = None,
    *,
    sink: NoticeSink | None = None,
) -> Subscription:
    """Keep firing ``old_name`` for as long as anyone listens to it.

    Every ``new_name`` emission is re-emitted under ``old_name`` with the
    arguments returned by ``transformer``. Nothing happens when ``old_name``
    has no listeners, and a transformer result that is not a list or tuple
    cancels the re-emission.
    """
    if new_name.startswith(INTERNAL_EVENT_PREFIX):
        notice = warn_once(f"{old_name} event", sink=sink)
    else:
        notice = warn_once(f"{old_name} event", f"{new_name} event", sink=sink)
    transform = _pass_through if transformer is None else transformer

    def bridge(*args: Any) -> None:
        if emitter.listener_count(old_name) == 0:
            return
        notice()
        transformed = transform(*args)
        if not isinstance(transformed, (list, tuple)):
            LOGGER.debug("Transformer skipped re-emission of '%s'.", old_name)
            return
        emitter.emit(old_name, *transformed)

    emitter.on(new_name, bridge)
    return Subscription(emitter=emitter, name=new_name, listener=bridge)


@dataclass(frozen=True, slots=True)
class AccessorPair:
    """A property that can be both read and written."""

    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], None]
    doc: str | None = None

    @classmethod
    def from_descriptor(cls, descriptor: object) -> "AccessorPair | None":
        if not isinstance(descriptor, property):
            return None
        if descriptor.fget is None or descriptor.fset is None:
            return None
        return cls(getter=descriptor.fget, setter=descriptor.fset, doc=descriptor.__doc__)


def _owner(target: object) -> type:
    return target if isinstance(target, type) else type(target)


def _lookup_descriptor(target: object, name: str) -> object:
    try:
        return inspect.getattr_static(_owner(target), name)
    except AttributeError:
        return _MISSING


def _accessor_owner(target: object) -> type:
    """Return the class that will carry accessors for ``target``.

    Instances get a per-instance subclass on first use, so the check that
    their class can be reassigned happens before anything else is touched.
    """
    if isinstance(target, type):
        return target

    cls = type(target)
    if not cls.__dict__.get(_PATCHED_MARKER, False):
        patched = type(cls)(
            cls.__name__,
            (cls,),
            {
                "__slots__": (),
                "__module__": cls.__module__,
                "__qualname__": cls.__qualname__,
                _PATCHED_MARKER: True,
            },
        )
        try:
            target.__class__ = patched
        except TypeError as exc:
            raise InvalidDeprecationTargetError(
                target=cls.__qualname__,
                detail=f"instances cannot carry deprecated accessors: {exc}",
            ) from exc
        LOGGER.debug("Gave %s instance its own class for deprecated accessors.", cls.__qualname__)
        cls = patched
    return cls


def _install_property(owner: type, name: str, accessor: property) -> None:
    setattr(owner, name, accessor)
    LOGGER.debug("Installed deprecated accessor '%s' on %s.", name, owner.__qualname__)


def remove_property(
    target: T,
    removed_name: str,
    only_for_values: Iterable[Any] | None = None,
    *,
    sink: NoticeSink | None = None,
) -> T:
    """Warn on access to a read/write property that is going away.

    Targets whose class has no such property, or only a read-only one, are
    returned untouched after a diagnostic is logged through the sink.

    An instance target is moved to a private subclass of its class, so it
    can no longer be pickled.
    """
    resolved = DEFAULT_SINK if sink is None else sink
    descriptor = _lookup_descriptor(target, removed_name)
    if descriptor is _MISSING:
        resolved.log(f"Unable to remove property '{removed_name}' from an object that lacks it.")
        return target
    original = AccessorPair.from_descriptor(descriptor)
    if original is None:
        resolved.log(
            f"Unable to remove property '{removed_name}' from an object does not have a getter / setter"
        )
        return target

    notice = warn_once(removed_name, sink=resolved)
    gated_values = None if only_for_values is None else tuple(only_for_values)

    def getter(instance: Any) -> Any:
        notice()
        return original.getter(instance)

    def setter(instance: Any, value: Any) -> None:
        if gated_values is None or value in gated_values:
            notice()
        original.setter(instance, value)

    owner = _accessor_owner(target)
    _install_property(owner, removed_name, property(getter, setter, doc=original.doc))
    return target


def rename_property(
    target: T,
    old_name: str,
    new_name: str,
    *,
    sink: NoticeSink | None = None,
) -> T:
    """Redirect ``old_name`` to ``new_name``, migrating the current value once.

    As with ``remove_property``, instance targets can no longer be pickled.
    """
    owner = _accessor_owner(target)
    notice = warn_once(old_name, new_name, sink=sink)

    if hasattr(target, old_name) and not hasattr(target, new_name):
        notice()
        setattr(target, new_name, getattr(target, old_name))

    def getter(instance: Any) -> Any:
        notice()
        return getattr(instance, new_name)

    def setter(instance: Any, value: Any) -> None:
        notice()
        setattr(instance, new_name, value)

    _install_property(
        owner,
        old_name,
        property(getter, setter, doc=f"Deprecated alias of '{new_name}'."),
    )
    instance_dict = getattr(target, "__dict__", None)
    if isinstance(instance_dict, dict):
        instance_dict.pop(old_name, None)
    return target
