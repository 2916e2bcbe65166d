from __future__ import annotations

from deprecate_notice.once import OneShotNotice, warn, warn_once, warn_once_message
from deprecate_notice.sink import (
    DEFAULT_SINK,
    HostDeprecationWarning,
    NoticeSink,
    get_handler,
    log,
    set_handler,
)
from deprecate_notice.wrappers import (
    Subscription,
    deprecated,
    event,
    move_api,
    remove_function,
    remove_property,
    rename_function,
    rename_property,
)

__all__ = [
    "DEFAULT_SINK",
    "HostDeprecationWarning",
    "NoticeSink",
    "OneShotNotice",
    "Subscription",
    "deprecated",
    "event",
    "get_handler",
    "log",
    "move_api",
    "remove_function",
    "remove_property",
    "rename_function",
    "rename_property",
    "set_handler",
    "warn",
    "warn_once",
    "warn_once_message",
]
