from __future__ import annotations

from importlib import import_module

from deprecate_notice.__about__ import __version__

__all__ = [
    "warn_once",
    "warn_once_message",
    "set_handler",
    "get_handler",
    "warn",
    "log",
    "remove_function",
    "rename_function",
    "move_api",
    "event",
    "remove_property",
    "rename_property",
    "deprecated",
    "OneShotNotice",
    "NoticeSink",
    "HostDeprecationWarning",
    "Subscription",
    "EventEmitter",
    "NoticeConfig",
    "NoticeFlags",
    "DeprecateNoticeError",
    "DeprecationNoticeError",
    "InvalidDeprecationTargetError",
    "ConfigValidationError",
    "__version__",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "warn_once": ("deprecate_notice.once", "warn_once"),
    "warn_once_message": ("deprecate_notice.once", "warn_once_message"),
    "warn": ("deprecate_notice.once", "warn"),
    "OneShotNotice": ("deprecate_notice.once", "OneShotNotice"),
    "set_handler": ("deprecate_notice.sink", "set_handler"),
    "get_handler": ("deprecate_notice.sink", "get_handler"),
    "log": ("deprecate_notice.sink", "log"),
    "NoticeSink": ("deprecate_notice.sink", "NoticeSink"),
    "HostDeprecationWarning": ("deprecate_notice.sink", "HostDeprecationWarning"),
    "remove_function": ("deprecate_notice.wrappers", "remove_function"),
    "rename_function": ("deprecate_notice.wrappers", "rename_function"),
    "move_api": ("deprecate_notice.wrappers", "move_api"),
    "event": ("deprecate_notice.wrappers", "event"),
    "remove_property": ("deprecate_notice.wrappers", "remove_property"),
    "rename_property": ("deprecate_notice.wrappers", "rename_property"),
    "deprecated": ("deprecate_notice.wrappers", "deprecated"),
    "Subscription": ("deprecate_notice.wrappers", "Subscription"),
    "EventEmitter": ("deprecate_notice.emitter", "EventEmitter"),
    "NoticeConfig": ("deprecate_notice.config", "NoticeConfig"),
    "NoticeFlags": ("deprecate_notice.config", "NoticeFlags"),
    "DeprecateNoticeError": ("deprecate_notice.errors", "DeprecateNoticeError"),
    "DeprecationNoticeError": ("deprecate_notice.errors", "DeprecationNoticeError"),
    "InvalidDeprecationTargetError": (
        "deprecate_notice.errors",
        "InvalidDeprecationTargetError",
    ),
    "ConfigValidationError": ("deprecate_notice.errors", "ConfigValidationError"),
}

_SUBMODULES = {
    "cli",
    "config",
    "deprecate",
    "emitter",
    "errors",
    "once",
    "sink",
    "wrappers",
}


def __getattr__(name: str) -> object:
    if name in _SUBMODULES:
        module = import_module(f"deprecate_notice.{name}")
        globals()[name] = module
        return module

    target = _LAZY_IMPORTS.get(name)
    if target is None:
        raise AttributeError(f"module 'deprecate_notice' has no attribute '{name}'")
    module_name, attr_name = target
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))
