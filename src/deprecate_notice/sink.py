from __future__ import annotations

import logging
import sys
import warnings
from collections.abc import Callable

from deprecate_notice.config.loaders import FlagSource, static_flags, tolerant_environment_flags
from deprecate_notice.config.models import DEFAULT_TAG, NoticeConfig, NoticeFlags
from deprecate_notice.errors import DeprecationNoticeError

LOGGER = logging.getLogger(__name__)

DeprecationHandler = Callable[[str], None]


class HostDeprecationWarning(FutureWarning):
    """Warning category for notices reported on the console channel."""


def _warn_unregistered(text: str, *, stacklevel: int) -> None:
    # Bypasses the per-module warning registry; OneShotNotice owns deduplication.
    try:
        frame = sys._getframe(stacklevel)
    except ValueError:
        frame = sys._getframe(1)
    warnings.warn_explicit(
        text,
        HostDeprecationWarning,
        frame.f_code.co_filename,
        frame.f_lineno,
        module=frame.f_globals.get("__name__"),
        registry=None,
        module_globals=frame.f_globals,
    )


class NoticeSink:
    """Single reporting point for deprecation notices.

    A registered handler receives every notice. Without one, the current
    flags decide between raising, logging with a stack trace, and a tagged
    ``warnings`` line, in that order. Flags are read on every notice.
    """

    def __init__(
        self,
        *,
        flag_source: FlagSource = tolerant_environment_flags,
        tag: str = DEFAULT_TAG,
        handler: DeprecationHandler | None = None,
    ) -> None:
        self._flag_source = flag_source
        self._tag = tag
        self._handler: DeprecationHandler | None = None
        self.set_handler(handler)

    @classmethod
    def from_config(cls, config: NoticeConfig) -> "NoticeSink":
        return cls(flag_source=static_flags(config.flags), tag=config.tag)

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def flag_source(self) -> FlagSource:
        return self._flag_source

    def set_flag_source(self, flag_source: FlagSource) -> None:
        self._flag_source = flag_source

    def flags(self) -> NoticeFlags:
        return self._flag_source()

    def suppressed(self) -> bool:
        return self.flags().no_deprecation

    def set_handler(self, handler: DeprecationHandler | None) -> None:
        if handler is not None and not callable(handler):
            raise TypeError("deprecation handler must be callable or None.")
        self._handler = handler

    def get_handler(self) -> DeprecationHandler | None:
        return self._handler

    def log(self, message: str, *, stacklevel: int = 1) -> None:
        if self._handler is not None:
            self._handler(message)
            return
        flags = self.flags()
        if flags.throw_deprecation:
            raise DeprecationNoticeError(message)
        if flags.trace_deprecation:
            LOGGER.warning(message, stack_info=True, stacklevel=stacklevel + 1)
            return
        _warn_unregistered(f"({self._tag}) {message}", stacklevel=stacklevel + 1)


DEFAULT_SINK = NoticeSink()


def set_handler(handler: DeprecationHandler | None) -> None:
    DEFAULT_SINK.set_handler(handler)


def get_handler() -> DeprecationHandler | None:
    return DEFAULT_SINK.get_handler()


def log(message: str) -> None:
    DEFAULT_SINK.log(message, stacklevel=2)
