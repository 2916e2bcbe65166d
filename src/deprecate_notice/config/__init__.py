from __future__ import annotations

from deprecate_notice.config.loaders import (
    ENV_FLAG_NAMES,
    FlagSource,
    environment_flags,
    load_notice_config,
    static_flags,
    tolerant_environment_flags,
)
from deprecate_notice.config.models import DEFAULT_TAG, NoticeConfig, NoticeFlags

__all__ = [
    "DEFAULT_TAG",
    "ENV_FLAG_NAMES",
    "FlagSource",
    "NoticeConfig",
    "NoticeFlags",
    "environment_flags",
    "load_notice_config",
    "static_flags",
    "tolerant_environment_flags",
]
