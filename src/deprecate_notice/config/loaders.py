from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from deprecate_notice.config.models import NoticeConfig, NoticeFlags
from deprecate_notice.errors import ConfigValidationError

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

LOGGER = logging.getLogger(__name__)

FlagSource = Callable[[], NoticeFlags]

ENV_PREFIX = "DEPRECATE_NOTICE_"
ENV_FLAG_NAMES: dict[str, str] = {
    "no_deprecation": f"{ENV_PREFIX}NO_DEPRECATION",
    "throw_deprecation": f"{ENV_PREFIX}THROW_DEPRECATION",
    "trace_deprecation": f"{ENV_PREFIX}TRACE_DEPRECATION",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


def _parse_env_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(
        f"invalid boolean value for {name}: '{raw}' (expected one of 1/0, true/false, yes/no, on/off)"
    )


def environment_flags(environ: Mapping[str, str] | None = None) -> NoticeFlags:
    """Read notice flags from the environment, rejecting unparseable values."""
    env = os.environ if environ is None else environ
    values = {
        field: _parse_env_bool(env_name, env[env_name])
        for field, env_name in ENV_FLAG_NAMES.items()
        if env_name in env
    }
    return NoticeFlags(**values)


_REPORTED_INVALID: set[tuple[str, str]] = set()


def tolerant_environment_flags(environ: Mapping[str, str] | None = None) -> NoticeFlags:
    """Like ``environment_flags``, but an unparseable value keeps its default.

    Each bad value is logged once. Used on the notice path so a broken
    environment never raises out of a deprecated call.
    """
    env = os.environ if environ is None else environ
    values: dict[str, bool] = {}
    for field, env_name in ENV_FLAG_NAMES.items():
        if env_name not in env:
            continue
        raw = env[env_name]
        try:
            values[field] = _parse_env_bool(env_name, raw)
        except ConfigValidationError as exc:
            if (env_name, raw) not in _REPORTED_INVALID:
                _REPORTED_INVALID.add((env_name, raw))
                LOGGER.warning("%s; using the default.", exc)
    return NoticeFlags(**values)


def static_flags(flags: NoticeFlags) -> FlagSource:
    def source() -> NoticeFlags:
        return flags

    return source


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigValidationError(f"cannot read config file '{path}': {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigValidationError(f"invalid TOML in '{path}': {exc}") from exc


def load_notice_config(path: str | Path) -> NoticeConfig:
    config_path = Path(path).expanduser().resolve()
    raw = _read_toml(config_path)
    notice = raw.get("notice", {})
    flags = raw.get("flags", {})
    if not isinstance(notice, dict) or not isinstance(flags, dict):
        raise ConfigValidationError(
            f"invalid notice config '{config_path}': 'notice' and 'flags' must be tables"
        )
    unknown = sorted(set(raw) - {"notice", "flags"})
    if unknown:
        raise ConfigValidationError(
            f"invalid notice config '{config_path}': unknown tables {unknown}"
        )
    try:
        return NoticeConfig.model_validate({**notice, "flags": flags})
    except Exception as exc:  # pydantic ValidationError
        raise ConfigValidationError(
            f"invalid notice config '{config_path}': {exc}"
        ) from exc
