from __future__ import annotations

import os

import pytest
from hypothesis import HealthCheck, settings

from deprecate_notice.config import ENV_FLAG_NAMES, NoticeFlags, static_flags, tolerant_environment_flags
from deprecate_notice.sink import DEFAULT_SINK, NoticeSink

settings.register_profile(
    "ci_smoke",
    max_examples=30,
    derandomize=True,
    deadline=None,
    suppress_health_check=(HealthCheck.too_slow, HealthCheck.function_scoped_fixture),
)
settings.register_profile(
    "nightly_deep",
    max_examples=300,
    derandomize=True,
    deadline=None,
    suppress_health_check=(HealthCheck.too_slow, HealthCheck.function_scoped_fixture),
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci_smoke"))


@pytest.fixture(autouse=True)
def _reset_default_sink(monkeypatch: pytest.MonkeyPatch):
    for env_name in ENV_FLAG_NAMES.values():
        monkeypatch.delenv(env_name, raising=False)
    DEFAULT_SINK.set_handler(None)
    DEFAULT_SINK.set_flag_source(tolerant_environment_flags)
    yield
    DEFAULT_SINK.set_handler(None)
    DEFAULT_SINK.set_flag_source(tolerant_environment_flags)


@pytest.fixture()
def notices() -> list[str]:
    """Messages routed through the default sink's handler."""
    received: list[str] = []
    DEFAULT_SINK.set_handler(received.append)
    return received


class FlagSwitch:
    """Mutable flag source for a test-local sink."""

    def __init__(self) -> None:
        self.flags = NoticeFlags()

    def __call__(self) -> NoticeFlags:
        return self.flags

    def set(self, **values: bool) -> None:
        self.flags = self.flags.model_copy(update=values)


@pytest.fixture()
def flag_switch() -> FlagSwitch:
    return FlagSwitch()


@pytest.fixture()
def recording_sink(flag_switch: FlagSwitch) -> tuple[NoticeSink, list[str]]:
    received: list[str] = []
    sink = NoticeSink(flag_source=flag_switch, tag="test", handler=received.append)
    return sink, received


@pytest.fixture()
def quiet_sink() -> NoticeSink:
    return NoticeSink(flag_source=static_flags(NoticeFlags(no_deprecation=True)))
