from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TAG = "host"


class StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)


class NoticeFlags(StrictModel):
    """Process-wide switches that shape how deprecation notices are reported."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    no_deprecation: bool = False
    throw_deprecation: bool = False
    trace_deprecation: bool = False


class NoticeConfig(StrictModel):
    tag: str = DEFAULT_TAG
    flags: NoticeFlags = Field(default_factory=NoticeFlags)

    @field_validator("tag")
    @classmethod
    def _validate_tag(cls, value: str) -> str:
        tag = value.strip()
        if not tag:
            raise ValueError("notice.tag must be a non-empty string")
        return tag
