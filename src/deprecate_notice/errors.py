from __future__ import annotations

from dataclasses import dataclass


class DeprecateNoticeError(Exception):
    """Base exception for deprecation notice failures."""


class DeprecationNoticeError(DeprecateNoticeError):
    """Raised in place of a notice when throw-on-notice is enabled."""


class ConfigValidationError(DeprecateNoticeError):
    """Raised when notice flags or config files are invalid."""


@dataclass(slots=True)
class InvalidDeprecationTargetError(DeprecateNoticeError, TypeError):
    """Raised when an entity cannot be wrapped for deprecation."""

    target: str
    detail: str

    def __str__(self) -> str:
        return f"'{self.target}' {self.detail}"
