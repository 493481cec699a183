"""Error kinds raised by the settings store.

Every failure is a ``SettingsError`` tagged with an ``ErrorKind``, so callers
can branch on ``isinstance`` or on ``err.kind`` without comparing identities.
"""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    IO = auto()
    DECODE = auto()
    ENCODE = auto()
    VALIDATION = auto()


class SettingsError(Exception):
    """Base class for all settings store failures."""

    kind: ErrorKind


class SettingsIOError(SettingsError):
    """Opening, reading, closing or writing a settings file failed."""

    kind = ErrorKind.IO

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class DecodeError(SettingsError):
    """Settings file content is not a valid settings document."""

    kind = ErrorKind.DECODE

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class EncodeError(SettingsError):
    kind = ErrorKind.ENCODE


class ValidationError(SettingsError):
    kind = ErrorKind.VALIDATION


class InvalidPortError(ValidationError):
    def __init__(self, message: str = "Invalid port"):
        super().__init__(message)
