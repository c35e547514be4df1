"""Exception types raised across locale_keys."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LocaleKeysError(RuntimeError):
    """Base class for every error this package raises on purpose."""


class MalformedKeyPathError(LocaleKeysError, ValueError):
    """Raised when a dotted key path is empty or contains an empty segment."""

    def __init__(self, message: str, *, key_path: str) -> None:
        super().__init__(message)
        self.key_path = key_path


class FileAccessError(LocaleKeysError):
    """Raised when a locale file cannot be read or written."""

    def __init__(self, message: str, *, path: Path, operation: str) -> None:
        super().__init__(message)
        self.path = path
        self.operation = operation


class BufferIndexError(LocaleKeysError, IndexError):
    """Raised when a buffer operation receives an out-of-range line index."""

    def __init__(self, message: str, *, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index


class TranslationFormatError(LocaleKeysError, ValueError):
    """Raised when a ``locale.key.path=value`` argument cannot be parsed."""

    def __init__(self, message: str, *, raw: str) -> None:
        super().__init__(message)
        self.raw = raw


__all__ = [
    "LocaleKeysError",
    "MalformedKeyPathError",
    "FileAccessError",
    "BufferIndexError",
    "TranslationFormatError",
]
