"""Dotted key paths and the translation entries built on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence, Tuple, Union

from locale_keys.errors import MalformedKeyPathError

SEPARATOR = "."


@dataclass(frozen=True, slots=True)
class KeyPath:
    """Immutable sequence of mapping keys, outermost first."""

    segments: Tuple[str, ...]

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        dotted = SEPARATOR.join(segments)
        if not segments:
            raise MalformedKeyPathError("Key path cannot be empty", key_path=dotted)
        for segment in segments:
            if not segment.strip():
                raise MalformedKeyPathError(
                    f"Key path '{dotted}' contains an empty segment", key_path=dotted
                )
            if "\n" in segment or "\r" in segment:
                raise MalformedKeyPathError(
                    f"Key path segment {segment!r} contains a line break",
                    key_path=dotted,
                )
        object.__setattr__(self, "segments", segments)

    @classmethod
    def parse(cls, dotted: str) -> "KeyPath":
        if not dotted:
            raise MalformedKeyPathError("Key path cannot be empty", key_path=dotted)
        return cls(tuple(dotted.split(SEPARATOR)))

    @property
    def dotted(self) -> str:
        return SEPARATOR.join(self.segments)

    @property
    def leaf(self) -> str:
        return self.segments[-1]

    @property
    def depth(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.dotted


@dataclass(frozen=True, slots=True)
class TranslationEntry:
    """One value destined for exactly one leaf line."""

    key_path: KeyPath
    value: str

    @classmethod
    def create(cls, key_path: Union[str, KeyPath], value: str) -> "TranslationEntry":
        path = key_path if isinstance(key_path, KeyPath) else KeyPath.parse(key_path)
        return cls(key_path=path, value=value)


EntryLike = Union[TranslationEntry, Mapping[str, str], Sequence[str]]


def coerce_entry(item: EntryLike) -> TranslationEntry:
    """Accept a ready entry, a ``{"key_path", "value"}`` mapping, or a pair."""

    if isinstance(item, TranslationEntry):
        return item
    if isinstance(item, Mapping):
        key_path = str(item.get("key_path", ""))
        return TranslationEntry.create(key_path, str(item["value"]))
    key_path, value = item
    return TranslationEntry.create(key_path, value)


def describe_entry(item: EntryLike) -> str:
    """Best-effort dotted key for reporting, even when the entry is malformed."""

    if isinstance(item, TranslationEntry):
        return item.key_path.dotted
    if isinstance(item, Mapping):
        return str(item.get("key_path", ""))
    return str(item[0]) if item else ""


__all__ = [
    "KeyPath",
    "TranslationEntry",
    "EntryLike",
    "coerce_entry",
    "describe_entry",
]
