"""Line-list document model for locale files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence

from .validation import ensure_index, ensure_insert_index

LinePredicate = Callable[[str], bool]


@dataclass(slots=True)
class LineDocument:
    """Mutable list of raw lines, each keeping its own terminator.

    Joining the lines reproduces the file byte for byte, so lines that are
    never touched survive a load/save cycle unchanged.
    """

    _lines: List[str] = field(default_factory=list)
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "LineDocument":
        return cls(_lines=text.splitlines(keepends=True))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineDocument":
        return cls(_lines=list(lines))

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        ensure_index(self, index)
        return self._lines[index]

    def is_blank(self) -> bool:
        return all(not line.strip() for line in self._lines)

    def find_line_index(
        self,
        predicate: LinePredicate,
        start: int = 0,
        stop: Optional[int] = None,
    ) -> Optional[int]:
        """First index in ``[start, stop)`` whose line satisfies ``predicate``."""

        end = len(self._lines) if stop is None else min(stop, len(self._lines))
        for index in range(max(start, 0), end):
            if predicate(self._lines[index]):
                return index
        return None

    def insert_line(self, index: int, text: str) -> None:
        """Insert ``text`` before ``index``; ``index == line_count`` appends."""

        ensure_insert_index(self, index)
        self._lines.insert(index, text)
        self._touch()

    def insert_lines(self, index: int, lines: Iterable[str]) -> int:
        ensure_insert_index(self, index)
        new_lines = list(lines)
        self._lines[index:index] = new_lines
        self._touch()
        return len(new_lines)

    def append_line(self, text: str) -> None:
        self.insert_line(len(self._lines), text)

    def replace_line(self, index: int, text: str) -> bool:
        """Overwrite one line; returns ``False`` when the text was already identical."""

        ensure_index(self, index)
        if self._lines[index] == text:
            return False
        self._lines[index] = text
        self._touch()
        return True

    def delete_lines(self, start: int, stop: int) -> int:
        """Remove lines ``[start, stop)`` and return how many were dropped."""

        if start >= stop:
            return 0
        ensure_index(self, start)
        ensure_insert_index(self, stop)
        del self._lines[start:stop]
        self._touch()
        return stop - start

    def clear(self) -> None:
        if self._lines:
            self._lines.clear()
            self._touch()

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True


__all__ = ["LineDocument", "LinePredicate"]
