"""Cursor state tracked while descending a key path."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    """Search window for one nesting level.

    ``position`` is the last line matched or written at the current level and
    ``boundary`` the last line (inclusive) still inside the parent's block.
    """

    position: int = 0
    boundary: int = -1

    def window(self) -> range:
        """Line indices a child key of ``position`` may occupy."""

        return range(self.position + 1, self.boundary + 1)

    def shift(self, count: int) -> None:
        """Account for ``count`` lines inserted (negative: removed) in the window."""

        self.boundary += count
