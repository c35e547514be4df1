"""Locate-or-insert editing of dotted keys inside a locale line document."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import partial
from typing import Iterable, List, Literal, Optional

from locale_keys.buffer import Cursor, LineDocument
from locale_keys.config import INDENT_UNIT
from locale_keys.runtime.telemetry import record_event, span

from .formatter import ValueFormatter
from .keypath import TranslationEntry

EditAction = Literal["inserted", "updated", "unchanged"]

_KEEP_CHOMPING = re.compile(r":\s+[|>](?:[1-9]?\+|\+[1-9])\s*(?:#.*)?$")


@dataclass(slots=True)
class EditOutcome:
    """What applying one entry did to the document."""

    key_path: str
    action: EditAction
    line: int
    lines_added: int = 0
    lines_removed: int = 0

    @property
    def changed(self) -> bool:
        return self.action != "unchanged"


def _is_key_line(line: str, prefix: str) -> bool:
    """True when ``line`` is ``prefix`` followed by a value or nothing."""

    if not line.startswith(prefix):
        return False
    rest = line[len(prefix) :]
    return not rest or rest[0] in " \t\r\n"


def _depth(line: str) -> Optional[int]:
    """Leading-space count of a structural line; ``None`` for blanks and comments."""

    stripped = line.lstrip(" ")
    if not stripped.strip() or stripped.startswith("#"):
        return None
    return len(line) - len(stripped)


class KeyPathEditor:
    """Applies translation entries for one locale to a :class:`LineDocument`.

    Each nesting level searches only inside its parent's block: after a key
    is matched or inserted, the cursor boundary is pulled in to the line
    before the next key at the same or a shallower indentation. That keeps
    ``b.x`` from matching the ``x:`` that lives under ``a:``.
    """

    def __init__(
        self,
        document: LineDocument,
        locale: str,
        *,
        formatter: Optional[ValueFormatter] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.document = document
        self.locale = locale
        self.formatter = formatter or ValueFormatter()
        self._logger_name = logger_name

    def apply_all(self, entries: Iterable[TranslationEntry]) -> List[EditOutcome]:
        return [self.apply(entry) for entry in entries]

    def apply(self, entry: TranslationEntry) -> EditOutcome:
        key_path = entry.key_path
        with span(
            "editor::apply",
            logger_name=self._logger_name,
            component="editor",
            metadata={"locale": self.locale, "key_path": key_path.dotted},
        ) as handle:
            root = self.ensure_locale_root()
            cursor = Cursor(
                position=root,
                boundary=self._block_end(root, "", self.document.line_count - 1),
            )
            outcome: Optional[EditOutcome] = None
            depth = key_path.depth

            for level, segment in enumerate(key_path.segments, start=1):
                indent = INDENT_UNIT * level
                prefix = f"{indent}{segment}:"
                match = self.document.find_line_index(
                    partial(_is_key_line, prefix=prefix),
                    cursor.position + 1,
                    cursor.boundary + 1,
                )

                if level == depth:
                    if match is None:
                        outcome = self._insert_leaf(cursor, indent, entry)
                    else:
                        outcome = self._overwrite_leaf(cursor, match, indent, entry)
                    break

                if match is None:
                    self._terminate(cursor.position)
                    cursor.shift(
                        self.document.insert_lines(
                            cursor.position + 1, [f"{prefix}{self._newline()}"]
                        )
                    )
                    match = cursor.position + 1

                cursor.position = match
                cursor.boundary = self._block_end(match, indent, cursor.boundary)

            assert outcome is not None
            handle.add_metadata("action", outcome.action)
            record_event(
                "editor.entry",
                level="debug",
                data={
                    "locale": self.locale,
                    "key_path": outcome.key_path,
                    "action": outcome.action,
                    "line": outcome.line,
                },
                logger_name=self._logger_name,
            )
            return outcome

    def ensure_locale_root(self) -> int:
        """Return the index of ``<locale>:``, appending it when missing."""

        prefix = f"{self.locale}:"
        index = self.document.find_line_index(partial(_is_key_line, prefix=prefix))
        if index is not None:
            return index

        newline = self._newline()
        if self.document.is_blank():
            self.document.clear()
        else:
            self._terminate(self.document.line_count - 1)
        self.document.append_line(f"{prefix}{newline}")
        return self.document.line_count - 1

    def _insert_leaf(
        self, cursor: Cursor, indent: str, entry: TranslationEntry
    ) -> EditOutcome:
        self._terminate(cursor.position)
        position = cursor.position + 1
        added = self.document.insert_lines(position, self._leaf_lines(indent, entry))
        cursor.shift(added)
        cursor.position = position
        return EditOutcome(
            key_path=entry.key_path.dotted,
            action="inserted",
            line=position,
            lines_added=added,
        )

    def _overwrite_leaf(
        self, cursor: Cursor, match: int, indent: str, entry: TranslationEntry
    ) -> EditOutcome:
        # The old value may span several lines (nested keys or a block scalar).
        block_end = self._block_end(match, indent, cursor.boundary)
        keeps_blanks = bool(
            _KEEP_CHOMPING.search(self.document.get_line(match).rstrip("\r\n"))
        )
        body_end = match
        for index in range(match + 1, block_end + 1):
            line = self.document.get_line(index)
            if line.strip() and len(line) - len(line.lstrip(" ")) > len(indent):
                body_end = index
            elif not line.strip() and keeps_blanks:
                # Trailing blank lines belong to a "|+" value.
                body_end = index
            elif keeps_blanks:
                break

        old_lines = list(self.document.snapshot()[match : body_end + 1])
        new_lines = self._leaf_lines(indent, entry)
        cursor.position = match
        if [line.rstrip("\r\n") for line in old_lines] == [
            line.rstrip("\r\n") for line in new_lines
        ]:
            return EditOutcome(
                key_path=entry.key_path.dotted, action="unchanged", line=match
            )

        removed = self.document.delete_lines(match, body_end + 1)
        added = self.document.insert_lines(match, new_lines)
        cursor.shift(added - removed)
        return EditOutcome(
            key_path=entry.key_path.dotted,
            action="updated",
            line=match,
            lines_added=added,
            lines_removed=removed,
        )

    def _leaf_lines(self, indent: str, entry: TranslationEntry) -> List[str]:
        formatted = self.formatter.format(entry.value, indent)
        newline = self._newline()
        text = f"{indent}{entry.key_path.leaf}: {formatted}"
        return [f"{part}{newline}" for part in text.split("\n")]

    def _block_end(self, position: int, indent: str, limit: int) -> int:
        """Last index of the block opened at ``position``, never past ``limit``."""

        width = len(indent)

        def closes_block(line: str) -> bool:
            depth = _depth(line)
            return depth is not None and depth <= width

        sibling = self.document.find_line_index(
            closes_block,
            position + 1,
            limit + 1,
        )
        return limit if sibling is None else sibling - 1

    def _terminate(self, index: int) -> None:
        if index < 0 or index >= self.document.line_count:
            return
        line = self.document.get_line(index)
        if not line.endswith(("\n", "\r")):
            self.document.replace_line(index, line + self._newline())

    def _newline(self) -> str:
        for line in self.document.snapshot():
            if line.endswith("\r\n"):
                return "\r\n"
            if line.endswith("\n"):
                return "\n"
        return "\n"


__all__ = ["EditAction", "EditOutcome", "KeyPathEditor"]
