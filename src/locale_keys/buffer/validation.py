"""Index validation helpers shared by buffer operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from locale_keys.errors import BufferIndexError

if TYPE_CHECKING:
    from .document import LineDocument


def ensure_index(document: "LineDocument", index: int) -> int:
    if index < 0 or index >= document.line_count:
        raise BufferIndexError(
            f"Line {index} out of range (document has {document.line_count} lines)",
            index=index,
        )
    return index


def ensure_insert_index(document: "LineDocument", index: int) -> int:
    if index < 0 or index > document.line_count:
        raise BufferIndexError(
            f"Insert position {index} out of range "
            f"(document has {document.line_count} lines)",
            index=index,
        )
    return index
