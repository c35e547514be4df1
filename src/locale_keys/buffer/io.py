"""Reading and writing locale files as line documents."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

from locale_keys.config import DEFAULT_ENCODING
from locale_keys.errors import FileAccessError
from locale_keys.runtime import telemetry

from .document import LineDocument

PathInput = Union[str, "PathLike[str]"]


def load_document(path: PathInput, *, encoding: str = DEFAULT_ENCODING) -> LineDocument:
    """Read ``path`` verbatim, or return an empty document when it does not exist.

    The parent directory is created so that a later :func:`save_document`
    cannot fail on a missing folder.
    """

    target = Path(path)
    with telemetry.span(
        "buffer::load",
        component="buffer",
        metadata={"path": str(target)},
    ) as handle:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            if not target.exists():
                handle.add_metadata("created", True)
                return LineDocument()
            with target.open("r", encoding=encoding, newline="") as stream:
                document = LineDocument.from_lines(stream.readlines())
        except OSError as exc:
            raise FileAccessError(
                f"Cannot read {target}: {exc}", path=target, operation="read"
            ) from exc
        handle.add_metadata("lines", document.line_count)
        return document


def save_document(
    path: PathInput, document: LineDocument, *, encoding: str = DEFAULT_ENCODING
) -> None:
    """Write the document's lines back exactly as they are held in memory."""

    target = Path(path)
    with telemetry.span(
        "buffer::save",
        component="buffer",
        metadata={"path": str(target), "lines": document.line_count},
    ):
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("w", encoding=encoding, newline="") as stream:
                stream.write(document.text)
        except OSError as exc:
            raise FileAccessError(
                f"Cannot write {target}: {exc}", path=target, operation="write"
            ) from exc
        document.dirty = False
