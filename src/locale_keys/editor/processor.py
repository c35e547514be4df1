"""Batch processing of locale files: load, apply entries, save, report."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Union, cast

from locale_keys.buffer import LineDocument, load_document, save_document
from locale_keys.config import Settings
from locale_keys.errors import FileAccessError, MalformedKeyPathError
from locale_keys.events import EventBus
from locale_keys.runtime import telemetry

from .formatter import ValueFormatter
from .key_editor import EditOutcome, KeyPathEditor
from .keypath import EntryLike, coerce_entry, describe_entry


@dataclass(slots=True)
class FileBatch:
    """Entries destined for one file, all belonging to ``locale``."""

    locale: str
    entries: List[EntryLike] = field(default_factory=list)

    @classmethod
    def coerce(cls, value: Union["FileBatch", Mapping[str, object]]) -> "FileBatch":
        if isinstance(value, FileBatch):
            return value
        entries = cast(Iterable[EntryLike], value.get("entries") or [])
        return cls(locale=str(value["locale"]), entries=list(entries))


@dataclass(slots=True)
class EntryResult:
    path: Path
    key_path: str
    outcome: Optional[EditOutcome] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class FileResult:
    path: Path
    locale: str
    entries: List[EntryResult] = field(default_factory=list)
    saved: bool = False
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None and all(entry.ok for entry in self.entries)


@dataclass(slots=True)
class ProcessReport:
    files: List[FileResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(result.ok for result in self.files)

    @property
    def failed_entries(self) -> List[EntryResult]:
        return [
            entry for result in self.files for entry in result.entries if not entry.ok
        ]

    @property
    def failed_files(self) -> List[FileResult]:
        return [result for result in self.files if result.error is not None]


FileMap = Mapping[Union[str, Path], Union[FileBatch, Mapping[str, object]]]


class LocaleFileProcessor:
    """Runs :class:`KeyPathEditor` over every file of a file map, one at a time.

    Malformed key paths fail only their own entry. A :class:`FileAccessError`
    is re-raised when ``stop_on_error`` is set, otherwise it is recorded on the
    file's result and processing moves on to the next file.
    """

    def __init__(
        self,
        *,
        bus: Optional[EventBus] = None,
        settings: Optional[Settings] = None,
        formatter: Optional[ValueFormatter] = None,
        stop_on_error: bool = True,
        logger_name: Optional[str] = None,
    ) -> None:
        self.bus = bus or EventBus()
        self.settings = settings or Settings.from_env()
        self.formatter = formatter or ValueFormatter()
        self.stop_on_error = stop_on_error
        self._logger_name = logger_name

    def process_files(self, file_map: FileMap) -> ProcessReport:
        report = ProcessReport()
        with telemetry.span(
            "processor::run",
            logger_name=self._logger_name,
            component="processor",
            metadata={"files": len(file_map)},
        ):
            for path, batch in file_map.items():
                report.files.append(self.process_file(path, FileBatch.coerce(batch)))
        return report

    def process_file(self, path: Union[str, Path], batch: FileBatch) -> FileResult:
        target = Path(path)
        result = FileResult(path=target, locale=batch.locale)
        with telemetry.span(
            "processor::file",
            logger_name=self._logger_name,
            component="processor",
            metadata={"path": str(target), "locale": batch.locale},
        ) as handle:
            try:
                document = load_document(target, encoding=self.settings.encoding)
                editor = KeyPathEditor(
                    document,
                    batch.locale,
                    formatter=self.formatter,
                    logger_name=self._logger_name,
                )
                result.entries.extend(
                    self._apply_entries(editor, target, batch.entries)
                )
                if document.dirty:
                    save_document(target, document, encoding=self.settings.encoding)
                    result.saved = True
            except FileAccessError as exc:
                result.error = exc
                handle.add_metadata("error", exc.operation)
                self.bus.emit("file.failed", result)
                if self.stop_on_error:
                    raise
                return result

            handle.add_metadata("saved", result.saved)
            self.bus.emit("file.updated", result)
            return result

    def _apply_entries(
        self, editor: KeyPathEditor, path: Path, entries: Iterable[EntryLike]
    ) -> List[EntryResult]:
        results: List[EntryResult] = []
        for item in entries:
            entry_result = EntryResult(path=path, key_path=describe_entry(item))
            try:
                entry_result.outcome = editor.apply(coerce_entry(item))
            except MalformedKeyPathError as exc:
                entry_result.error = exc
                telemetry.record_event(
                    "processor.entry_failed",
                    level="warning",
                    data={"path": str(path), "key_path": exc.key_path},
                    logger_name=self._logger_name,
                )
                self.bus.emit("entry.failed", entry_result)
            else:
                self.bus.emit("entry.processed", entry_result)
            results.append(entry_result)
        return results


def process_files(
    file_map: FileMap,
    *,
    bus: Optional[EventBus] = None,
    stop_on_error: bool = True,
) -> ProcessReport:
    """Convenience wrapper around :meth:`LocaleFileProcessor.process_files`."""

    processor = LocaleFileProcessor(bus=bus, stop_on_error=stop_on_error)
    return processor.process_files(file_map)


def apply_entries(text: str, locale: str, entries: Sequence[EntryLike]) -> str:
    """Apply ``entries`` to in-memory YAML ``text`` and return the new text."""

    document = LineDocument.from_text(text)
    editor = KeyPathEditor(document, locale)
    editor.apply_all(coerce_entry(item) for item in entries)
    return document.text


__all__ = [
    "EntryResult",
    "FileBatch",
    "FileMap",
    "FileResult",
    "LocaleFileProcessor",
    "ProcessReport",
    "apply_entries",
    "process_files",
]
