"""Key-path editing of locale documents and batch file processing."""

from .formatter import ValueFormatter, format_value
from .key_editor import EditAction, EditOutcome, KeyPathEditor
from .keypath import EntryLike, KeyPath, TranslationEntry, coerce_entry
from .processor import (
    EntryResult,
    FileBatch,
    FileMap,
    FileResult,
    LocaleFileProcessor,
    ProcessReport,
    apply_entries,
    process_files,
)

__all__ = [
    "EditAction",
    "EditOutcome",
    "EntryLike",
    "EntryResult",
    "FileBatch",
    "FileMap",
    "FileResult",
    "KeyPath",
    "KeyPathEditor",
    "LocaleFileProcessor",
    "ProcessReport",
    "TranslationEntry",
    "ValueFormatter",
    "apply_entries",
    "coerce_entry",
    "format_value",
    "process_files",
]
