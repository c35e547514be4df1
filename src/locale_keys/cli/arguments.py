"""Parsing of ``locale.dotted.key=value`` arguments into a file map."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from locale_keys.config import Settings
from locale_keys.editor import FileBatch
from locale_keys.errors import TranslationFormatError

TRANSLATION_FORMAT = re.compile(r"([a-z]{2})\.(.+?)=(.*)", re.DOTALL)


@dataclass(frozen=True, slots=True)
class TranslationArgument:
    """One ``-t`` argument split into locale, key path and value."""

    locale: str
    key_path: str
    value: str

    @classmethod
    def parse(cls, raw: str) -> "TranslationArgument":
        match = TRANSLATION_FORMAT.fullmatch(raw)
        if match is None:
            raise TranslationFormatError(f"Invalid translation format: {raw}", raw=raw)
        locale, key_path, value = match.groups()
        return cls(locale=locale, key_path=key_path, value=value)

    @staticmethod
    def is_valid(raw: str) -> bool:
        return TRANSLATION_FORMAT.fullmatch(raw) is not None

    def to_entry(self) -> Dict[str, str]:
        return {"key_path": self.key_path, "value": self.value}


def build_file_map(
    translations: Iterable[str],
    *,
    template: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, FileBatch]:
    """Group translations by the file their locale resolves to, keeping input order."""

    resolved = settings or Settings.from_env()
    file_map: Dict[str, FileBatch] = {}
    for raw in translations:
        argument = TranslationArgument.parse(raw)
        path = resolved.resolve_path(argument.locale, template)
        batch = file_map.setdefault(path, FileBatch(locale=argument.locale))
        batch.entries.append(argument.to_entry())
    return file_map


__all__ = ["TRANSLATION_FORMAT", "TranslationArgument", "build_file_map"]
