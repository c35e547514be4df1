"""Environment-driven settings for locale_keys."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "LOCALE_KEYS_"
LOCALE_PLACEHOLDER = "%<locale>s"
DEFAULT_FILE_TEMPLATE = (
    f"config/locales/{LOCALE_PLACEHOLDER}/main.{LOCALE_PLACEHOLDER}.yml"
)
DEFAULT_ENCODING = "utf-8"
INDENT_UNIT = "  "


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


@dataclass(frozen=True, slots=True)
class Settings:
    """Defaults the processor and CLI fall back to."""

    file_template: str = DEFAULT_FILE_TEMPLATE
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            file_template=_env("FILE_TEMPLATE") or DEFAULT_FILE_TEMPLATE,
            encoding=_env("ENCODING") or DEFAULT_ENCODING,
        )

    def resolve_path(self, locale: str, template: Optional[str] = None) -> str:
        """Substitute ``locale`` into ``template`` (or the configured default)."""

        return (template or self.file_template).replace(LOCALE_PLACEHOLDER, locale)


__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_FILE_TEMPLATE",
    "INDENT_UNIT",
    "LOCALE_PLACEHOLDER",
    "Settings",
]
