"""Scalar rendering for the text that follows ``key:`` on a leaf line."""

from __future__ import annotations

import re
from typing import List

import yaml
from yaml.resolver import Resolver

STR_TAG = "tag:yaml.org,2002:str"
BLOCK_INDENT = "  "

# Characters that carry structure in block-style plain scalars.
INDICATOR_CHARS = frozenset(":{}[],#&*!|>'\"%@`")

# Anything the YAML reader refuses to see unescaped in a stream.
_NON_PRINTABLE = re.compile(
    "[^\x09\x0a\x20-\x7e\x85\xa0-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)
_DOUBLE_QUOTE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\0": "\\0",
    "\x85": "\\N",
    "\u2028": "\\L",
    "\u2029": "\\P",
}
_FORCE_ESCAPE = "\t\r\x85\u2028\u2029"


class ValueFormatter:
    """Render a string so that a YAML loader reads back exactly that string.

    Single-line values become plain or quoted scalars. Values with line
    breaks become literal block scalars whose body lines sit one level
    deeper than the key, so callers must split the result on ``"\\n"``.
    """

    def __init__(self) -> None:
        self._resolver = Resolver()

    def format(self, value: str, indent: str = "") -> str:
        if _NON_PRINTABLE.search(value) or any(
            char in value for char in _FORCE_ESCAPE
        ):
            return self.double_quoted(value)
        if "\n" in value:
            return self.block_literal(value, indent)
        if self.needs_quotes(value):
            return self.single_quoted(value)
        return value

    def needs_quotes(self, value: str) -> bool:
        if not value or value != value.strip():
            return True
        if any(char in INDICATOR_CHARS for char in value):
            return True
        if value[0] in "-?~" or value.startswith(("---", "...")):
            return True
        return not self._resolves_to_str(value)

    def block_literal(self, value: str, indent: str = "") -> str:
        if not value.endswith("\n"):
            chomp, body = "-", value
        elif value == "\n" or value.endswith("\n\n"):
            chomp, body = "+", value[:-1]
        else:
            chomp, body = "", value[:-1]

        lines = body.split("\n")
        first = next((line for line in lines if line), "")
        indicator = str(len(BLOCK_INDENT)) if first.startswith(" ") else ""
        body_indent = indent + BLOCK_INDENT
        rendered: List[str] = [f"|{indicator}{chomp}"]
        rendered.extend(f"{body_indent}{line}" if line else "" for line in lines)
        return "\n".join(rendered)

    @staticmethod
    def single_quoted(value: str) -> str:
        return "'" + value.replace("'", "''") + "'"

    @staticmethod
    def double_quoted(value: str) -> str:
        parts: List[str] = []
        for char in value:
            if char in _DOUBLE_QUOTE_ESCAPES:
                parts.append(_DOUBLE_QUOTE_ESCAPES[char])
            elif _NON_PRINTABLE.match(char):
                code = ord(char)
                if code <= 0xFF:
                    parts.append(f"\\x{code:02X}")
                elif code <= 0xFFFF:
                    parts.append(f"\\u{code:04X}")
                else:
                    parts.append(f"\\U{code:08X}")
            else:
                parts.append(char)
        return '"' + "".join(parts) + '"'

    def _resolves_to_str(self, value: str) -> bool:
        return self._resolver.resolve(yaml.ScalarNode, value, (True, False)) == STR_TAG


_DEFAULT = ValueFormatter()


def format_value(value: str, indent: str = "") -> str:
    return _DEFAULT.format(value, indent)


__all__ = ["ValueFormatter", "format_value", "INDICATOR_CHARS"]
