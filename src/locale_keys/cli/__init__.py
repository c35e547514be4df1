"""Command-line layer wrapping the locale key editor."""

from .app import EXIT_FAILURE, EXIT_OK, build_parser, main, run
from .arguments import TranslationArgument, build_file_map
from .reporting import ConsoleReporter

__all__ = [
    "EXIT_FAILURE",
    "EXIT_OK",
    "ConsoleReporter",
    "TranslationArgument",
    "build_file_map",
    "build_parser",
    "main",
    "run",
]
