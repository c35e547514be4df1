"""Command-line entry point: ``locale-keys -t en.app.title="My App"``."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from rich.console import Console

from locale_keys.config import DEFAULT_FILE_TEMPLATE, LOCALE_PLACEHOLDER, Settings
from locale_keys.editor import LocaleFileProcessor
from locale_keys.errors import TranslationFormatError
from locale_keys.events import EventBus
from locale_keys.runtime.telemetry import record_event

from .arguments import TranslationArgument, build_file_map
from .reporting import ConsoleReporter

EXIT_OK = 0
EXIT_FAILURE = 1
HELP_TOKENS = {"help", "-h", "--help"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locale-keys",
        usage="locale-keys [OPTIONS] [-t <locale.key=value> ...] locale.key=value",
        description="Insert or update dotted translation keys in locale YAML files.",
        add_help=False,
    )
    parser.add_argument(
        "-t",
        "--translation",
        dest="translations",
        action="append",
        default=[],
        metavar="TRANSLATION",
        help="Translation entry, can be given multiple times. "
        "Format: locale.dot.separated.key=value",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="file_template",
        metavar="FILE",
        help=f"File path. Supports {LOCALE_PLACEHOLDER} as a placeholder for the "
        f"locale (default: {DEFAULT_FILE_TEMPLATE})".replace("%", "%%"),
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="Show this help message and exit."
    )
    parser.add_argument("positional", nargs="*", help=argparse.SUPPRESS)
    return parser


def _collect_translations(args: argparse.Namespace) -> List[str]:
    translations = list(args.translations)
    positional = list(args.positional)
    if not translations and len(positional) == 1 and TranslationArgument.is_valid(
        positional[0]
    ):
        translations.append(positional.pop())
    if positional:
        record_event(
            "cli.ignored_arguments",
            level="warning",
            data={"arguments": positional},
        )
    return translations


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> int:
    arguments = list(sys.argv[1:] if argv is None else argv)
    out = console or Console(highlight=False, soft_wrap=True)
    err = error_console or Console(stderr=True, highlight=False, soft_wrap=True)
    parser = build_parser()

    if not arguments or arguments[0] in HELP_TOKENS:
        out.print(parser.format_help(), markup=False)
        return EXIT_OK

    args = parser.parse_args(arguments)
    if args.help:
        out.print(parser.format_help(), markup=False)
        return EXIT_OK

    reporter = ConsoleReporter(out, error_console=err)
    settings = Settings.from_env()
    try:
        translations = _collect_translations(args)
        if not translations:
            reporter.error("No translations provided. Use -t or --translation.")
            return EXIT_FAILURE
        file_map = build_file_map(
            translations, template=args.file_template, settings=settings
        )
    except TranslationFormatError as exc:
        reporter.error(str(exc))
        return EXIT_FAILURE

    bus = EventBus()
    reporter.attach(bus)
    processor = LocaleFileProcessor(bus=bus, settings=settings, stop_on_error=False)
    report = processor.process_files(file_map)
    reporter.summary(report)
    return EXIT_OK if report.ok else EXIT_FAILURE


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - manual invocation
    run()
