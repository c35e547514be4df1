"""Console reporting of processor events."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from locale_keys.editor import EntryResult, FileResult, ProcessReport
from locale_keys.events import EventBus


class ConsoleReporter:
    """Prints one line per processed entry and per written file."""

    def __init__(
        self, console: Console, *, error_console: Console | None = None
    ) -> None:
        self.console = console
        self.error_console = error_console or console

    def attach(self, bus: EventBus) -> None:
        bus.subscribe("entry.processed", self._entry_processed)
        bus.subscribe("entry.failed", self._entry_failed)
        bus.subscribe("file.updated", self._file_updated)
        bus.subscribe("file.failed", self._file_failed)

    def summary(self, report: ProcessReport) -> None:
        if report.ok:
            self.console.print(
                f"[green]Processed {len(report.files)} files successfully.[/green]"
            )
            return
        failures = len(report.failed_entries) + len(report.failed_files)
        total = len(report.files)
        self.error_console.print(
            f"[red]Processed {total} files with {failures} failure(s).[/red]"
        )

    def error(self, message: str) -> None:
        self.error_console.print(f"[red]{escape(message)}[/red]")

    def _entry_processed(self, payload: object) -> None:
        assert isinstance(payload, EntryResult)
        key, path = escape(payload.key_path), escape(str(payload.path))
        self.console.print(f"[green]✓ Processed {key} in {path}[/green]")

    def _entry_failed(self, payload: object) -> None:
        assert isinstance(payload, EntryResult)
        self.error(f"✗ Skipped {payload.key_path} in {payload.path}: {payload.error}")

    def _file_updated(self, payload: object) -> None:
        assert isinstance(payload, FileResult)
        if payload.saved:
            path = escape(str(payload.path))
            self.console.print(f"[green]✓ Updated {path}[/green]")
        else:
            self.console.print(f"No changes to {escape(str(payload.path))}")

    def _file_failed(self, payload: object) -> None:
        assert isinstance(payload, FileResult)
        self.error(f"✗ {payload.error}")


__all__ = ["ConsoleReporter"]
