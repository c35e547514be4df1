from pathlib import Path
from typing import List, Tuple

import pytest
import yaml

from locale_keys.config import Settings
from locale_keys.editor import FileBatch, LocaleFileProcessor, process_files
from locale_keys.errors import FileAccessError, MalformedKeyPathError
from locale_keys.events import EventBus


def make_bus() -> Tuple[EventBus, List[Tuple[str, object]]]:
    bus = EventBus()
    events: List[Tuple[str, object]] = []
    for name in ("entry.processed", "entry.failed", "file.updated", "file.failed"):
        bus.subscribe(name, lambda payload, name=name: events.append((name, payload)))
    return bus, events


def test_creates_files_for_each_locale(tmp_path: Path) -> None:
    en_file = tmp_path / "config" / "locales" / "en" / "main.en.yml"
    es_file = tmp_path / "config" / "locales" / "es" / "main.es.yml"
    file_map = {
        str(en_file): {
            "locale": "en",
            "entries": [
                {"key_path": "app.title", "value": "My Application"},
                {"key_path": "app.description", "value": "This is a great app"},
            ],
        },
        str(es_file): {
            "locale": "es",
            "entries": [{"key_path": "app.title", "value": "Mi Aplicación"}],
        },
    }

    report = process_files(file_map)

    assert report.ok
    assert [result.path for result in report.files] == [en_file, es_file]
    assert yaml.safe_load(en_file.read_text(encoding="utf-8")) == {
        "en": {
            "app": {"title": "My Application", "description": "This is a great app"}
        }
    }
    assert es_file.read_text(encoding="utf-8") == (
        "es:\n  app:\n    title: Mi Aplicación\n"
    )


def test_updates_existing_file_preserving_other_lines(tmp_path: Path) -> None:
    target = tmp_path / "main.en.yml"
    target.write_text(
        "en:\n"
        "  app:\n"
        "    title: Old Title\n"
        "    version: 1.0.0\n"
        "  footer:\n"
        "    copyright: \"© 2025\"\n"
        "    emoji: Existing with émojis 🚀\n",
        encoding="utf-8",
    )

    process_files(
        {
            target: FileBatch(
                locale="en",
                entries=[
                    ("app.title", "New Title"),
                    ("footer.note", "New with àccénts and 中文"),
                ],
            )
        }
    )

    assert target.read_text(encoding="utf-8") == (
        "en:\n"
        "  app:\n"
        "    title: New Title\n"
        "    version: 1.0.0\n"
        "  footer:\n"
        "    note: New with àccénts and 中文\n"
        "    copyright: \"© 2025\"\n"
        "    emoji: Existing with émojis 🚀\n"
    )


def test_events_are_emitted_per_entry_and_file(tmp_path: Path) -> None:
    bus, events = make_bus()
    target = tmp_path / "messages.yml"

    processor = LocaleFileProcessor(bus=bus)
    processor.process_files(
        {target: {"locale": "en", "entries": [("new_key", "new value")]}}
    )

    assert [name for name, _ in events] == ["entry.processed", "file.updated"]
    entry = events[0][1]
    assert entry.key_path == "new_key"
    assert entry.outcome.action == "inserted"
    assert events[1][1].saved is True


def test_malformed_entry_fails_alone(tmp_path: Path) -> None:
    bus, events = make_bus()
    target = tmp_path / "partial.yml"

    report = LocaleFileProcessor(bus=bus).process_files(
        {
            target: {
                "locale": "en",
                "entries": [("good.key", "ok"), ("bad..key", "nope"), ("", "empty")],
            }
        }
    )

    assert not report.ok
    assert [entry.key_path for entry in report.failed_entries] == ["bad..key", ""]
    assert all(
        isinstance(entry.error, MalformedKeyPathError)
        for entry in report.failed_entries
    )
    assert [name for name, _ in events].count("entry.failed") == 2
    assert target.read_text(encoding="utf-8") == "en:\n  good:\n    key: ok\n"


def test_unchanged_file_is_not_rewritten(tmp_path: Path) -> None:
    target = tmp_path / "same.yml"
    target.write_text("en:\n  existing: Same Value\n", encoding="utf-8")

    report = process_files(
        {target: {"locale": "en", "entries": [("existing", "Same Value")]}}
    )

    assert report.ok
    assert report.files[0].saved is False
    assert report.files[0].entries[0].outcome.action == "unchanged"


def test_file_access_error_propagates_by_default(tmp_path: Path) -> None:
    unreadable = tmp_path / "is_a_dir"
    unreadable.mkdir()

    with pytest.raises(FileAccessError):
        process_files({unreadable: {"locale": "en", "entries": [("a", "b")]}})


def test_file_access_error_is_recorded_when_continuing(tmp_path: Path) -> None:
    bus, events = make_bus()
    unreadable = tmp_path / "is_a_dir"
    unreadable.mkdir()
    good = tmp_path / "good.yml"

    report = LocaleFileProcessor(bus=bus, stop_on_error=False).process_files(
        {
            unreadable: {"locale": "en", "entries": [("a", "b")]},
            good: {"locale": "en", "entries": [("a", "b")]},
        }
    )

    assert [result.path for result in report.failed_files] == [unreadable]
    assert good.read_text(encoding="utf-8") == "en:\n  a: b\n"
    assert ("file.failed", report.files[0]) in events


def test_settings_resolve_locale_placeholder(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCALE_KEYS_FILE_TEMPLATE", "i18n/%<locale>s/translations.yml")

    settings = Settings.from_env()

    assert settings.resolve_path("fr") == "i18n/fr/translations.yml"
    assert settings.resolve_path("de", "%<locale>s.yml") == "de.yml"
    assert Settings().resolve_path("en") == "config/locales/en/main.en.yml"
