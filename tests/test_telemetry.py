from typing import Iterator

import pytest

from locale_keys.runtime.telemetry import (
    TelemetrySettings,
    configure,
    get_logger,
    record_event,
    span,
)


@pytest.fixture(autouse=True)
def restore_configuration() -> Iterator[None]:
    yield
    configure()


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCALE_KEYS_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOCALE_KEYS_DISABLE_CONSOLE", "yes")
    monkeypatch.setenv("LOCALE_KEYS_LOG_JSON", "1")
    monkeypatch.setenv("LOCALE_KEYS_LOG_BUFFERED", "true")
    monkeypatch.setenv("LOCALE_KEYS_LOG_BUFFER_SIZE", "64")

    settings = TelemetrySettings.from_env()

    assert settings.level == "DEBUG"
    assert settings.console is False
    assert settings.json is True
    assert settings.buffer_size == 64


def test_defaults_log_warnings_to_console(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_LEVEL", "DISABLE_CONSOLE", "NO_COLOR", "LOG_JSON", "LOG_FILE"):
        monkeypatch.delenv(f"LOCALE_KEYS_{name}", raising=False)
    monkeypatch.delenv("LOCALE_KEYS_LOG_BUFFERED", raising=False)

    settings = TelemetrySettings.from_env()

    assert settings == TelemetrySettings()
    assert settings.level == "WARNING"


def test_configure_drops_cached_loggers() -> None:
    quiet = TelemetrySettings(console=False)
    assert configure(quiet) is quiet

    logger = get_logger("locale_keys.tests")
    assert get_logger("locale_keys.tests") is logger

    configure(quiet)
    assert get_logger("locale_keys.tests") is not logger


def test_span_reraises_and_keeps_metadata() -> None:
    with pytest.raises(KeyError):
        with span("tests::boom", component="tests", metadata={"count": 3}) as handle:
            handle.add_metadata("stage", "before")
            assert handle.metadata == {"count": "3", "stage": "before"}
            raise KeyError("boom")


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        record_event("tests.unknown", level="loud")
