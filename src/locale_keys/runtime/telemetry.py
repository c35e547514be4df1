"""Structured logging and profiling for locale_keys, backed by telelog.

Callers use three entry points: ``get_logger`` for a cached logger,
``record_event`` for one structured record, and ``span`` to profile a block
under a component name. ``configure`` rebuilds the telelog configuration,
which is otherwise read from ``LOCALE_KEYS_*`` variables on first use.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "LOCALE_KEYS_"
PACKAGE_LOGGER = "locale_keys"
TRUTHY = {"1", "true", "yes", "on"}


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _flag(raw: Optional[str]) -> bool:
    return raw is not None and raw.lower() in TRUTHY


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Logging switches read from the environment."""

    level: str = "WARNING"
    console: bool = True
    color: bool = True
    json: bool = False
    log_file: str = ""
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        buffer_size = None
        if _flag(_env("LOG_BUFFERED")):
            buffer_size = int(_env("LOG_BUFFER_SIZE") or "2048")
        return cls(
            level=(_env("LOG_LEVEL") or "WARNING").upper(),
            console=not _flag(_env("DISABLE_CONSOLE")),
            color=not _flag(_env("NO_COLOR")),
            json=_flag(_env("LOG_JSON")),
            log_file=_env("LOG_FILE") or "",
            buffer_size=buffer_size,
        )

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size is not None:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        # span() relies on logger.profile
        config.with_profiling(True)
        return config


_config: Optional[Any] = None
_loggers: Dict[str, Any] = {}


def configure(settings: Optional[TelemetrySettings] = None) -> TelemetrySettings:
    """Adopt ``settings`` (or re-read the environment) and drop cached loggers."""

    global _config
    adopted = settings or TelemetrySettings.from_env()
    _config = adopted.build()
    _loggers.clear()
    return adopted


def get_logger(name: Optional[str] = None) -> Any:
    if _config is None:
        configure()
    logger_name = name or PACKAGE_LOGGER
    if logger_name not in _loggers:
        _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _loggers[logger_name]


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _emit(log: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    """Log with structured pairs when the level has a ``*_with`` variant."""

    name = level.lower()
    structured: Optional[Callable[..., Any]] = getattr(log, f"{name}_with", None)
    if structured is not None:
        pairs: List[Tuple[str, str]] = [(k, _text(v)) for k, v in fields.items()]
        structured(message, pairs)
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {fields}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit an ``event::<name>`` record carrying ``data``."""

    fields = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", fields)


@dataclass
class SpanHandle:
    """Yielded by :func:`span`; metadata added here is logged if the span fails."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        fields: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            fields["component"] = self.component
        _emit(self.logger, "error", "span::fail", fields)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``, tracked under ``component`` when given.

    ``metadata`` is attached to the logger as context for the duration of the
    block. Exceptions are logged through :meth:`SpanHandle.fail` and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(logger=log, name=name, component=component)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)

    with ExitStack() as stack:
        for key, value in handle.metadata.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "SpanHandle",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
