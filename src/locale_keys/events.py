"""Minimal event bus used to report processing progress to callers."""

from __future__ import annotations

from typing import Callable, Dict

EventCallback = Callable[[object], None]


class EventBus:
    """Fan out named events to subscribed callbacks.

    Events emitted by the processor:

    ``entry.processed`` -- payload :class:`~locale_keys.editor.EntryResult`
    ``entry.failed`` -- payload :class:`~locale_keys.editor.EntryResult`
    ``file.updated`` -- payload :class:`~locale_keys.editor.FileResult`
    ``file.failed`` -- payload :class:`~locale_keys.editor.FileResult`
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[EventCallback]] = {}

    def subscribe(self, event: str, callback: EventCallback) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


__all__ = ["EventBus", "EventCallback"]
