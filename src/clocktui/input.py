"""Bridge from Textual's input events to the scheduler's input worker."""

from __future__ import annotations

import queue

from textual import events

from clocktui.core.events import Event, Key, Mouse, Resize
from clocktui.core.scheduler import InputUnavailable


class QueueInputSource:
    """Input source fed by Textual handlers on the UI thread.

    The input worker blocks in ``poll``; ``close`` makes it see the source as
    gone for good.
    """

    _CLOSED = object()

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[object] = queue.SimpleQueue()

    def put(self, raw: object) -> None:
        self._queue.put(raw)

    def poll(self, timeout: float) -> object | None:
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
        if item is self._CLOSED:
            self._queue.put(item)
            raise InputUnavailable("terminal input closed")
        return item

    def close(self) -> None:
        self._queue.put(self._CLOSED)


def translate_textual_event(raw: object) -> Event | None:
    """Convert a Textual input event to a core event; other events are dropped."""
    if isinstance(raw, events.Key):
        return Key(key=raw.key, character=raw.character)
    if isinstance(raw, events.MouseDown):
        return Mouse(x=raw.x, y=raw.y, button=raw.button)
    if isinstance(raw, events.Resize):
        return Resize(width=raw.size.width, height=raw.size.height)
    if isinstance(raw, Key | Mouse | Resize):
        return raw
    return None
