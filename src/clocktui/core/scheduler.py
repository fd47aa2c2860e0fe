"""Dual-clock event scheduler.

Two daemon threads feed one ordered queue:

- the input worker waits on the input source for at most the remaining logic
  interval, forwards input immediately and emits ``LogicTick`` whenever the
  interval has elapsed;
- the render worker parks on the activity flag while nothing is animating and
  emits ``RenderTick`` every render interval while something is.

The activity flag is the only state the main loop shares with the workers.
"""

from __future__ import annotations

import _thread
import logging
import queue
import threading
import time
from typing import TYPE_CHECKING, Protocol, Self

from clocktui.core.events import INPUT_EVENT_TYPES, LogicTick, RenderTick

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from clocktui.core.events import Event

logger = logging.getLogger(__name__)


class ChannelClosed(Exception):
    """The event channel was closed by its reader."""


class InputUnavailable(Exception):
    """The input source can no longer deliver input."""


class InputSource(Protocol):
    """Blocking, timed source of raw input events."""

    def poll(self, timeout: float) -> object | None:
        """Wait up to ``timeout`` seconds; return a raw input event or None."""
        ...


class NullInputSource:
    """Input source for headless use; only ever times out."""

    def poll(self, timeout: float) -> object | None:
        time.sleep(timeout)
        return None


def passthrough_input(raw: object) -> Event | None:
    """Default translator: accept raw input that already is a core input event."""
    if isinstance(raw, INPUT_EVENT_TYPES):
        return raw  # type: ignore[return-value]
    return None


def interrupt_main_thread(exc: BaseException) -> None:
    """Terminate the process by raising KeyboardInterrupt in the main thread."""
    del exc
    _thread.interrupt_main()


class EventChannel:
    """Unbounded FIFO of events that the reader can close."""

    _SENTINEL = object()

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[object] = queue.SimpleQueue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, event: Event) -> None:
        if self._closed.is_set():
            raise ChannelClosed("event channel is closed")
        self._queue.put(event)

    def receive(self, timeout: float | None = None) -> Event:
        """Block until the next event arrives.

        Raises:
            ChannelClosed: The channel was closed.
            TimeoutError: ``timeout`` elapsed with no event.
        """
        if self._closed.is_set():
            raise ChannelClosed("event channel is closed")
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError(f"no event within {timeout}s") from None
        if item is self._SENTINEL:
            # Leave the sentinel for any other blocked reader.
            self._queue.put(item)
            raise ChannelClosed("event channel is closed")
        return item  # type: ignore[return-value]

    def close(self) -> None:
        if self._closed.is_set():
            return
        self._closed.set()
        self._queue.put(self._SENTINEL)


class ActivityFlag:
    """Mutex-guarded boolean with a condition variable for the render worker."""

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._active = False
        self._closed = False
        self.activations = 0

    @property
    def active(self) -> bool:
        with self._condition:
            return self._active

    def set(self, active: bool) -> bool:
        """Store ``active``; wake the waiter once on a false to true change.

        Returns:
            True if this call woke the waiter.
        """
        with self._condition:
            wake = active and not self._active
            self._active = active
            if wake:
                self.activations += 1
                self._condition.notify()
            return wake

    def wait_active(self, timeout: float | None = None) -> bool:
        """Park until the flag is true; False if closed or timed out."""
        with self._condition:
            self._condition.wait_for(lambda: self._active or self._closed, timeout)
            return self._active and not self._closed

    def close(self) -> None:
        with self._condition:
            self._closed = True
            self._condition.notify_all()


class EventSource:
    """Handle on the two scheduler workers and their shared event queue."""

    def __init__(
        self,
        logic_interval_ms: int,
        render_interval_ms: int,
        input_source: InputSource | None = None,
        *,
        translate: Callable[[object], Event | None] = passthrough_input,
        on_input_lost: Callable[[BaseException], None] = interrupt_main_thread,
    ) -> None:
        if logic_interval_ms <= 0 or render_interval_ms <= 0:
            raise ValueError("tick intervals must be positive")
        self.logic_interval = logic_interval_ms / 1000
        self.render_interval = render_interval_ms / 1000
        self._input = input_source if input_source is not None else NullInputSource()
        self._translate = translate
        self._on_input_lost = on_input_lost
        self._channel = EventChannel()
        self._activity = ActivityFlag()
        self._stopped = threading.Event()
        self._threads = (
            threading.Thread(
                target=self._run_input_worker, name="clocktui-input", daemon=True
            ),
            threading.Thread(
                target=self._run_render_worker, name="clocktui-render", daemon=True
            ),
        )
        self._started = False
        self.render_wakeups = 0

    @classmethod
    def start(
        cls,
        logic_interval_ms: int,
        render_interval_ms: int,
        input_source: InputSource | None = None,
        **kwargs,
    ) -> EventSource:
        """Create an event source and spawn both workers."""
        source = cls(logic_interval_ms, render_interval_ms, input_source, **kwargs)
        source.spawn()
        return source

    def spawn(self) -> None:
        if self._started:
            return
        self._started = True
        for thread in self._threads:
            thread.start()
        logger.debug(
            "Scheduler started (logic=%.3fs, render=%.3fs)",
            self.logic_interval,
            self.render_interval,
        )

    @property
    def is_animating(self) -> bool:
        return self._activity.active

    @property
    def activations(self) -> int:
        """Number of idle to animating episodes seen so far."""
        return self._activity.activations

    @property
    def closed(self) -> bool:
        return self._channel.closed

    def next_event(self, timeout: float | None = None) -> Event:
        """Block until the next event; raises ChannelClosed after ``close()``."""
        return self._channel.receive(timeout)

    def notify_activity(self, active: bool) -> None:
        """Report whether anything is animating; wakes the render worker on start."""
        if self._activity.set(active):
            logger.debug("Animation started; waking render worker")

    def close(self) -> None:
        """Close the queue and release both workers."""
        if self._stopped.is_set():
            return
        self._stopped.set()
        self._channel.close()
        self._activity.close()
        logger.debug("Scheduler closed")

    def join(self, timeout: float | None = None) -> None:
        for thread in self._threads:
            if thread.is_alive():
                thread.join(timeout)

    def __enter__(self) -> Self:
        self.spawn()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _run_input_worker(self) -> None:
        last_tick = time.monotonic()
        while not self._stopped.is_set():
            remaining = self.logic_interval - (time.monotonic() - last_tick)
            try:
                raw = self._input.poll(max(remaining, 0.0))
            except InputUnavailable as exc:
                if self._stopped.is_set():
                    return
                logger.critical("Input source unavailable: %s", exc)
                self._on_input_lost(exc)
                return

            try:
                if raw is not None:
                    event = self._translate(raw)
                    if event is not None:
                        self._channel.send(event)

                elapsed = time.monotonic() - last_tick
                if elapsed >= self.logic_interval:
                    self._channel.send(LogicTick(elapsed_ms=elapsed * 1000))
                    last_tick = time.monotonic()
            except ChannelClosed:
                logger.debug("Event channel closed; input worker exiting")
                return

    def _run_render_worker(self) -> None:
        while self._activity.wait_active():
            self.render_wakeups += 1
            last_tick = time.monotonic()
            while self._activity.active:
                if self._stopped.wait(self.render_interval):
                    return
                if not self._activity.active:
                    break
                now = time.monotonic()
                try:
                    self._channel.send(RenderTick(elapsed_ms=(now - last_tick) * 1000))
                except ChannelClosed:
                    logger.debug("Event channel closed; render worker exiting")
                    return
                last_tick = now
