"""Main clocktui application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from textual import work
from textual.app import App
from textual.message import Message

from clocktui.config import ClockConfig
from clocktui.core.engine import ClockEngine
from clocktui.core.events import Key, Mouse, Resize
from clocktui.core.sampler import local_now
from clocktui.core.scheduler import ChannelClosed, EventSource
from clocktui.core.tokenizer import tokenize
from clocktui.debug_log import log, setup_debug_logging
from clocktui.input import QueueInputSource, translate_textual_event
from clocktui.keybindings import APP_BINDINGS, is_quit_key
from clocktui.limits import DEBUG_BUILD
from clocktui.terminal import resolve_theme_name
from clocktui.theme import CLOCKTUI_THEME, CLOCKTUI_THEME_256
from clocktui.ui.screens.clock import ClockScreen

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from clocktui.core.events import Event


class ClockApp(App[int]):
    """Animated terminal clock."""

    TITLE = "clocktui"
    CSS_PATH = "styles/clocktui.tcss"

    BINDINGS = APP_BINDINGS

    @dataclass
    class SchedulerEvent(Message):
        """A scheduler event handed over from the event pump thread."""

        event: Event

    def __init__(
        self,
        config: ClockConfig | None = None,
        *,
        clock: Callable[[], datetime] = local_now,
        run_scheduler: bool = True,
    ) -> None:
        super().__init__()

        self.register_theme(CLOCKTUI_THEME)
        self.register_theme(CLOCKTUI_THEME_256)

        self.config = config or ClockConfig()
        self.theme = resolve_theme_name(self.config.display.theme)

        timing = self.config.timing
        self.spec = tokenize(self.config.effective_format, timing.transition_timing, now=clock())
        self._run_scheduler = run_scheduler
        self._input = QueueInputSource()
        self.events = EventSource(
            timing.logic_tick_interval,
            timing.render_tick_interval,
            self._input,
            translate=translate_textual_event,
            on_input_lost=self._on_input_lost,
        )
        self.engine = ClockEngine(self.spec, self.events, clock=clock)
        self.running = True

    def on_mount(self) -> None:
        setup_debug_logging(logging.DEBUG if DEBUG_BUILD else logging.INFO)
        self.push_screen(ClockScreen(self.spec, classic=self.config.display.classic))
        log.info(
            "Clock started",
            format=self.config.effective_format,
            blocks=sum(len(token.blocks) for token in self.spec.tokens),
        )
        if self._run_scheduler:
            self.events.spawn()
            self._pump_events()

    def on_unmount(self) -> None:
        self.events.close()
        self._input.close()

    def feed_input(self, raw: object) -> None:
        """Queue raw terminal input for the scheduler's input worker."""
        self._input.put(raw)

    @work(thread=True, exclusive=True, group="scheduler", name="event-pump")
    def _pump_events(self) -> None:
        """Forward scheduler events to the UI loop, in order, until the queue closes."""
        while True:
            try:
                event = self.events.next_event()
            except ChannelClosed:
                return
            self.post_message(self.SchedulerEvent(event))

    def on_clock_app_scheduler_event(self, message: SchedulerEvent) -> None:
        self.dispatch_event(message.event)

    def dispatch_event(self, event: Event) -> None:
        """Main-loop handling for one scheduler event."""
        if isinstance(event, Key):
            if is_quit_key(event):
                self.stop()
            return
        if isinstance(event, Resize):
            log.debug("Terminal resized", width=event.width, height=event.height)
            return
        if isinstance(event, Mouse):
            return
        if self.engine.handle(event):
            self._sync_face()

    def _sync_face(self) -> None:
        screen = self.screen
        if isinstance(screen, ClockScreen):
            screen.face.sync()
        else:
            # A modal is on top; repaint the clock underneath it.
            for installed in self.screen_stack:
                if isinstance(installed, ClockScreen):
                    installed.face.sync()

    def stop(self) -> None:
        """End the main loop; the process exits 0."""
        if not self.running:
            return
        self.running = False
        self.exit(0)

    def _on_input_lost(self, exc: BaseException) -> None:
        # Runs on the input worker thread.
        self.call_from_thread(
            self.exit, 1, return_code=1, message=f"Terminal input lost: {exc}"
        )

    def action_toggle_debug_log(self) -> None:
        from clocktui.ui.modals.debug_log import DebugLogModal

        if isinstance(self.screen, DebugLogModal):
            self.screen.dismiss(None)
        else:
            self.push_screen(DebugLogModal())
