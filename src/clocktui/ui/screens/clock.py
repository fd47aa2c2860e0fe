"""Main clock screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.screen import Screen

from clocktui.ui.widgets.clock_face import ClockFace

if TYPE_CHECKING:
    from textual import events
    from textual.app import ComposeResult

    from clocktui.core.models import AnimatedTimeSpec


class ClockScreen(Screen[None]):
    """Full-screen clock face.

    Input reaching this screen is handed to the scheduler rather than handled
    here; modal screens on top of it keep their keys to themselves.
    """

    def __init__(self, spec: AnimatedTimeSpec, *, classic: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self._spec = spec
        self._classic = classic

    def compose(self) -> ComposeResult:
        yield ClockFace(self._spec, classic=self._classic, id="clock-face")

    @property
    def face(self) -> ClockFace:
        return self.query_one("#clock-face", ClockFace)

    def on_key(self, event: events.Key) -> None:
        self.app.feed_input(event)  # type: ignore[attr-defined]

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.app.feed_input(event)  # type: ignore[attr-defined]

    def on_resize(self, event: events.Resize) -> None:
        self.app.feed_input(event)  # type: ignore[attr-defined]
