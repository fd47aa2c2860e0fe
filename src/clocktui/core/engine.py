"""Main-loop side of the clock: applies ticks to the spec and reports activity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from clocktui.core.events import LogicTick, RenderTick
from clocktui.core.sampler import local_now, sample
from clocktui.core.transitions import advance

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from clocktui.core.events import Event
    from clocktui.core.models import AnimatedTimeSpec

logger = logging.getLogger(__name__)


class ActivitySink(Protocol):
    def notify_activity(self, active: bool) -> None: ...


class ClockEngine:
    """Owns the ``AnimatedTimeSpec`` and mutates it from the main loop only."""

    def __init__(
        self,
        spec: AnimatedTimeSpec,
        activity: ActivitySink,
        *,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self.spec = spec
        self._activity = activity
        self._clock = clock
        self.logic_ticks = 0
        self.render_ticks = 0

    def logic_tick(self, elapsed_ms: float = 0.0) -> bool:
        """Re-sample the clock; return whether an animation is now pending."""
        del elapsed_ms
        self.logic_ticks += 1
        sample(self.spec, self._clock())
        active = self.spec.is_animating
        self._activity.notify_activity(active)
        return active

    def render_tick(self, elapsed_ms: float) -> bool:
        """Advance transitions; return whether any block is still moving."""
        self.render_ticks += 1
        transitioning = advance(self.spec, elapsed_ms)
        self._activity.notify_activity(transitioning)
        return transitioning

    def handle(self, event: Event) -> bool:
        """Apply a tick event. Returns True if the display may have changed."""
        if isinstance(event, LogicTick):
            self.logic_tick(event.elapsed_ms)
            return True
        if isinstance(event, RenderTick):
            self.render_tick(event.elapsed_ms)
            return True
        return False
