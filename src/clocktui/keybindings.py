"""Keybindings for the clocktui application.

Quit keys are not Textual bindings: they travel through the scheduler's event
queue like any other input and are resolved by ``is_quit_key``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.binding import Binding, BindingType

if TYPE_CHECKING:
    from clocktui.core.events import Key

# =============================================================================
# App Bindings
# =============================================================================

APP_BINDINGS: list[BindingType] = [
    Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    Binding("f12", "toggle_debug_log", "Debug", show=False),
]

QUIT_KEYS = frozenset({"escape", "q", "Q", "ctrl+d", "ctrl+c"})

# =============================================================================
# Modal Bindings
# =============================================================================

DEBUG_LOG_BINDINGS: list[BindingType] = [
    Binding("escape", "close", "Close"),
    Binding("f12", "close", "Close", show=False),
    Binding("c", "clear_logs", "Clear"),
    Binding("s", "save_logs", "Save"),
]


def is_quit_key(event: Key) -> bool:
    """Esc, q/Q and the Ctrl+C / Ctrl+D chords end the main loop."""
    if event.key in QUIT_KEYS:
        return True
    # Textual reports shifted letters as "Q" or "shift+q" depending on the driver.
    return event.key == "shift+q"
