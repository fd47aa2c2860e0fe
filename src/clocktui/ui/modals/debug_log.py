"""Debug log viewer modal (F12)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from rich.markup import escape
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Label, RichLog, Rule

from clocktui.debug_log import (
    LogEntry,
    LogSource,
    clear_log_buffer,
    export_logs_to_file,
    get_buffer_generation,
    log_buffer,
)
from clocktui.keybindings import DEBUG_LOG_BINDINGS
from clocktui.paths import get_debug_log_path

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.timer import Timer

LEVEL_COLORS = {
    "DEBUG": "dim",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


class DebugLogModal(ModalScreen[None]):
    """Tail of the in-memory debug log."""

    BINDINGS = DEBUG_LOG_BINDINGS

    DEFAULT_CSS = """
    DebugLogModal {
        align: center middle;
    }
    DebugLogModal > #debug-log-container {
        width: 90%;
        height: 80%;
        border: round $border;
        background: $surface;
        padding: 0 1;
    }
    DebugLogModal .modal-title {
        text-style: bold;
        color: $primary;
    }
    """

    _log_refresh_timer: Timer | None = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._line_count = 0
        self._buffer_generation = 0

    def compose(self) -> ComposeResult:
        with Vertical(id="debug-log-container"):
            yield Label("Debug Logs", classes="modal-title")
            yield Label("[dim]c clear | s save | Escape close[/dim]", classes="modal-subtitle")
            yield Rule()
            yield RichLog(id="debug-log", highlight=True, markup=True, auto_scroll=True, wrap=True)
        yield Footer()

    def on_mount(self) -> None:
        self._buffer_generation = get_buffer_generation()
        self._update_logs()
        self._log_refresh_timer = self.set_interval(0.5, self._update_logs)

    def on_unmount(self) -> None:
        if self._log_refresh_timer is not None:
            self._log_refresh_timer.stop()
            self._log_refresh_timer = None

    @property
    def rich_log(self) -> RichLog:
        return self.query_one("#debug-log", RichLog)

    def _update_logs(self) -> None:
        generation = get_buffer_generation()
        buffer_len = len(log_buffer)
        # Cleared elsewhere, or the ring buffer dropped old lines.
        if generation != self._buffer_generation or buffer_len < self._line_count:
            self._buffer_generation = generation
            self._line_count = 0
            self.rich_log.clear()

        if buffer_len > self._line_count:
            for entry in list(log_buffer)[self._line_count :]:
                self.rich_log.write(self._format_entry(entry))
            self._line_count = buffer_len

    def _format_entry(self, entry: LogEntry) -> str:
        ts = datetime.fromtimestamp(entry.timestamp).strftime("%H:%M:%S")
        color = LEVEL_COLORS.get(entry.group, "white")
        source = "" if entry.source == LogSource.TEXTUAL else " [PY]"
        label = escape(f"[{entry.group}]{source}")
        return f"[{color}]{ts} {label}[/{color}] {escape(entry.message)}"

    def action_close(self) -> None:
        self.dismiss(None)

    def action_clear_logs(self) -> None:
        clear_log_buffer()
        self._buffer_generation = get_buffer_generation()
        self._line_count = 0
        self.rich_log.clear()
        self.rich_log.write("[dim]Logs cleared[/dim]")

    def action_save_logs(self) -> None:
        path = get_debug_log_path()
        try:
            count = export_logs_to_file(path)
        except OSError as exc:
            self.rich_log.write(f"[red]✗ Failed to export logs: {exc}[/red]")
            return
        self.rich_log.write(f"[green]✓ Exported {count} log entries to {path}[/green]")
