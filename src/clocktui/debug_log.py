"""In-memory debug log shown by the F12 viewer.

Records from Python's logging module and from the ``log`` facade (which also
forwards to Textual's devtools) land in one ring buffer.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from clocktui.limits import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from pathlib import Path


class LogSource(Enum):
    TEXTUAL = "TEXTUAL"
    LOGGING = "LOGGING"


@dataclass(slots=True)
class LogEntry:
    group: str  # level name
    message: str
    timestamp: float
    source: LogSource


log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)

_buffer_generation: int = 0


def _truncate(message: str) -> str:
    if len(message) > MAX_LOG_MESSAGE_LENGTH:
        return message[:MAX_LOG_MESSAGE_LENGTH] + "... [truncated]"
    return message


class ClockLogger:
    """Callable logger facade: buffers the line and hands it to Textual."""

    def __call__(self, *args: object, **kwargs: Any) -> None:
        self.info(*args, **kwargs)

    def _log(self, level: str, *args: object, **kwargs: Any) -> None:
        output = " ".join(str(arg) for arg in args)
        if kwargs:
            key_values = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
            output = f"{output} {key_values}" if output else key_values

        output = _truncate(output)
        log_buffer.append(
            LogEntry(group=level, message=output, timestamp=time.time(), source=LogSource.TEXTUAL)
        )

        # No-op outside a running app.
        from textual import log as textual_log

        textual_log(output)

    def debug(self, *args: object, **kwargs: Any) -> None:
        self._log("DEBUG", *args, **kwargs)

    def info(self, *args: object, **kwargs: Any) -> None:
        self._log("INFO", *args, **kwargs)

    def warning(self, *args: object, **kwargs: Any) -> None:
        self._log("WARNING", *args, **kwargs)

    def error(self, *args: object, **kwargs: Any) -> None:
        self._log("ERROR", *args, **kwargs)


class DebugLogHandler(logging.Handler):
    """Logging handler that copies records into the ring buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_buffer.append(
                LogEntry(
                    group=record.levelname,
                    message=_truncate(self.format(record)),
                    timestamp=record.created,
                    source=LogSource.LOGGING,
                )
            )
        except Exception:
            self.handleError(record)


_handler: DebugLogHandler | None = None


def setup_debug_logging(level: int = logging.DEBUG) -> None:
    """Attach the buffer handler to the ``clocktui`` logger (idempotent)."""
    global _handler

    if _handler is not None:
        return

    _handler = DebugLogHandler()
    _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger = logging.getLogger("clocktui")
    package_logger.addHandler(_handler)
    package_logger.setLevel(level)

    log.info("Debug logging initialized - press F12 to view logs")


def teardown_debug_logging() -> None:
    global _handler

    if _handler is None:
        return
    logging.getLogger("clocktui").removeHandler(_handler)
    _handler = None


def clear_log_buffer() -> None:
    global _buffer_generation
    log_buffer.clear()
    _buffer_generation += 1


def get_buffer_generation() -> int:
    """Generation counter, bumped on every clear."""
    return _buffer_generation


def format_entry(entry: LogEntry) -> str:
    ts = datetime.fromtimestamp(entry.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    source = "[PY]" if entry.source == LogSource.LOGGING else "[TX]"
    return f"{ts} {source} [{entry.group}] {entry.message}"


def export_logs_to_file(path: Path) -> int:
    """Write the buffer to ``path``; return the number of entries written."""
    path.parent.mkdir(parents=True, exist_ok=True)
    entries = list(log_buffer)
    with path.open("w", encoding="utf-8") as f:
        f.write("# clocktui debug log\n")
        f.write(f"# entries: {len(entries)}  generation: {_buffer_generation}\n\n")
        for entry in entries:
            f.write(format_entry(entry) + "\n")
    return len(entries)


log = ClockLogger()
