"""Default intervals and numeric limits - no circular dependencies."""

from __future__ import annotations

import os


def _is_debug_build() -> bool:
    """Debug mode follows ``CLOCKTUI_DEBUG``, else pre-release package versions."""
    env_debug = os.environ.get("CLOCKTUI_DEBUG", "").lower()
    if env_debug in ("1", "true"):
        return True
    if env_debug in ("0", "false"):
        return False

    from clocktui.version import get_clocktui_version

    version_lower = get_clocktui_version().lower()
    return any(marker in version_lower for marker in ("dev", "a", "b", "rc"))


DEBUG_BUILD: bool = _is_debug_build()

# Milliseconds.
LOGIC_TICK_INTERVAL = 200
RENDER_TICK_INTERVAL = 10
TRANSITION_TIMING = 500

DEFAULT_FORMAT = "%X"

MAX_LOG_MESSAGE_LENGTH = 4096
MAX_LOG_LINES = 2000
