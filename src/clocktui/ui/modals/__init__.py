"""Modal screens for clocktui."""

from clocktui.ui.modals.debug_log import DebugLogModal

__all__ = ["DebugLogModal"]
