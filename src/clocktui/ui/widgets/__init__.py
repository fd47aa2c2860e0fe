"""Widget components for clocktui."""

from clocktui.ui.widgets.clock_face import BlockView, ClockFace

__all__ = ["BlockView", "ClockFace"]
