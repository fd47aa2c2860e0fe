"""Screens for clocktui."""

from clocktui.ui.screens.clock import ClockScreen

__all__ = ["ClockScreen"]
