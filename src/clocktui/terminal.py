"""Terminal color capability detection."""

from __future__ import annotations

import os

# Checked before COLORTERM, which some shell configs set unconditionally.
_NO_TRUECOLOR_PROGRAMS = frozenset({"apple_terminal"})

_TRUECOLOR_PROGRAMS = frozenset(
    {
        "iterm.app",
        "vscode",
        "alacritty",
        "kitty",
        "wezterm",
        "ghostty",
        "warp",
        "tabby",
        "rio",
        "contour",
        "hyper",
    }
)


def supports_truecolor() -> bool:
    """Best guess at whether the terminal renders 24-bit color.

    Priority: explicit ``TEXTUAL_COLOR_SYSTEM=truecolor``, then known
    ``TERM_PROGRAM`` values, then ``COLORTERM``, then Windows Terminal.
    """
    if os.environ.get("TEXTUAL_COLOR_SYSTEM", "").lower() == "truecolor":
        return True

    program = os.environ.get("TERM_PROGRAM", "").lower()
    if program in _NO_TRUECOLOR_PROGRAMS:
        return False
    if program in _TRUECOLOR_PROGRAMS:
        return True

    if os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit"):
        return True

    return bool(os.environ.get("WT_SESSION"))


def resolve_theme_name(choice: str) -> str:
    """Map the configured theme choice to a registered theme name."""
    if choice == "truecolor":
        return "clocktui"
    if choice == "256":
        return "clocktui-256"
    return "clocktui" if supports_truecolor() else "clocktui-256"
