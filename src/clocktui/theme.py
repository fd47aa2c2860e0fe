"""Textual themes for clocktui."""

from __future__ import annotations

from textual.theme import Theme

# Phosphor - amber digits on a dark CRT glass
CLOCKTUI_THEME = Theme(
    name="clocktui",
    primary="#ffb000",  # Amber phosphor - settled digits
    secondary="#4fc3f7",  # Cold cyan - incoming digits
    accent="#ff7043",
    foreground="#e0d6c2",
    background="#0d0f12",
    surface="#15181d",
    panel="#1c2027",
    warning="#ffca28",
    error="#ef5350",
    success="#66bb6a",
    dark=True,
    variables={
        "border": "#2b3038",
        "border-blurred": "#2b303880",
        "text-muted": "#6b7280",
        "text-disabled": "#6b728080",
        "footer-key-foreground": "#6b7280",
        "footer-key-background": "transparent",
        "footer-description-foreground": "#6b728080",
    },
)

# 256-color fallback; each value is the nearest xterm-256 entry.
CLOCKTUI_THEME_256 = Theme(
    name="clocktui-256",
    primary="#ffaf00",  # color(214)
    secondary="#5fd7ff",  # color(81)
    accent="#ff875f",  # color(209)
    foreground="#d7d7af",  # color(187)
    background="#121212",  # color(233)
    surface="#1c1c1c",  # color(234)
    panel="#262626",  # color(235)
    warning="#ffd75f",  # color(221)
    error="#ff5f5f",  # color(203)
    success="#5faf5f",  # color(71)
    dark=True,
    variables={
        "border": "#303030",  # color(236)
        "border-blurred": "#30303080",
        "text-muted": "#6c6c6c",  # color(242)
        "text-disabled": "#6c6c6c80",
        "footer-key-foreground": "#6c6c6c",
        "footer-key-background": "transparent",
        "footer-description-foreground": "#6c6c6c80",
    },
)
