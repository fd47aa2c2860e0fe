"""clocktui: animated terminal clock."""

from clocktui.version import get_clocktui_version

__version__ = get_clocktui_version()

__all__ = ["__version__"]
