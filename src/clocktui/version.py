"""Package version lookup."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version


@lru_cache(maxsize=1)
def get_clocktui_version() -> str:
    """Installed clocktui version, or 'dev' when running from a source tree."""
    try:
        return version("clocktui")
    except PackageNotFoundError:
        return "dev"
