"""Wall-clock sampling into block target values."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from clocktui.core.models import AnimatedTimeSpec

logger = logging.getLogger(__name__)


def local_now() -> datetime:
    """Current local wall-clock time (naive, as the display shows it)."""
    return datetime.now()


def render_fragment(fragment: str, instant: datetime) -> str | None:
    """Render a strftime fragment, or None when the platform rejects it."""
    try:
        return instant.strftime(fragment)
    except (ValueError, UnicodeError) as exc:
        logger.debug("strftime rejected %r: %s", fragment, exc)
        return None


def split_rendering(rendered: str, sizes: Sequence[int]) -> list[str]:
    """Cut a rendering into consecutive slices of the given sizes.

    The last slice takes whatever is left, so joining the result always gives
    back ``rendered`` even when its length drifted from ``sum(sizes)``.
    """
    parts: list[str] = []
    offset = 0
    last = len(sizes) - 1
    for index, size in enumerate(sizes):
        if index == last:
            parts.append(rendered[offset:])
        else:
            parts.append(rendered[offset : offset + size])
        offset += size
    return parts


def sample(spec: AnimatedTimeSpec, now: datetime | None = None) -> None:
    """Write the rendering of ``now`` into every block's ``target_value``.

    A block whose new target equals the value it already shows drops any
    partial progress, so a clock stepping back mid-transition leaves nothing
    half-drawn.
    """
    instant = now if now is not None else local_now()
    for token in spec.tokens:
        if not token.blocks:
            continue
        rendered = render_fragment(token.format_fragment, instant) or ""
        values = split_rendering(rendered, [block.size for block in token.blocks])
        for block, value in zip(token.blocks, values, strict=True):
            block.target_value = value
            if value == block.current_value:
                block.progress = 0.0

