"""3x3 glyph rows and wipe compositing for block rendering."""

from __future__ import annotations

from enum import IntEnum

from textual.renderables.digits import DIGITS, DIGITS3X3

GLYPH_HEIGHT = 3
GLYPH_WIDTH = 3


class WipeDirection(IntEnum):
    """Order in which successive transitions of one block sweep in."""

    DOWN = 0
    UP = 1
    RIGHT = 2
    LEFT = 3

    def next(self) -> WipeDirection:
        return WipeDirection((self + 1) % len(WipeDirection))


def glyph_width(text: str) -> int:
    return sum(GLYPH_WIDTH if char in DIGITS else 1 for char in text)


def glyph_rows(text: str, width: int | None = None) -> list[str]:
    """Render ``text`` as three rows of box-drawing glyphs.

    Characters without a glyph sit on the bottom row, one cell wide. Rows are
    left-aligned and padded to ``width`` when given.
    """
    rows: list[list[str]] = [[], [], []]
    for char in text:
        position = DIGITS.find(char)
        if position == -1:
            rows[0].append(" ")
            rows[1].append(" ")
            rows[2].append(char)
            continue
        base = position * GLYPH_HEIGHT
        for offset in range(GLYPH_HEIGHT):
            rows[offset].append(DIGITS3X3[base + offset].ljust(GLYPH_WIDTH))

    lines = ["".join(row) for row in rows]
    if width is not None:
        lines = [line.ljust(width) for line in lines]
    return lines


def wipe(
    current: list[str],
    incoming: list[str],
    ratio: float,
    direction: WipeDirection,
) -> list[list[tuple[str, bool]]]:
    """Composite ``incoming`` over ``current`` for a transition at ``ratio``.

    Returns, per row, a list of ``(text, is_incoming)`` segments. Both inputs
    must have the same number of equally wide rows.
    """
    height = len(current)
    width = max((len(row) for row in current), default=0)
    ratio = min(max(ratio, 0.0), 1.0)

    if direction in (WipeDirection.DOWN, WipeDirection.UP):
        covered = round(ratio * height)
        if direction is WipeDirection.DOWN:
            incoming_rows = range(covered)
        else:
            incoming_rows = range(height - covered, height)
        return [
            [(incoming[index], True)] if index in incoming_rows else [(current[index], False)]
            for index in range(height)
        ]

    covered = round(ratio * width)
    result: list[list[tuple[str, bool]]] = []
    for old, new in zip(current, incoming, strict=True):
        if direction is WipeDirection.RIGHT:
            segments = [(new[:covered], True), (old[covered:], False)]
        else:
            split = width - covered
            segments = [(old[:split], False), (new[split:], True)]
        result.append([(text, flag) for text, flag in segments if text])
    return result
