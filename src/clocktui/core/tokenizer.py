"""Split a strftime format into constant and variable blocks.

Classification happens once: every fragment is rendered at two instants chosen
to disagree wherever a directive can change (every digit of the usual numeric
fields, and the length of full weekday and month names). Characters that agree
at both instants are treated as constant from then on.
"""

from __future__ import annotations

import logging
from datetime import datetime

from clocktui.core.models import AnimatedTimeSpec, Block, Token
from clocktui.core.sampler import render_fragment, sample

logger = logging.getLogger(__name__)

DIRECTIVE_MARKER = "%"
DIRECTIVE_FLAGS = frozenset("-_0^#")
DIRECTIVE_MODIFIERS = frozenset("EO")

# Six single-character digit cells, HHMMSS.
CLASSIC_FORMAT = "%H%M%S"

# Monday 3 January 2000, midnight: 12-hour clock reads "12", day "03", yday "003".
REPRESENTATIVE_MIN = datetime(2000, 1, 3, 0, 0, 0, 0)
# Thursday 30 December 9999, 21:59:59: 12-hour clock reads "09", day "30", yday "364".
REPRESENTATIVE_MAX = datetime(9999, 12, 30, 21, 59, 59, 999999)


def _directive_end(format_spec: str, start: int) -> int | None:
    """Index just past the directive starting at ``start``, or None if incomplete."""
    index = start + 1
    length = len(format_spec)
    while index < length and format_spec[index] in DIRECTIVE_FLAGS:
        index += 1
    while index < length and format_spec[index].isdigit():
        index += 1
    if index < length and format_spec[index] in DIRECTIVE_MODIFIERS:
        index += 1
    if index >= length:
        return None
    return index + 1


def split_format(format_spec: str) -> list[str]:
    """Split a format string into literal runs and single directives.

    Literal runs are returned escaped (``%`` doubled) so every fragment is a
    valid format on its own.
    """
    fragments: list[str] = []
    literal: list[str] = []
    index = 0
    while index < len(format_spec):
        char = format_spec[index]
        if char != DIRECTIVE_MARKER:
            literal.append(char)
            index += 1
            continue
        end = _directive_end(format_spec, index)
        if end is None:
            literal.append(format_spec[index:].replace("%", "%%"))
            break
        if literal:
            fragments.append("".join(literal))
            literal = []
        fragments.append(format_spec[index:end])
        index = end
    if literal:
        fragments.append("".join(literal))
    return fragments


def classify_fragment(fragment: str, timing: int) -> Token:
    """Build the token for one fragment by diffing its two extreme renderings."""
    low = render_fragment(fragment, REPRESENTATIVE_MIN)
    high = render_fragment(fragment, REPRESENTATIVE_MAX)
    if low is None or high is None:
        logger.warning("Format fragment %r cannot be rendered; it will display nothing", fragment)
        return Token(format_fragment=fragment)

    if len(low) != len(high):
        width = max(len(low), len(high))
        return Token(
            format_fragment=fragment,
            blocks=[Block(is_constant=False, size=width, threshold=timing)],
        )

    return Token(
        format_fragment=fragment,
        blocks=[
            Block(is_constant=a == b, size=1, threshold=timing)
            for a, b in zip(low, high, strict=True)
        ],
    )


def tokenize(format_spec: str, timing: int, *, now: datetime | None = None) -> AnimatedTimeSpec:
    """Tokenize ``format_spec`` and seed every block with the current time.

    Blocks start settled (``current_value == target_value``), so the first
    frame shows the time without a transition.
    """
    spec = AnimatedTimeSpec(timing=timing, format_spec=format_spec)
    spec.tokens = [classify_fragment(fragment, timing) for fragment in split_format(format_spec)]

    sample(spec, now)
    for block in spec.iter_blocks():
        block.current_value = block.target_value
        block.progress = 0.0

    logger.debug(
        "Tokenized %r into %d tokens / %d blocks",
        format_spec,
        len(spec.tokens),
        sum(len(token.blocks) for token in spec.tokens),
    )
    return spec
