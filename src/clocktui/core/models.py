"""Block, token and spec models for the animated time display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(slots=True)
class Block:
    """Smallest animatable slice of the rendered time string.

    ``progress`` and ``threshold`` are in milliseconds.
    """

    is_constant: bool
    size: int
    current_value: str = ""
    target_value: str = ""
    progress: float = 0.0
    threshold: int = 0

    @property
    def is_transitioning(self) -> bool:
        return not self.is_constant and self.current_value != self.target_value

    @property
    def ratio(self) -> float:
        """Transition progress clamped to [0, 1] for the renderer."""
        if self.progress <= 0:
            return 0.0
        if self.threshold <= 0:
            return 1.0
        return min(self.progress / self.threshold, 1.0)


@dataclass(slots=True)
class Token:
    """A fragment of the format string and the blocks it renders into."""

    format_fragment: str
    blocks: list[Block] = field(default_factory=list)


@dataclass(slots=True)
class AnimatedTimeSpec:
    """Tokenized format plus the transition timing shared by every block."""

    tokens: list[Token] = field(default_factory=list)
    timing: int = 0
    format_spec: str = ""

    def iter_blocks(self) -> Iterator[Block]:
        for token in self.tokens:
            yield from token.blocks

    @property
    def is_animating(self) -> bool:
        """True while any block shows a value other than its latest sample."""
        return any(block.is_transitioning for block in self.iter_blocks())

    def current_text(self) -> str:
        return "".join(block.current_value for block in self.iter_blocks())

    def target_text(self) -> str:
        return "".join(block.target_value for block in self.iter_blocks())

    def partition(self) -> list[tuple[str, list[tuple[bool, int]]]]:
        """Return the block layout as plain data (fragment, [(constant, size)])."""
        return [
            (token.format_fragment, [(block.is_constant, block.size) for block in token.blocks])
            for token in self.tokens
        ]
