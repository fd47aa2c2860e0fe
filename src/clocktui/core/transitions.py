"""Per-block transition state machine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clocktui.core.models import AnimatedTimeSpec, Block


def advance_block(block: Block, elapsed_ms: float) -> bool:
    """Advance one block; return True while it is still transitioning.

    A block whose progress ran past its threshold commits on the following
    call, never in the call that pushed it over.
    """
    if block.is_constant:
        return False
    if block.progress > block.threshold:
        block.current_value = block.target_value
        block.progress = 0.0
        return False
    if block.target_value != block.current_value:
        block.progress += elapsed_ms
        return True
    # Target moved back to the displayed value mid-transition.
    block.progress = 0.0
    return False


def advance(spec: AnimatedTimeSpec, elapsed_ms: float) -> bool:
    """Advance every block by ``elapsed_ms``; return whether any is still moving."""
    transitioning = False
    for block in spec.iter_blocks():
        if advance_block(block, elapsed_ms):
            transitioning = True
    return transitioning
