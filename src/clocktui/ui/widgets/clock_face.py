"""Clock face widgets: one BlockView per block, laid out in a row."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.containers import Horizontal
from textual.widget import Widget

from clocktui.ui.glyphs import GLYPH_HEIGHT, WipeDirection, glyph_rows, glyph_width, wipe

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.geometry import Size

    from clocktui.core.models import AnimatedTimeSpec, Block


class BlockView(Widget):
    """Draws one block: its displayed glyphs, wiped over by the incoming ones."""

    COMPONENT_CLASSES = {"block-view--incoming"}

    DEFAULT_CSS = """
    BlockView {
        width: auto;
        height: auto;
        color: $primary;
    }
    BlockView.-variable {
        border: round $border;
        padding: 0 1;
    }
    BlockView.-constant {
        padding: 1 0;
        color: $text-muted;
    }
    BlockView.-moving {
        border: round $secondary;
    }
    BlockView > .block-view--incoming {
        color: $secondary;
        text-style: bold;
    }
    """

    def __init__(self, block: Block, **kwargs) -> None:
        kind = "-constant" if block.is_constant else "-variable"
        kwargs["classes"] = f"{kwargs.get('classes') or ''} {kind}".strip()
        super().__init__(**kwargs)
        self.block = block
        self.direction = WipeDirection.DOWN
        self.commits = 0
        self._shown_value = block.current_value
        self._laid_out_width = self.cell_width

    @property
    def cell_width(self) -> int:
        block = self.block
        return max(
            glyph_width(block.current_value.ljust(block.size)),
            glyph_width(block.target_value.ljust(block.size)),
        )

    def get_content_width(self, container: Size, viewport: Size) -> int:
        return self.cell_width

    def get_content_height(self, container: Size, viewport: Size, width: int) -> int:
        return GLYPH_HEIGHT

    def sync(self) -> None:
        """Pick up the block's latest state and repaint if anything moved."""
        block = self.block
        if block.current_value != self._shown_value:
            # One commit finished; the next transition sweeps from another side.
            self._shown_value = block.current_value
            self.direction = self.direction.next()
            self.commits += 1
        self.set_class(block.progress > 0, "-moving")
        width = self.cell_width
        self.refresh(layout=width != self._laid_out_width)
        self._laid_out_width = width

    def render(self) -> Text:
        block = self.block
        width = self.cell_width
        current = glyph_rows(block.current_value.ljust(block.size), width)
        if block.is_constant or block.progress <= 0:
            return Text("\n".join(current), no_wrap=True, end="")

        incoming_style = self.get_component_rich_style("block-view--incoming")
        incoming = glyph_rows(block.target_value.ljust(block.size), width)
        text = Text(no_wrap=True, end="")
        rows = wipe(current, incoming, block.ratio, self.direction)
        for index, segments in enumerate(rows):
            if index:
                text.append("\n")
            for segment, is_incoming in segments:
                text.append(segment, style=incoming_style if is_incoming else None)
        return text


class ClockFace(Widget):
    """Centered row of block views for every token of the spec."""

    DEFAULT_CSS = """
    ClockFace {
        width: 1fr;
        height: 1fr;
        align: center middle;
    }
    ClockFace > #clock-row {
        width: auto;
        height: auto;
    }
    ClockFace .token-gap {
        width: 2;
        height: 1;
    }
    """

    def __init__(self, spec: AnimatedTimeSpec, *, classic: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self.spec = spec
        self.classic = classic

    def compose(self) -> ComposeResult:
        with Horizontal(id="clock-row"):
            for index, token in enumerate(self.spec.tokens):
                if self.classic and index:
                    yield Widget(classes="token-gap")
                for block in token.blocks:
                    yield BlockView(block)

    @property
    def block_views(self) -> list[BlockView]:
        return list(self.query(BlockView))

    def sync(self) -> None:
        for view in self.query(BlockView):
            view.sync()
