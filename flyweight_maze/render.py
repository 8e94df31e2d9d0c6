"""
Colored text rendering for blocks and elements.

Plain rendering lives on Block itself; this module adds terminal colors per element
and the element-sheet layout used by the flyweight demo.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

import simple_chalk as chalk  # type: ignore[import-untyped]

from flyweight_maze.block import Block
from flyweight_maze.elements import WALL_ELEMENT, Element
from flyweight_maze.models import BLOCK_SIZE, index_to_side

logger = logging.getLogger(__name__)

Colorize = Callable[[str], str]

DEFAULT_PALETTE: dict[str, Colorize] = {
    "wall": chalk.white,
    "floor": chalk.bgWhite,
}


def colorize_block(block: Block, palette: Mapping[str, Colorize] | None = None) -> list[str]:
    """Render a block like Block.render, styling each glyph by the name of its element.

    Elements missing from the palette are left unstyled. Empty glyphs stay empty.
    """
    if palette is None:
        palette = DEFAULT_PALETTE

    lines = []
    for row in block.grid:
        parts = []
        for container in row:
            glyph = container.repr()
            colorize = palette.get(container.element.name)
            parts.append(colorize(glyph) if colorize is not None and glyph else glyph)
        lines.append(" ".join(parts))

    logger.debug("colorize_block: %d rows, palette=%s", len(lines), sorted(palette))
    return lines


def render_element(element: Element = WALL_ELEMENT) -> list[str]:
    """Lay out every glyph of a single element as a 3x3 sheet, one Direction per cell."""
    return [
        " ".join(element.repr(index_to_side(r, c)) for c in range(BLOCK_SIZE)) for r in range(BLOCK_SIZE)
    ]
