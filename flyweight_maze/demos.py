# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from typing import List, Mapping, Optional

from flyweight_maze.block import Block
from flyweight_maze.containers import make_floor_container, make_wall_container
from flyweight_maze.elements import Element, element_by_name
from flyweight_maze.models import BLOCK_SIZE, Direction, index_to_side
from flyweight_maze.render import colorize_block, render_element


def _pick(elements: Optional[Mapping[str, Element]], name: str) -> Element:
    if elements is not None and name in elements:
        return elements[name]
    return element_by_name(name)


def run_flyweight_demo(elements: Optional[Mapping[str, Element]] = None) -> List[str]:
    wall = _pick(elements, "wall")
    lines = []

    lines.append("Accessing NORTH representation of the wall element.")
    lines.append(wall.repr(Direction.NORTH))
    lines.append("")

    lines.append("Accessing all representations of the wall element.")
    lines.extend(render_element(wall))
    lines.append("")

    container = make_wall_container(Direction.NORTH, wall)
    lines.append("Accessing NORTH representation of the wall via a container.")
    lines.append(container.repr())
    lines.append("")

    # Nine containers, one shared element.
    matrix = [[make_wall_container(index_to_side(r, c), wall) for c in range(BLOCK_SIZE)] for r in range(BLOCK_SIZE)]
    lines.append("Creating a matrix of wall containers.")
    for row in matrix:
        lines.append(" ".join(container.repr() for container in row))

    return lines


def build_walled_block(elements: Optional[Mapping[str, Element]] = None) -> Block:
    """A block with walls on every border cell and floor in the center."""
    wall = _pick(elements, "wall")
    floor = _pick(elements, "floor")

    block = Block()
    for side in Direction:
        if side is Direction.CENTER:
            block.set_container(make_floor_container(side, floor))
        else:
            block.set_container(make_wall_container(side, wall))
    return block


def run_block_demo(elements: Optional[Mapping[str, Element]] = None, color: bool = False) -> List[str]:
    block = build_walled_block(elements)
    if color:
        return colorize_block(block)
    return block.render()
