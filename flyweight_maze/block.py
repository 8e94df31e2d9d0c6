# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import logging
from typing import Iterator, List, Optional, Tuple

from flyweight_maze.containers import Container, make_empty_container
from flyweight_maze.models import BLOCK_SIZE, Direction, IndexOutOfRange, index_to_side, side_to_index

logger = logging.getLogger(__name__)


class DirectionMismatch(ValueError):
    def __init__(self, direction: Direction, expected: Tuple[int, int]) -> None:
        super().__init__(
            f"Container facing {direction.name} belongs at {side_to_index(direction)}, not at {expected}"
        )
        self.direction = direction
        self.expected = expected


class Block:
    """
    A BLOCK_SIZE x BLOCK_SIZE grid of containers, one per Direction.

    A fresh block holds an empty container in every cell, facing the Direction of
    that cell. The position tag locates the block within a larger maze and has no
    effect on the block itself.
    """

    def __init__(self, position: Tuple[int, int] = (0, 0)) -> None:
        self.grid: List[List[Container]] = [
            [make_empty_container(index_to_side(r, c)) for c in range(BLOCK_SIZE)] for r in range(BLOCK_SIZE)
        ]
        self.pos_x, self.pos_y = position

    def get_element(self, row: int, col: int) -> Container:
        if not (0 <= row < BLOCK_SIZE and 0 <= col < BLOCK_SIZE):
            raise IndexOutOfRange(row, col)
        return self.grid[row][col]

    def set_container(self, container: Container, at: Optional[Tuple[int, int]] = None) -> Container:
        """
        Install a container in the cell its own Direction maps to.

        If `at` is given it must agree with that cell, otherwise DirectionMismatch is
        raised and the block is left untouched.

        Returns:
            The container previously held by the cell. The block keeps no reference to it.
        """
        r, c = side_to_index(container.get_direction())
        if at is not None and (at[0], at[1]) != (r, c):
            raise DirectionMismatch(container.get_direction(), (at[0], at[1]))

        released = self.grid[r][c]
        self.grid[r][c] = container
        logger.debug(
            "Replaced %s container at (%d, %d) with %s", released.element.name, r, c, container.element.name
        )
        return released

    def containers(self) -> Iterator[Tuple[Tuple[int, int], Container]]:
        for r, row in enumerate(self.grid):
            for c, container in enumerate(row):
                yield (r, c), container

    def validate(self) -> bool:
        """
        Checks that every cell holds a container facing the Direction of that cell.
        The invariant can be broken by changing a container's Direction in place.
        """
        return all(index_to_side(r, c) == container.direction for (r, c), container in self.containers())

    def render(self) -> List[str]:
        return [" ".join(container.repr() for container in row) for row in self.grid]

    def to_string(self) -> str:
        return "\n".join(self.render()) + "\n"

    def set_position(self, x: int, y: int) -> None:
        self.pos_x = x
        self.pos_y = y

    def get_position(self) -> Tuple[int, int]:
        return (self.pos_x, self.pos_y)
