# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from enum import Enum
from typing import Dict, Tuple

BLOCK_SIZE = 3


class Direction(str, Enum):
    NORTH_WEST = "NW"
    NORTH = "N"
    NORTH_EAST = "NE"
    WEST = "W"
    CENTER = "C"
    EAST = "E"
    SOUTH_WEST = "SW"
    SOUTH = "S"
    SOUTH_EAST = "SE"

    @property
    def position(self) -> Tuple[int, int]:
        return side_to_index(self)


class IndexOutOfRange(IndexError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Cell ({row}, {col}) is outside the {BLOCK_SIZE}x{BLOCK_SIZE} block")
        self.row = row
        self.col = col


SIDE_TO_INDEX: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH_WEST: (0, 0),
    Direction.NORTH: (0, 1),
    Direction.NORTH_EAST: (0, 2),
    Direction.WEST: (1, 0),
    Direction.CENTER: (1, 1),
    Direction.EAST: (1, 2),
    Direction.SOUTH_WEST: (2, 0),
    Direction.SOUTH: (2, 1),
    Direction.SOUTH_EAST: (2, 2),
}

INDEX_TO_SIDE: Dict[Tuple[int, int], Direction] = {index: side for side, index in SIDE_TO_INDEX.items()}


def index_to_side(row: int, col: int) -> Direction:
    try:
        return INDEX_TO_SIDE[(row, col)]
    except KeyError:
        raise IndexOutOfRange(row, col) from None


def side_to_index(direction: Direction) -> Tuple[int, int]:
    return SIDE_TO_INDEX[Direction(direction)]
