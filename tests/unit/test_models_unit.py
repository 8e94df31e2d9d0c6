# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import pytest

from flyweight_maze.models import INDEX_TO_SIDE, SIDE_TO_INDEX, Direction, IndexOutOfRange, index_to_side, side_to_index


def test_direction_order_is_row_major() -> None:
    assert [side.name for side in Direction] == [
        "NORTH_WEST",
        "NORTH",
        "NORTH_EAST",
        "WEST",
        "CENTER",
        "EAST",
        "SOUTH_WEST",
        "SOUTH",
        "SOUTH_EAST",
    ]
    for i, side in enumerate(Direction):
        assert side_to_index(side) == (i // 3, i % 3)


def test_mapping_tables() -> None:
    assert len(SIDE_TO_INDEX) == 9
    assert len(INDEX_TO_SIDE) == 9
    assert index_to_side(0, 0) == Direction.NORTH_WEST
    assert index_to_side(1, 1) == Direction.CENTER
    assert index_to_side(2, 1) == Direction.SOUTH
    assert side_to_index(Direction.EAST) == (1, 2)
    assert Direction.SOUTH_WEST.position == (2, 0)


def test_direction_codes() -> None:
    assert Direction("NW") is Direction.NORTH_WEST
    assert Direction("C") is Direction.CENTER
    assert side_to_index("SE") == (2, 2)  # type: ignore[arg-type]


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_index_to_side_out_of_range(row: int, col: int) -> None:
    with pytest.raises(IndexOutOfRange) as exc_info:
        index_to_side(row, col)
    assert exc_info.value.row == row
    assert exc_info.value.col == col
    assert isinstance(exc_info.value, IndexError)
