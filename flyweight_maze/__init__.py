# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from .block import Block, DirectionMismatch
from .containers import Container, make_empty_container, make_floor_container, make_wall_container
from .elements import (
    ELEMENTS,
    EMPTY_ELEMENT,
    FLOOR_ELEMENT,
    WALL_ELEMENT,
    Element,
    MissingGlyph,
    element_by_name,
    load_elements,
)
from .models import BLOCK_SIZE, Direction, IndexOutOfRange, index_to_side, side_to_index

__all__ = [
    "BLOCK_SIZE",
    "Direction",
    "IndexOutOfRange",
    "index_to_side",
    "side_to_index",
    "Element",
    "MissingGlyph",
    "EMPTY_ELEMENT",
    "WALL_ELEMENT",
    "FLOOR_ELEMENT",
    "ELEMENTS",
    "element_by_name",
    "load_elements",
    "Container",
    "make_empty_container",
    "make_wall_container",
    "make_floor_container",
    "Block",
    "DirectionMismatch",
]
