# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from dataclasses import dataclass

from flyweight_maze.elements import EMPTY_ELEMENT, FLOOR_ELEMENT, WALL_ELEMENT, Element
from flyweight_maze.models import Direction


@dataclass
class Container:
    """
    Stateful proxy for a shared Element.

    The container owns only its state (the Direction it displays). The Element is
    referenced, never copied, so any number of containers can share one Element.
    """

    direction: Direction
    element: Element

    def __post_init__(self) -> None:
        self.direction = Direction(self.direction)

    def get_direction(self) -> Direction:
        return self.direction

    def set_direction(self, direction: Direction | str) -> None:
        self.direction = Direction(direction)

    def set_element(self, element: Element) -> None:
        self.element = element

    def repr(self) -> str:
        return self.element.repr(self.direction)

    def __str__(self) -> str:
        return self.repr()


def make_empty_container(direction: Direction, element: Element = EMPTY_ELEMENT) -> Container:
    return Container(direction, element)


def make_wall_container(direction: Direction, element: Element = WALL_ELEMENT) -> Container:
    return Container(direction, element)


def make_floor_container(direction: Direction, element: Element = FLOOR_ELEMENT) -> Container:
    return Container(direction, element)
