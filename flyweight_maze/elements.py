# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

import yaml

from flyweight_maze.models import Direction

logger = logging.getLogger(__name__)


class MissingGlyph(KeyError):
    def __init__(self, element_name: str, direction: Direction) -> None:
        super().__init__(f"Element '{element_name}' has no glyph for {getattr(direction, 'name', direction)}")
        self.element_name = element_name
        self.direction = direction


@dataclass(frozen=True, eq=False)
class Element:
    """
    Stateless element holding every representation of itself, one glyph per Direction.
    Elements are shared by reference between containers and compare by identity.
    """

    name: str
    representations: Mapping[Direction, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        reprs = {Direction(side): glyph for side, glyph in self.representations.items()}
        object.__setattr__(self, "representations", MappingProxyType(reprs))

    @property
    def directions(self) -> List[Direction]:
        return [side for side in Direction if side in self.representations]

    def repr(self, direction: Direction) -> str:
        try:
            return self.representations[direction]
        except KeyError:
            raise MissingGlyph(self.name, direction) from None

    def get(self, direction: Direction, default: str = "") -> str:
        return self.representations.get(direction, default)

    def __repr__(self) -> str:
        return f"Element({self.name!r})"


def _uniform(glyph: str) -> Dict[Direction, str]:
    return {side: glyph for side in Direction}


EMPTY_ELEMENT = Element("empty", _uniform(""))

WALL_ELEMENT = Element("wall", {**_uniform("■"), Direction.CENTER: " "})

FLOOR_ELEMENT = Element("floor", _uniform(" "))

ELEMENTS: Dict[str, Element] = {
    element.name: element for element in (EMPTY_ELEMENT, WALL_ELEMENT, FLOOR_ELEMENT)
}


def element_by_name(name: str) -> Element:
    try:
        return ELEMENTS[name]
    except KeyError:
        known = ", ".join(sorted(ELEMENTS))
        raise KeyError(f"Unknown element '{name}' (known: {known})") from None


def _parse_table(name: str, table: Any) -> Element:
    if not isinstance(table, dict):
        raise ValueError(f"Element '{name}' must map direction codes to glyphs, got {type(table).__name__}")

    reprs: Dict[Direction, str] = {}
    default = table.get("default")
    if default is not None:
        if not isinstance(default, str):
            raise ValueError(f"Element '{name}' has a non-string default glyph: {default!r}")
        reprs.update(_uniform(default))

    for code, glyph in table.items():
        if code == "default":
            continue
        try:
            side = Direction(code)
        except ValueError:
            raise ValueError(f"Element '{name}' uses unknown direction code: {code!r}") from None
        if not isinstance(glyph, str):
            raise ValueError(f"Element '{name}' has a non-string glyph for {code}: {glyph!r}")
        reprs[side] = glyph

    return Element(name, reprs)


def load_elements(path: str | Path) -> Dict[str, Element]:
    """
    Load element glyph tables from a YAML file.

    The document maps element names to tables of direction codes ("NW", "N", ..., "C", ...)
    and glyphs. A "default" entry fills every direction that is not listed.

    Returns:
        A dict of freshly built elements keyed by name. The built-in elements are not modified.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping of element names in {path}, got {type(data).__name__}")

    elements = {str(name): _parse_table(str(name), table) for name, table in data.items()}
    logger.info("Loaded %d element(s) from %s: %s", len(elements), path, ", ".join(elements))
    return elements
