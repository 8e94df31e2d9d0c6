# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from flyweight_maze.demos import run_block_demo, run_flyweight_demo
from flyweight_maze.elements import load_elements


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Flyweight element and block demos")
    parser.add_argument("--elements", type=Path, help="YAML file overriding element glyphs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Demo to run")

    subparsers.add_parser("flyweight", help="Show a shared wall element and a matrix of wall containers")

    block_parser = subparsers.add_parser("block", help="Render a walled block with a floor in the center")
    block_parser.add_argument("--color", action="store_true", help="Color glyphs by element")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    elements = None
    if args.elements is not None:
        if not args.elements.is_file():
            parser.error(f"elements file not found: {args.elements}")
        elements = load_elements(args.elements)

    if args.command == "flyweight":
        lines = run_flyweight_demo(elements)
    else:
        lines = run_block_demo(elements, color=getattr(args, "color", False))

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
