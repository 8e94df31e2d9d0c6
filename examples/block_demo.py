# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from flyweight_maze.demos import build_walled_block


def main() -> None:
    # Walls around the edge, floor in the middle
    block = build_walled_block()

    print("Walled 3x3 block:")
    print(block.to_string())


if __name__ == "__main__":
    main()
