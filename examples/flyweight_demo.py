# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from flyweight_maze.demos import run_flyweight_demo


def main() -> None:
    for line in run_flyweight_demo():
        print(line)


if __name__ == "__main__":
    main()
