# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from pathlib import Path
from typing import Any

import pytest

from flyweight_maze.cli import main
from flyweight_maze.demos import build_walled_block, run_block_demo, run_flyweight_demo
from flyweight_maze.elements import load_elements

TEST_ELEMENTS_FILE = Path(__file__).parent.parent / "config" / "test_elements.yaml"
PROJECT_ELEMENTS_FILE = Path(__file__).parent.parent.parent / "config" / "elements.yaml"

WALLED = ["■ ■ ■", "■   ■", "■ ■ ■"]


def test_flyweight_demo() -> None:
    lines = run_flyweight_demo()

    assert lines[0] == "Accessing NORTH representation of the wall element."
    assert lines[1] == "■"
    assert lines[4:7] == WALLED
    assert lines[9] == "■"
    assert lines[11] == "Creating a matrix of wall containers."
    assert lines[12:] == WALLED


def test_block_demo() -> None:
    assert run_block_demo() == WALLED
    assert build_walled_block().validate()


def test_block_demo_with_loaded_elements() -> None:
    elements = load_elements(TEST_ELEMENTS_FILE)
    assert run_block_demo(elements) == ["# # #", "# . #", "# # #"]
    assert run_flyweight_demo(elements)[1] == "#"


def test_project_elements_file() -> None:
    elements = load_elements(PROJECT_ELEMENTS_FILE)
    assert set(elements) == {"empty", "wall", "floor"}
    assert run_block_demo(elements) == ["# # #", "# . #", "# # #"]


def test_cli_block(capsys: Any) -> None:
    assert main(["block"]) == 0
    out = capsys.readouterr().out
    assert out == "\n".join(WALLED) + "\n"


def test_cli_default_command(capsys: Any) -> None:
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == WALLED


def test_cli_flyweight_with_elements(capsys: Any) -> None:
    assert main(["--elements", str(TEST_ELEMENTS_FILE), "flyweight"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[1] == "#"
    assert out[-3:] == ["# # #", "#   #", "# # #"]


def test_cli_color(capsys: Any) -> None:
    assert main(["block", "--color"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert out[0].count("■") == 3


def test_cli_missing_elements_file(tmp_path: Any) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--elements", str(tmp_path / "missing.yaml"), "block"])
    assert exc_info.value.code == 2
