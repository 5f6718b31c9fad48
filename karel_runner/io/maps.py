"""Map parsing: character grid -> :class:`World`.

Map characters: ``.`` or space is empty, ``#`` a wall, ``*`` one beeper and
exactly one of ``^ v < >`` the robot start facing North, South, West or East.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from karel_runner.config.constants import MAP_BEEPER_CHAR, MAP_EMPTY_CHARS, MAP_WALL_CHAR
from karel_runner.domain.errors import MapError
from karel_runner.domain.world import Cell, Direction, Robot, World
from karel_runner.io.reader import read_lines

ROBOT_CHARS: dict[str, Direction] = {
    "^": Direction.NORTH,
    "v": Direction.SOUTH,
    "<": Direction.WEST,
    ">": Direction.EAST,
}

FACING_CHARS: dict[Direction, str] = {facing: char for char, facing in ROBOT_CHARS.items()}


def parse_map(rows: Sequence[str]) -> World:
    """Build a world from map rows; every row must share the first row's width."""
    if not rows:
        raise MapError("error in the construction of the map, the map is empty")
    width = len(rows[0])
    if width == 0:
        raise MapError("error in the construction of the map, the first row is empty")

    walls: set[Cell] = set()
    beepers: list[Cell] = []
    robot: Robot | None = None
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MapError(f"inconsistent map on the line {y + 1}", y + 1)
        for x, char in enumerate(row):
            if char in MAP_EMPTY_CHARS:
                continue
            if char == MAP_WALL_CHAR:
                walls.add((x, y))
            elif char == MAP_BEEPER_CHAR:
                beepers.append((x, y))
            elif char in ROBOT_CHARS:
                if robot is not None:
                    raise MapError("there is more than one robot on the map", y + 1)
                robot = Robot(x=x, y=y, facing=ROBOT_CHARS[char])
            else:
                raise MapError(
                    f"unknown character {char!r} at line {y + 1}, column {x + 1}", y + 1
                )

    if robot is None:
        raise MapError("there is no robot on the map")
    return World(width=width, height=len(rows), robot=robot, walls=frozenset(walls), beepers=beepers)


def load_map(path: Path) -> World:
    """Read and parse a map file; a missing file is a :class:`MapError`."""
    try:
        rows = read_lines(path)
    except FileNotFoundError:
        raise MapError(f"error in the construction of the map, no file named {str(path)!r}") from None
    return parse_map(rows)
