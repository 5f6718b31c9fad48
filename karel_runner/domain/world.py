"""Bounded grid world with one robot, fixed walls and a beeper multiset.

Row 0 is the top line of the map, so North decreases ``y`` and South
increases it. Walls never change after construction; beepers are kept as a
list of cells so one cell may hold several beepers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum

from karel_runner.domain.errors import EmptyBagError, FrontBlockedError, NoBeeperHereError

Cell = tuple[int, int]

WorldListener = Callable[["World", str], None]
"""Called as ``listener(world, action)`` after every successful mutation."""


class Direction(IntEnum):
    """Facing, enumerated counter-clockwise so a left turn is ``+1 mod 4``."""

    NORTH = 0
    WEST = 1
    SOUTH = 2
    EAST = 3

    def left(self) -> Direction:
        return Direction((self + 1) % 4)

    def right(self) -> Direction:
        return Direction((self + 3) % 4)


DIRECTION_VECTORS: dict[Direction, Cell] = {
    Direction.NORTH: (0, -1),
    Direction.WEST: (-1, 0),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
}


@dataclass
class Robot:
    """The agent: position, facing and carried beepers."""

    x: int
    y: int
    facing: Direction
    beepers: int = 0

    @property
    def position(self) -> Cell:
        return (self.x, self.y)

    def _neighbor(self, direction: Direction) -> Cell:
        dx, dy = DIRECTION_VECTORS[direction]
        return (self.x + dx, self.y + dy)

    def front(self) -> Cell:
        """Cell directly ahead."""
        return self._neighbor(self.facing)

    def left(self) -> Cell:
        """Cell on the robot's left-hand side."""
        return self._neighbor(self.facing.left())

    def right(self) -> Cell:
        """Cell on the robot's right-hand side."""
        return self._neighbor(self.facing.right())

    def turn_left(self) -> None:
        self.facing = self.facing.left()


@dataclass
class World:
    """Robot plus board state with primitive mutators and queries."""

    width: int
    height: int
    robot: Robot
    walls: frozenset[Cell] = frozenset()
    beepers: list[Cell] = field(default_factory=list)
    listeners: list[WorldListener] = field(default_factory=list, repr=False)
    steps: int = 0

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("world dimensions must be >= 1x1")
        if not self.in_bounds(self.robot.position):
            raise ValueError(f"robot start {self.robot.position} is outside the grid")
        self.walls = frozenset(self.walls)

    # ------------------------------------------------------------------
    # Cell helpers
    # ------------------------------------------------------------------

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, cell: Cell) -> bool:
        """A cell is blocked when it lies off the grid or holds a wall."""
        return not self.in_bounds(cell) or cell in self.walls

    def beepers_at(self, cell: Cell) -> int:
        return sum(1 for beeper in self.beepers if beeper == cell)

    def _notify(self, action: str) -> None:
        self.steps += 1
        for listener in self.listeners:
            listener(self, action)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def move(self) -> None:
        """Step one cell forward; rejected before any state change if blocked."""
        if self.front_is_blocked():
            raise FrontBlockedError("move: can't move, front is blocked")
        self.robot.x, self.robot.y = self.robot.front()
        self._notify("move")

    def turn_left(self) -> None:
        self.robot.turn_left()
        self._notify("turnleft")

    def pick_beeper(self) -> None:
        """Remove one beeper record from the robot's cell and put it in the bag."""
        cell = self.robot.position
        try:
            index = self.beepers.index(cell)
        except ValueError:
            raise NoBeeperHereError(
                f"pickbeeper: can't pick beepers, no beepers in {cell[0]},{cell[1]}"
            ) from None
        del self.beepers[index]
        self.robot.beepers += 1
        self._notify("pickbeeper")

    def put_beeper(self) -> None:
        """Drop one beeper from the bag onto the robot's cell."""
        if not self.beeper_in_bag():
            raise EmptyBagError("putbeeper: can't put beepers, no beepers in bag")
        self.robot.beepers -= 1
        self.beepers.append(self.robot.position)
        self._notify("putbeeper")

    def set_bag(self, beepers: int) -> None:
        """Set the initial inventory before execution starts."""
        if beepers < 0:
            raise ValueError("beepers must be >= 0")
        self.robot.beepers = beepers

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def front_is_blocked(self) -> bool:
        return self.is_blocked(self.robot.front())

    def left_is_blocked(self) -> bool:
        return self.is_blocked(self.robot.left())

    def right_is_blocked(self) -> bool:
        return self.is_blocked(self.robot.right())

    def next_to_a_beeper(self) -> bool:
        return self.robot.position in self.beepers

    def facing_north(self) -> bool:
        return self.robot.facing is Direction.NORTH

    def facing_west(self) -> bool:
        return self.robot.facing is Direction.WEST

    def facing_south(self) -> bool:
        return self.robot.facing is Direction.SOUTH

    def facing_east(self) -> bool:
        return self.robot.facing is Direction.EAST

    def beeper_in_bag(self) -> bool:
        return self.robot.beepers > 0
