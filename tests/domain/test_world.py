"""Tests for karel_runner.domain.world module."""

from __future__ import annotations

import pytest

from karel_runner.domain.errors import (
    EmptyBagError,
    ErrorKind,
    FrontBlockedError,
    NoBeeperHereError,
)
from karel_runner.domain.world import Direction, Robot, World


def _world(
    x: int = 1,
    y: int = 1,
    facing: Direction = Direction.EAST,
    width: int = 3,
    height: int = 3,
    walls: frozenset[tuple[int, int]] = frozenset(),
    beepers: list[tuple[int, int]] | None = None,
) -> World:
    return World(
        width=width,
        height=height,
        robot=Robot(x=x, y=y, facing=facing),
        walls=walls,
        beepers=beepers if beepers is not None else [],
    )


class TestDirection:
    def test_left_cycle_is_north_west_south_east(self) -> None:
        assert Direction.NORTH.left() is Direction.WEST
        assert Direction.WEST.left() is Direction.SOUTH
        assert Direction.SOUTH.left() is Direction.EAST
        assert Direction.EAST.left() is Direction.NORTH

    def test_right_is_inverse_of_left(self) -> None:
        for facing in Direction:
            assert facing.left().right() is facing


class TestConstruction:
    def test_rejects_robot_outside_grid(self) -> None:
        with pytest.raises(ValueError, match="outside the grid"):
            _world(x=3, y=0)

    def test_rejects_empty_grid(self) -> None:
        with pytest.raises(ValueError, match="dimensions"):
            World(width=0, height=1, robot=Robot(0, 0, Direction.NORTH))

    def test_set_bag_rejects_negative(self) -> None:
        world = _world()
        with pytest.raises(ValueError, match="beepers must be >= 0"):
            world.set_bag(-1)


class TestMove:
    @pytest.mark.parametrize(
        ("facing", "expected"),
        [
            (Direction.NORTH, (1, 0)),
            (Direction.WEST, (0, 1)),
            (Direction.SOUTH, (1, 2)),
            (Direction.EAST, (2, 1)),
        ],
    )
    def test_advances_one_cell_in_facing_direction(
        self, facing: Direction, expected: tuple[int, int]
    ) -> None:
        world = _world(facing=facing)
        assert not world.front_is_blocked()
        world.move()
        assert world.robot.position == expected
        assert world.robot.facing is facing

    def test_off_grid_move_is_rejected_without_state_change(self) -> None:
        world = _world(x=2, y=1, facing=Direction.EAST)
        assert world.front_is_blocked()
        with pytest.raises(FrontBlockedError) as excinfo:
            world.move()
        assert excinfo.value.kind is ErrorKind.RUNTIME
        assert world.robot.position == (2, 1)
        assert world.robot.facing is Direction.EAST
        assert world.steps == 0

    def test_wall_blocks_move(self) -> None:
        world = _world(walls=frozenset({(2, 1)}))
        with pytest.raises(FrontBlockedError):
            world.move()
        assert world.robot.position == (1, 1)


class TestTurnLeft:
    def test_four_turns_restore_facing(self) -> None:
        world = _world(facing=Direction.SOUTH)
        seen = []
        for _ in range(4):
            world.turn_left()
            seen.append(world.robot.facing)
        assert seen == [Direction.EAST, Direction.NORTH, Direction.WEST, Direction.SOUTH]
        assert world.steps == 4


class TestBeepers:
    def test_pick_decrements_cell_and_increments_bag(self) -> None:
        world = _world(beepers=[(1, 1), (1, 1), (0, 0)])
        world.pick_beeper()
        assert world.beepers_at((1, 1)) == 1
        assert world.beepers_at((0, 0)) == 1
        assert world.robot.beepers == 1

    def test_pick_on_empty_cell_fails_without_change(self) -> None:
        world = _world(beepers=[(0, 0)])
        with pytest.raises(NoBeeperHereError, match="1,1"):
            world.pick_beeper()
        assert world.beepers == [(0, 0)]
        assert world.robot.beepers == 0

    def test_put_with_empty_bag_fails_without_change(self) -> None:
        world = _world()
        with pytest.raises(EmptyBagError):
            world.put_beeper()
        assert world.beepers == []
        assert world.robot.beepers == 0

    def test_put_stacks_beepers_on_cell(self) -> None:
        world = _world()
        world.set_bag(2)
        world.put_beeper()
        world.put_beeper()
        assert world.beepers_at((1, 1)) == 2
        assert world.robot.beepers == 0
        assert not world.beeper_in_bag()


class TestQueries:
    def test_side_blocks_follow_facing(self) -> None:
        # Facing north in the top-left corner: left (west) and front (north) are off-grid.
        world = _world(x=0, y=0, facing=Direction.NORTH)
        assert world.front_is_blocked()
        assert world.left_is_blocked()
        assert not world.right_is_blocked()

    def test_facing_predicates(self) -> None:
        world = _world(facing=Direction.WEST)
        assert world.facing_west()
        assert not world.facing_north()
        assert not world.facing_south()
        assert not world.facing_east()

    def test_next_to_a_beeper(self) -> None:
        world = _world(beepers=[(1, 1)])
        assert world.next_to_a_beeper()


class TestListeners:
    def test_listener_called_after_each_mutation(self) -> None:
        world = _world()
        world.set_bag(1)
        calls: list[tuple[str, tuple[int, int]]] = []
        world.listeners.append(lambda w, action: calls.append((action, w.robot.position)))
        world.move()
        world.turn_left()
        world.put_beeper()
        world.pick_beeper()
        assert calls == [
            ("move", (2, 1)),
            ("turnleft", (2, 1)),
            ("putbeeper", (2, 1)),
            ("pickbeeper", (2, 1)),
        ]

    def test_failed_mutation_does_not_notify(self) -> None:
        world = _world()
        calls: list[str] = []
        world.listeners.append(lambda w, action: calls.append(action))
        with pytest.raises(EmptyBagError):
            world.put_beeper()
        assert calls == []
