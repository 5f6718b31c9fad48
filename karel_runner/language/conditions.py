"""Named boolean predicates usable in IF and WHILE headers."""

from __future__ import annotations

from collections.abc import Callable

from karel_runner.domain.errors import UnknownConditionError
from karel_runner.domain.world import World

Predicate = Callable[[World], bool]

CONDITIONS: dict[str, Predicate] = {
    "front-is-clear": lambda world: not world.front_is_blocked(),
    "front-is-blocked": lambda world: world.front_is_blocked(),
    "left-is-clear": lambda world: not world.left_is_blocked(),
    "left-is-blocked": lambda world: world.left_is_blocked(),
    "right-is-clear": lambda world: not world.right_is_blocked(),
    "right-is-blocked": lambda world: world.right_is_blocked(),
    "next-to-a-beeper": lambda world: world.next_to_a_beeper(),
    "not-next-to-a-beeper": lambda world: not world.next_to_a_beeper(),
    "facing-north": lambda world: world.facing_north(),
    "not-facing-north": lambda world: not world.facing_north(),
    "facing-south": lambda world: world.facing_south(),
    "not-facing-south": lambda world: not world.facing_south(),
    "facing-east": lambda world: world.facing_east(),
    "not-facing-east": lambda world: not world.facing_east(),
    "facing-west": lambda world: world.facing_west(),
    "not-facing-west": lambda world: not world.facing_west(),
    "beeper-in-bag": lambda world: world.beeper_in_bag(),
}


def evaluate_condition(name: str, world: World, line: int | None = None) -> bool:
    """Evaluate condition *name* against *world*.

    Raises :class:`UnknownConditionError` naming *line* for unknown names.
    """
    try:
        predicate = CONDITIONS[name]
    except KeyError:
        raise UnknownConditionError(name, line) from None
    return predicate(world)
