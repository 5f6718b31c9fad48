"""Domain layer: world model and error taxonomy."""

from karel_runner.domain.errors import (
    DuplicateDefinitionError,
    EmptyBagError,
    ErrorKind,
    FrontBlockedError,
    KarelError,
    MapError,
    NestingDepthError,
    NoBeeperHereError,
    RecursiveDefinitionError,
    RobotError,
    SemanticError,
    StructureError,
    TerminatorError,
    UnknownConditionError,
    UnknownStatementError,
    UnterminatedBlockError,
)
from karel_runner.domain.world import DIRECTION_VECTORS, Cell, Direction, Robot, World

__all__ = [
    "Cell",
    "DIRECTION_VECTORS",
    "Direction",
    "DuplicateDefinitionError",
    "EmptyBagError",
    "ErrorKind",
    "FrontBlockedError",
    "KarelError",
    "MapError",
    "NestingDepthError",
    "NoBeeperHereError",
    "RecursiveDefinitionError",
    "Robot",
    "RobotError",
    "SemanticError",
    "StructureError",
    "TerminatorError",
    "UnknownConditionError",
    "UnknownStatementError",
    "UnterminatedBlockError",
    "World",
]
