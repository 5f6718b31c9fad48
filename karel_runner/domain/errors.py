"""Error taxonomy shared by the map loader, the world model and the interpreter.

Every error is fatal: it is raised where it is detected and aborts the run.
``line`` is the 1-based source line number when one applies.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Top-level category of a run-aborting error."""

    MAP = "map"
    STRUCTURE = "structure"
    SEMANTIC = "semantic"
    RUNTIME = "runtime"


class KarelError(Exception):
    """Base class for all run-aborting errors."""

    kind: ErrorKind = ErrorKind.STRUCTURE

    def __init__(self, message: str, line: int | None = None) -> None:
        self.message = message
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"

    def at_line(self, line: int) -> KarelError:
        """Attach a source line number unless one is already set."""
        if self.line is None:
            self.line = line
            self.args = (self._format(),)
        return self


# ---------------------------------------------------------------------------
# Map errors
# ---------------------------------------------------------------------------


class MapError(KarelError):
    """The map source is missing or malformed."""

    kind = ErrorKind.MAP


# ---------------------------------------------------------------------------
# Structural errors
# ---------------------------------------------------------------------------


class StructureError(KarelError):
    """Markers, indentation or block nesting violate the grammar."""

    kind = ErrorKind.STRUCTURE


class TerminatorError(StructureError):
    """A statement terminator is missing or misplaced."""


# ---------------------------------------------------------------------------
# Semantic errors
# ---------------------------------------------------------------------------


class SemanticError(KarelError):
    """Well-formed lines whose meaning is invalid."""

    kind = ErrorKind.SEMANTIC


class UnterminatedBlockError(SemanticError):
    """A block is opened but its range ends before the matching END."""


class UnknownStatementError(SemanticError):
    """A statement is neither a primitive nor a defined instruction."""


class UnknownConditionError(SemanticError):
    """A condition name is not one of the known predicates."""

    def __init__(self, condition: str, line: int | None = None) -> None:
        self.condition = condition
        super().__init__(f"there is no condition {condition!r}", line)


class DuplicateDefinitionError(SemanticError):
    """An instruction name is defined twice."""


class RecursiveDefinitionError(SemanticError):
    """An instruction body calls the instruction being defined."""


class NestingDepthError(SemanticError):
    """Instruction calls nest deeper than the interpreter stack allows."""


# ---------------------------------------------------------------------------
# Runtime errors
# ---------------------------------------------------------------------------


class RobotError(KarelError):
    """A primitive action is impossible in the current world state."""

    kind = ErrorKind.RUNTIME


class FrontBlockedError(RobotError):
    """``move`` into a wall or off the grid."""


class NoBeeperHereError(RobotError):
    """``pickbeeper`` on a cell without beepers."""


class EmptyBagError(RobotError):
    """``putbeeper`` with nothing in the bag."""
