"""Interpreter for a tab-scoped robot language on a text grid map."""

from karel_runner.config.types import RunConfig, RunResult
from karel_runner.domain.world import Direction, Robot, World
from karel_runner.language.executor import Interpreter, execute
from karel_runner.simulation.engine import run, run_program

__all__ = [
    "Direction",
    "Interpreter",
    "Robot",
    "RunConfig",
    "RunResult",
    "World",
    "execute",
    "run",
    "run_program",
]
