"""Language layer: line classification, scope checks, conditions, macros, executor."""

from karel_runner.language.conditions import CONDITIONS, evaluate_condition
from karel_runner.language.executor import Interpreter, execute
from karel_runner.language.grammar import Line, LineKind, classify_line, classify_program
from karel_runner.language.macros import MacroRegistry, MacroSpan
from karel_runner.language.scope import check_balance, check_indent, check_terminator

__all__ = [
    "CONDITIONS",
    "Interpreter",
    "Line",
    "LineKind",
    "MacroRegistry",
    "MacroSpan",
    "check_balance",
    "check_indent",
    "check_terminator",
    "classify_line",
    "classify_program",
    "evaluate_condition",
    "execute",
]
