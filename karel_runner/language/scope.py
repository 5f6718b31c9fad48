"""Indentation, terminator and block-balance checks."""

from __future__ import annotations

from karel_runner.config.constants import INDENT_CHAR
from karel_runner.domain.errors import StructureError, TerminatorError
from karel_runner.language.grammar import Line, LineKind, Program


def indent_matches(text: str, depth: int) -> bool:
    """True when *text* starts with exactly *depth* indentation characters."""
    if not text.startswith(INDENT_CHAR * depth):
        return False
    return text[depth : depth + 1] != INDENT_CHAR


def check_indent(line: Line, depth: int) -> None:
    """Raise :class:`StructureError` unless *line* sits at *depth*."""
    if not indent_matches(line.text, depth):
        raise StructureError(
            f"wrong indentation, expected {depth} tab(s) but found {line.indent}",
            line.line_no,
        )


def is_block_close(line: Line | None) -> bool:
    return line is not None and line.kind is LineKind.END


def check_terminator(line: Line, next_line: Line | None) -> None:
    """Require ``;`` on *line* unless *next_line* closes a block.

    Before a closing END the terminator must be absent.
    """
    closes = is_block_close(next_line)
    if line.terminated and closes:
        raise TerminatorError("there is no need to put ';' if the next line is an END", line.line_no)
    if not line.terminated and not closes:
        raise TerminatorError("semicolon missing", line.line_no)


def check_balance(program: Program) -> None:
    """Verify that BEGIN and END lines pair up across the whole program."""
    open_blocks: list[Line] = []
    for line in program:
        if line.kind is LineKind.BEGIN:
            open_blocks.append(line)
        elif line.kind is LineKind.END:
            if not open_blocks:
                raise StructureError("END without a matching BEGIN", line.line_no)
            open_blocks.pop()
    if open_blocks:
        raise StructureError("BEGIN without a matching END", open_blocks[-1].line_no)
