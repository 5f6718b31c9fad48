"""Recursive control-flow executor.

Scope is carried by an explicit ``depth`` (the number of leading tabs every
line of the current block must have) and every handler takes the index of
its header line and returns the index of the first line after the construct.
With ``live=False`` a block is walked with the same grammar checks but no
condition is evaluated and the world is never touched; this is how untaken
branches, zero-count loops and instruction definitions are skipped.

Program layout::

    BEGINNING-OF-PROGRAM
    \tDEFINE-NEW-INSTRUCTION name AS     (zero or more, depth 1)
    \tBEGIN
    \t\t...                                (body, depth 2)
    \tEND
    \tBEGINNING-OF-EXECUTION
    \t\t...                                (statements, depth 2)
    \t\tturnoff
    \tEND-OF-EXECUTION
    END-OF-PROGRAM
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from karel_runner.config.constants import DEFINITION_DEPTH, EXECUTION_DEPTH, MACRO_BODY_DEPTH
from karel_runner.domain.errors import (
    RecursiveDefinitionError,
    RobotError,
    StructureError,
    UnknownStatementError,
    UnterminatedBlockError,
)
from karel_runner.domain.world import World
from karel_runner.language.conditions import evaluate_condition
from karel_runner.language.grammar import Line, LineKind, Program, classify_program
from karel_runner.language.macros import MacroRegistry, MacroSpan
from karel_runner.language.scope import check_balance, check_indent, check_terminator, indent_matches

_PRIMITIVES: dict[str, Callable[[World], None]] = {
    "move": World.move,
    "turnleft": World.turn_left,
    "pickbeeper": World.pick_beeper,
    "putbeeper": World.put_beeper,
}

_KEYWORDS: dict[LineKind, str] = {
    LineKind.IF: "IF-THEN",
    LineKind.ELSE: "ELSE",
    LineKind.WHILE: "WHILE-DO",
    LineKind.ITERATE: "ITERATE",
    LineKind.DEFINE: "DEFINE-NEW-INSTRUCTION",
}


class Interpreter:
    """Executes one classified program against one world."""

    def __init__(
        self,
        program: Program,
        world: World,
        macros: MacroRegistry | None = None,
    ) -> None:
        self.program = program
        self.world = world
        self.macros = macros if macros is not None else MacroRegistry()

    # ------------------------------------------------------------------
    # Program level
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Validate the program skeleton, register definitions, then execute."""
        self._check_skeleton()
        check_balance(self.program)

        turnoff = len(self.program) - 3
        index = 1
        while index < turnoff:
            line = self.program[index]
            check_indent(line, DEFINITION_DEPTH)
            if line.kind is LineKind.DEFINE:
                index = self._define(index, turnoff) + 1
            elif line.kind is LineKind.EXECUTION_START:
                self._run_section(index + 1, turnoff, EXECUTION_DEPTH)
                return
            else:
                raise StructureError(
                    "expected DEFINE-NEW-INSTRUCTION or BEGINNING-OF-EXECUTION", line.line_no
                )
        raise StructureError(
            "'BEGINNING-OF-EXECUTION' was not found", self.program[turnoff].line_no
        )

    def _check_skeleton(self) -> None:
        program = self.program
        if len(program) < 3:
            raise StructureError("the program is too short to hold the required markers")
        if program[0].kind is not LineKind.PROGRAM_START:
            raise StructureError("the code does not start with 'BEGINNING-OF-PROGRAM'", 1)
        if program[-1].kind is not LineKind.PROGRAM_END:
            raise StructureError(
                "the code does not end with 'END-OF-PROGRAM'", program[-1].line_no
            )
        if program[-2].kind is not LineKind.EXECUTION_END:
            raise StructureError(
                "'END-OF-EXECUTION' was not found in the penultimate line", program[-2].line_no
            )
        if program[-3].kind is not LineKind.TURNOFF:
            raise StructureError(
                "the 'turnoff' line does not exist or is not in the correct position",
                program[-3].line_no,
            )

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _next_line(self, index: int) -> Line | None:
        following = index + 1
        return self.program[following] if following < len(self.program) else None

    def _run_section(self, start: int, stop: int, depth: int, live: bool = True) -> None:
        """Run ``[start, stop)`` at *depth*; the range must not close a block."""
        end = self._run_block(start, stop, depth, live)
        if end < stop:
            raise StructureError("END without a matching block", self.program[end].line_no)

    def _run_block(self, start: int, stop: int, depth: int, live: bool) -> int:
        """Run lines from *start* until the END at ``depth - 1``.

        Returns the index of that END, or *stop* when the range is exhausted.
        """
        index = start
        while index < stop:
            line = self.program[index]
            if line.kind is LineKind.END and indent_matches(line.text, depth - 1):
                return index
            index = self._step(index, stop, depth, live)
        return stop

    def _open_block(self, header: Line, stop: int, depth: int) -> int:
        """Require a BEGIN right after *header*; return the first body index."""
        begin_index = header.number + 1
        if begin_index >= stop or self.program[begin_index].kind is not LineKind.BEGIN:
            raise StructureError(
                f"the definition of the '{_KEYWORDS[header.kind]}' does not start with a BEGIN",
                header.line_no,
            )
        check_indent(self.program[begin_index], depth)
        return begin_index + 1

    def _close_block(self, header: Line, body: int, stop: int, depth: int, live: bool) -> int:
        """Run the body one level deeper and return the index of its END."""
        end = self._run_block(body, stop, depth + 1, live)
        if end >= stop:
            raise UnterminatedBlockError(
                f"the '{_KEYWORDS[header.kind]}' does not end", header.line_no
            )
        return end

    def _finish_block(self, end: int) -> int:
        check_terminator(self.program[end], self._next_line(end))
        return end + 1

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    def _step(self, index: int, stop: int, depth: int, live: bool) -> int:
        line = self.program[index]
        check_indent(line, depth)
        kind = line.kind
        if kind is LineKind.STATEMENT:
            self._statement(line, live)
            return index + 1
        if kind is LineKind.IF:
            return self._if_then(line, stop, depth, live)
        if kind is LineKind.WHILE:
            return self._while_do(line, stop, depth, live)
        if kind is LineKind.ITERATE:
            return self._iterate(line, stop, depth, live)
        if kind is LineKind.ELSE:
            raise StructureError("ELSE without a matching IF-THEN", line.line_no)
        if kind is LineKind.BEGIN:
            raise StructureError("BEGIN without a control header", line.line_no)
        if kind is LineKind.END:
            raise StructureError("END without a matching block", line.line_no)
        if kind is LineKind.DEFINE:
            raise StructureError(
                "new instructions must be defined before 'BEGINNING-OF-EXECUTION'", line.line_no
            )
        raise StructureError(f"unexpected line {line.text.strip()!r}", line.line_no)

    def _statement(self, line: Line, live: bool) -> None:
        check_terminator(line, self._next_line(line.number))
        if not live:
            return
        name = line.argument or ""
        try:
            primitive = _PRIMITIVES.get(name)
            if primitive is not None:
                primitive(self.world)
                return
            span = self.macros.lookup(name)
            if span is None:
                raise UnknownStatementError(f"unknown instruction {name!r}", line.line_no)
            self._invoke(name, span)
        except RobotError as exc:
            raise exc.at_line(line.line_no)

    def _condition(self, header: Line) -> bool:
        return evaluate_condition(header.argument or "", self.world, header.line_no)

    # ------------------------------------------------------------------
    # Control constructs
    # ------------------------------------------------------------------

    def _if_then(self, header: Line, stop: int, depth: int, live: bool) -> int:
        taken = self._condition(header) if live else False
        body = self._open_block(header, stop, depth)
        after = self._finish_block(self._close_block(header, body, stop, depth, live and taken))

        if after < stop and self.program[after].kind is LineKind.ELSE:
            else_line = self.program[after]
            check_indent(else_line, depth)
            body = self._open_block(else_line, stop, depth)
            end = self._close_block(else_line, body, stop, depth, live and not taken)
            after = self._finish_block(end)
        return after

    def _while_do(self, header: Line, stop: int, depth: int, live: bool) -> int:
        body = self._open_block(header, stop, depth)
        if live and self._condition(header):
            while True:
                end = self._close_block(header, body, stop, depth, True)
                if not self._condition(header):
                    break
        else:
            end = self._close_block(header, body, stop, depth, False)
        return self._finish_block(end)

    def _iterate(self, header: Line, stop: int, depth: int, live: bool) -> int:
        count = int(header.argument or "0")
        body = self._open_block(header, stop, depth)
        if live and count > 0:
            for _ in range(count):
                end = self._close_block(header, body, stop, depth, True)
        else:
            end = self._close_block(header, body, stop, depth, False)
        return self._finish_block(end)

    # ------------------------------------------------------------------
    # New instructions
    # ------------------------------------------------------------------

    def _define(self, index: int, stop: int) -> int:
        """Register the instruction defined at *index*; return its END index.

        The body is only scanned for structure here. Bodies always sit at
        ``MACRO_BODY_DEPTH`` whatever the header's position.
        """
        header = self.program[index]
        name = header.argument or ""
        self.macros.check_available(name, header.line_no)
        body = self._open_block(header, stop, DEFINITION_DEPTH)
        end = self._close_block(header, body, stop, DEFINITION_DEPTH, False)
        self.macros.define(name, MacroSpan(body, end), header.line_no)
        return end

    def _invoke(self, name: str, span: MacroSpan) -> None:
        # Only direct self-reference is rejected; A -> B -> A is not detected.
        for line in self.program[span.start : span.end]:
            if line.kind is LineKind.STATEMENT and line.argument == name:
                raise RecursiveDefinitionError(
                    f"you can't use the instruction {name!r} inside its own definition",
                    line.line_no,
                )
        self._run_section(span.start, span.end, MACRO_BODY_DEPTH)


def execute(lines: Sequence[str], world: World, macros: MacroRegistry | None = None) -> World:
    """Classify *lines* and run them against *world*; returns the mutated world."""
    Interpreter(classify_program(lines), world, macros).run()
    return world
