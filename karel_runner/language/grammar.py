"""Line classification for the tab-scoped robot language.

Each source line is matched against a fixed set of patterns and turned into a
:class:`Line`, a tagged record that the executor dispatches on. Matching is
purely textual: a condition or statement name is captured here but validated
later, when it is evaluated or invoked.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from karel_runner.config.constants import INDENT_CHAR, TERMINATOR


class LineKind(Enum):
    """Syntactic category of one source line."""

    PROGRAM_START = "program_start"
    PROGRAM_END = "program_end"
    EXECUTION_START = "execution_start"
    EXECUTION_END = "execution_end"
    TURNOFF = "turnoff"
    STATEMENT = "statement"
    IF = "if"
    ELSE = "else"
    WHILE = "while"
    ITERATE = "iterate"
    DEFINE = "define"
    BEGIN = "begin"
    END = "end"
    UNKNOWN = "unknown"


# Order matters: keyword lines must be tried before the generic statement.
_PATTERNS: tuple[tuple[LineKind, re.Pattern[str]], ...] = (
    (LineKind.PROGRAM_START, re.compile(r"^BEGINNING-OF-PROGRAM\s?$")),
    (LineKind.PROGRAM_END, re.compile(r"^END-OF-PROGRAM\s?$")),
    (LineKind.EXECUTION_START, re.compile(r"^\tBEGINNING-OF-EXECUTION\s?$")),
    (LineKind.EXECUTION_END, re.compile(r"^\tEND-OF-EXECUTION\s?$")),
    (LineKind.TURNOFF, re.compile(r"^\t\tturnoff\s?$")),
    (LineKind.DEFINE, re.compile(r"^\t+DEFINE-NEW-INSTRUCTION (\S+) AS\s?$")),
    (LineKind.IF, re.compile(r"^\t+IF (.+) THEN\s*$")),
    (LineKind.ELSE, re.compile(r"^\t+ELSE\s?$")),
    (LineKind.WHILE, re.compile(r"^\t+WHILE (.+) DO\s?$")),
    (LineKind.ITERATE, re.compile(r"^\t+ITERATE (\d+) TIMES\s?$")),
    (LineKind.BEGIN, re.compile(r"^\t+BEGIN\s?$")),
    (LineKind.END, re.compile(r"^\t+END(;?)\s?$")),
    (LineKind.STATEMENT, re.compile(r"^\t+([^\s;]+)(;?)\s?$")),
)


@dataclass(frozen=True)
class Line:
    """One classified source line."""

    number: int  # 0-based index into the program
    text: str
    kind: LineKind
    indent: int
    argument: str | None = None
    terminated: bool = False

    @property
    def line_no(self) -> int:
        """1-based line number used in error messages."""
        return self.number + 1


Program = Sequence[Line]


def leading_indent(text: str) -> int:
    """Count the leading indentation characters of *text*."""
    return len(text) - len(text.lstrip(INDENT_CHAR))


def classify_line(text: str, number: int) -> Line:
    """Classify a single raw line."""
    indent = leading_indent(text)
    for kind, pattern in _PATTERNS:
        match = pattern.match(text)
        if match is None:
            continue
        argument: str | None = None
        terminated = False
        if kind in (LineKind.DEFINE, LineKind.IF, LineKind.WHILE, LineKind.ITERATE):
            argument = match.group(1).strip()
        elif kind is LineKind.STATEMENT:
            argument = match.group(1)
            terminated = match.group(2) == TERMINATOR
        elif kind is LineKind.END:
            terminated = match.group(1) == TERMINATOR
        return Line(number, text, kind, indent, argument, terminated)
    return Line(number, text, LineKind.UNKNOWN, indent)


def classify_program(lines: Sequence[str]) -> list[Line]:
    """Classify every line of a program, preserving source order."""
    return [classify_line(text, number) for number, text in enumerate(lines)]
