"""Registry of user-defined instructions.

A definition records only the half-open interval of its body lines; the
program text itself is never copied.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from karel_runner.config.constants import BUILTIN_STATEMENTS
from karel_runner.domain.errors import DuplicateDefinitionError


@dataclass(frozen=True)
class MacroSpan:
    """Body lines ``[start, end)`` of one DEFINE-NEW-INSTRUCTION block."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError("macro span must satisfy 0 <= start <= end")

    def __len__(self) -> int:
        return self.end - self.start


@dataclass
class MacroRegistry:
    """Per-run name -> body-span table; entries are added once, never removed."""

    _spans: dict[str, MacroSpan] = field(default_factory=dict)

    def check_available(self, name: str, line: int | None = None) -> None:
        """Raise :class:`DuplicateDefinitionError` if *name* is already taken."""
        if name in BUILTIN_STATEMENTS:
            raise DuplicateDefinitionError(f"{name!r} is a built-in instruction", line)
        if name in self:
            raise DuplicateDefinitionError(f"you already have a {name!r} instruction", line)

    def define(self, name: str, span: MacroSpan, line: int | None = None) -> None:
        self.check_available(name, line)
        self._spans[name] = span

    def lookup(self, name: str) -> MacroSpan | None:
        return self._spans.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._spans
