"""Plain-text source loading shared by the map and program readers."""

from __future__ import annotations

from pathlib import Path


def split_source(text: str) -> list[str]:
    """Split *text* into lines and drop trailing blank lines.

    ``\\r\\n`` and bare ``\\r`` line endings are accepted.
    """
    lines = text.splitlines()
    while lines and not lines[-1]:
        lines.pop()
    return lines


def read_lines(path: Path) -> list[str]:
    """Read a UTF-8 text file as a list of lines.

    Raises :exc:`FileNotFoundError` if *path* does not exist.
    """
    return split_source(Path(path).read_text(encoding="utf-8"))
