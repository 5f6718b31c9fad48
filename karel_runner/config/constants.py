"""Centralized language and runtime constants.

Grammar characters, fixed scope depths, and default file locations used across
the interpreter, the loaders, and the CLI are defined here. Consuming modules
should import from this module rather than defining their own inline literals.
"""

from __future__ import annotations

INDENT_CHAR = "\t"
"""The only character that counts towards a line's scope depth."""

TERMINATOR = ";"
"""Statement separator; required unless the next line closes a block."""

DEFINITION_DEPTH = 1
"""Depth of definition headers and of the execution-section markers."""

EXECUTION_DEPTH = 2
"""Depth of the top-level statements inside the execution section."""

MACRO_BODY_DEPTH = 2
"""Depth at which every macro body is written and later replayed."""

BUILTIN_STATEMENTS: tuple[str, ...] = ("move", "turnleft", "pickbeeper", "putbeeper")
"""Primitive statements dispatched straight to the world model."""

DEFAULT_MAP_PATH = "map.txt"
"""Map file used when none is given on the command line."""

DEFAULT_PROGRAM_PATH = "instructions.txt"
"""Instruction file used when none is given on the command line."""

DEFAULT_BANNER_PATH = "LOGO.txt"
"""Splash text shown before a displayed run, when the file exists."""

DEFAULT_FRAME_DELAY_MS = 500
"""Pause between two console frames, in milliseconds."""

FLUSH_THRESHOLD = 8_192
"""Flush execution-trace rows to Parquet once this in-memory row count is reached."""

MAP_EMPTY_CHARS = frozenset({".", " "})
"""Map characters for an empty cell."""

MAP_WALL_CHAR = "#"
"""Map character for a wall cell."""

MAP_BEEPER_CHAR = "*"
"""Map character for a single beeper."""

DEFAULT_THEME_NAME = "default"
"""Colour theme used for rendered snapshots and animations."""
