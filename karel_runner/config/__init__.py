"""Configuration layer: constants and typed config dataclasses."""

from karel_runner.config.constants import (
    BUILTIN_STATEMENTS,
    DEFAULT_BANNER_PATH,
    DEFAULT_FRAME_DELAY_MS,
    DEFAULT_MAP_PATH,
    DEFAULT_PROGRAM_PATH,
    DEFAULT_THEME_NAME,
    DEFINITION_DEPTH,
    EXECUTION_DEPTH,
    FLUSH_THRESHOLD,
    INDENT_CHAR,
    MACRO_BODY_DEPTH,
    TERMINATOR,
)
from karel_runner.config.types import RunConfig, RunResult

__all__ = [
    "BUILTIN_STATEMENTS",
    "DEFAULT_BANNER_PATH",
    "DEFAULT_FRAME_DELAY_MS",
    "DEFAULT_MAP_PATH",
    "DEFAULT_PROGRAM_PATH",
    "DEFAULT_THEME_NAME",
    "DEFINITION_DEPTH",
    "EXECUTION_DEPTH",
    "FLUSH_THRESHOLD",
    "INDENT_CHAR",
    "MACRO_BODY_DEPTH",
    "RunConfig",
    "RunResult",
    "TERMINATOR",
]
