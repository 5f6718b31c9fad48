"""I/O layer: source reading, map parsing, trace schema and path helpers."""

from karel_runner.io.maps import load_map, parse_map
from karel_runner.io.reader import read_lines, split_source

__all__ = [
    "load_map",
    "parse_map",
    "read_lines",
    "split_source",
]
