"""Parquet schema for execution traces.

One row is written per successful world mutation, so a trace replays the
robot's path step by step.
"""

from __future__ import annotations

import pyarrow as pa

TRACE_SCHEMA_VERSION = 1

TRACE_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("step", pa.int64()),
        ("action", pa.string()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("facing", pa.string()),
        ("bag", pa.int64()),
        ("board_beepers", pa.int64()),
    ],
    metadata={"schema_version": str(TRACE_SCHEMA_VERSION)},
)

TRACE_COLUMNS: tuple[str, ...] = tuple(TRACE_SCHEMA.names)
