"""Parquet persistence of execution traces."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from karel_runner.config.constants import FLUSH_THRESHOLD
from karel_runner.domain.world import World
from karel_runner.io.paths import ensure_parent
from karel_runner.io.schemas import TRACE_COLUMNS, TRACE_SCHEMA


def flush_trace_columns(
    trace_columns: dict[str, list[int | str]],
    trace_path: Path,
    trace_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trace rows to Parquet and clear in-memory buffers."""
    if not trace_columns["run_id"]:
        return trace_writer
    table = pa.Table.from_pydict(trace_columns, schema=TRACE_SCHEMA)
    if trace_writer is None:
        trace_writer = pq.ParquetWriter(trace_path, TRACE_SCHEMA)
    trace_writer.write_table(table)
    for values in trace_columns.values():
        values.clear()
    return trace_writer


class TraceRecorder:
    """World listener that records one row per mutation.

    Rows are buffered and flushed every ``flush_threshold`` rows; call
    :meth:`close` to flush the remainder. A run without any mutation still
    produces an (empty) Parquet file.
    """

    def __init__(
        self, trace_path: Path, run_id: str, flush_threshold: int = FLUSH_THRESHOLD
    ) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.trace_path = Path(trace_path)
        self.run_id = run_id
        self.flush_threshold = flush_threshold
        self.rows_written = 0
        self._columns: dict[str, list[int | str]] = {name: [] for name in TRACE_COLUMNS}
        self._writer: pq.ParquetWriter | None = None
        self._closed = False
        ensure_parent(self.trace_path)

    def record_initial(self, world: World) -> None:
        """Record the start state as step 0."""
        self._append(world, "start")

    def __call__(self, world: World, action: str) -> None:
        self._append(world, action)

    def _append(self, world: World, action: str) -> None:
        robot = world.robot
        row: dict[str, int | str] = {
            "run_id": self.run_id,
            "step": world.steps,
            "action": action,
            "x": robot.x,
            "y": robot.y,
            "facing": robot.facing.name,
            "bag": robot.beepers,
            "board_beepers": len(world.beepers),
        }
        for name, value in row.items():
            self._columns[name].append(value)
        self.rows_written += 1
        if len(self._columns["run_id"]) >= self.flush_threshold:
            self._writer = flush_trace_columns(self._columns, self.trace_path, self._writer)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._writer = flush_trace_columns(self._columns, self.trace_path, self._writer)
        if self._writer is None:
            pq.write_table(TRACE_SCHEMA.empty_table(), self.trace_path)
        else:
            self._writer.close()
            self._writer = None
