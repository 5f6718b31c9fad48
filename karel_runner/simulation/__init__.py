"""Simulation layer: run orchestration and Parquet trace persistence."""

from karel_runner.simulation.engine import run, run_program
from karel_runner.simulation.persistence import TraceRecorder, flush_trace_columns

__all__ = [
    "TraceRecorder",
    "flush_trace_columns",
    "run",
    "run_program",
]
