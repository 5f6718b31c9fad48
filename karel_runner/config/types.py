"""Configuration and result dataclasses for interpreter runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path

from karel_runner.config.constants import (
    DEFAULT_FRAME_DELAY_MS,
    DEFAULT_MAP_PATH,
    DEFAULT_PROGRAM_PATH,
    DEFAULT_THEME_NAME,
)

__all__ = [
    "RunConfig",
    "RunResult",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Outcome of one run: either completed, or aborted by exactly one error."""

    completed: bool
    steps: int
    x: int
    y: int
    facing: str
    bag: int
    board_beepers: int
    error_kind: str | None = None
    error_line: int | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    """Inputs of one interpreter run.

    Only ``initial_beepers``, ``map_path`` and ``program_path`` influence
    execution; the remaining fields select optional outputs.
    """

    initial_beepers: int = 0
    map_path: Path = Path(DEFAULT_MAP_PATH)
    program_path: Path = Path(DEFAULT_PROGRAM_PATH)
    frame_delay_ms: int = DEFAULT_FRAME_DELAY_MS
    display: bool = True
    banner_path: Path | None = None
    trace_path: Path | None = None
    snapshot_path: Path | None = None
    run_id: str = "run"
    theme: str = DEFAULT_THEME_NAME

    def __post_init__(self) -> None:
        if self.initial_beepers < 0:
            raise ValueError("initial_beepers must be >= 0")
        if self.frame_delay_ms < 0:
            raise ValueError("frame_delay_ms must be >= 0")
        if not self.run_id:
            raise ValueError("run_id must not be empty")
