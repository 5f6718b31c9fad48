"""Matplotlib-based rendering of worlds and execution traces."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import pyarrow.parquet as pq
from matplotlib import animation
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.patches import Patch

from karel_runner.domain.world import Cell, Direction, World
from karel_runner.io.maps import FACING_CHARS, load_map
from karel_runner.io.paths import ensure_parent
from karel_runner.io.paths import resolve_within_base as _resolve_within_base
from karel_runner.viz.theme import DEFAULT_THEME, Theme

EMPTY_CODE = 0
WALL_CODE = 1
BEEPER_CODE = 2

# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def _build_grid_array(
    width: int, height: int, walls: Iterable[Cell], beepers: Iterable[Cell]
) -> np.ndarray:
    """Return (H, W) int array of cell codes: empty, wall or beeper.

    Out-of-bounds cells are silently skipped.
    """
    grid = np.full((height, width), EMPTY_CODE, dtype=int)
    for code, cells in ((WALL_CODE, walls), (BEEPER_CODE, beepers)):
        for x, y in cells:
            if 0 <= y < height and 0 <= x < width:
                grid[y, x] = code
    return grid


def _cell_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 3-color colormap (empty, wall, beeper)."""
    cmap = ListedColormap([theme.empty_cell_color, theme.wall_color, theme.beeper_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5, 2.5], cmap.N)
    return cmap, norm


def _build_legend_handles(theme: Theme = DEFAULT_THEME) -> list[Patch]:
    return [
        Patch(facecolor=theme.wall_color, edgecolor="gray", label="Wall"),
        Patch(facecolor=theme.beeper_color, edgecolor="gray", label="Beeper"),
        Patch(facecolor=theme.robot_color, edgecolor="gray", label="Robot"),
    ]


def _draw_cell_grid(
    ax: plt.Axes,
    grid: np.ndarray,
    cmap: ListedColormap,
    norm: BoundaryNorm,
    theme: Theme = DEFAULT_THEME,
) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines on *ax*."""
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = grid.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def _robot_marker(facing: Direction) -> str:
    # Map glyphs double as matplotlib triangle markers pointing the same way.
    return FACING_CHARS[facing]


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------


def render_world_snapshot(
    world: World,
    output_path: Path,
    title: str | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Render the current board and robot to a static image."""
    grid = _build_grid_array(world.width, world.height, world.walls, world.beepers)
    cmap, norm = _cell_cmap(theme)

    fig, ax = plt.subplots(figsize=(max(3.0, 0.5 * world.width), max(3.0, 0.5 * world.height)))
    _draw_cell_grid(ax, grid, cmap, norm, theme=theme)
    robot = world.robot
    ax.plot(
        robot.x,
        robot.y,
        marker=_robot_marker(robot.facing),
        markersize=12,
        color=theme.robot_color,
        linestyle="none",
    )
    ax.set_title(title or f"bag={robot.beepers}  steps={world.steps}")
    fig.legend(handles=_build_legend_handles(theme), loc="lower center", ncol=3, frameon=False)
    fig.tight_layout(rect=(0, 0.08, 1, 1))

    output_path = ensure_parent(Path(output_path))
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path


# ---------------------------------------------------------------------------
# Trace animation
# ---------------------------------------------------------------------------


def _replay_beepers(initial: list[Cell], rows: list[dict[str, Any]]) -> list[list[Cell]]:
    """Board beeper cells after each trace row, replaying pick/put actions."""
    beepers = list(initial)
    frames: list[list[Cell]] = []
    for row in rows:
        cell = (int(row["x"]), int(row["y"]))
        if row["action"] == "pickbeeper" and cell in beepers:
            beepers.remove(cell)
        elif row["action"] == "putbeeper":
            beepers.append(cell)
        frames.append(list(beepers))
    return frames


def render_trace_animation(
    trace_path: Path,
    map_path: Path,
    output_path: Path,
    fps: int = 4,
    base_dir: Path | None = None,
    run_id: str | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Replay a Parquet execution trace over its start map as an animation."""
    if fps < 1:
        raise ValueError("fps must be >= 1")
    if base_dir is None:
        trace_path = Path(trace_path).resolve()
        map_path = Path(map_path).resolve()
        output_path = Path(output_path).resolve()
    else:
        base_dir = Path(base_dir).resolve()
        trace_path = _resolve_within_base(Path(trace_path), base_dir)
        map_path = _resolve_within_base(Path(map_path), base_dir)
        output_path = _resolve_within_base(Path(output_path), base_dir)

    filters = [("run_id", "=", run_id)] if run_id is not None else None
    rows = pq.read_table(trace_path, filters=filters).to_pylist()
    if not rows:
        raise ValueError(f"No trace rows found in {trace_path}")
    rows.sort(key=lambda row: int(row["step"]))

    world = load_map(map_path)
    beeper_frames = _replay_beepers(world.beepers, rows)
    cmap, norm = _cell_cmap(theme)

    fig, ax = plt.subplots(figsize=(max(3.0, 0.5 * world.width), max(3.0, 0.5 * world.height)))
    grid = _build_grid_array(world.width, world.height, world.walls, beeper_frames[0])
    img = _draw_cell_grid(ax, grid, cmap, norm, theme=theme)
    (path_line,) = ax.plot([], [], color=theme.path_color, linewidth=2)
    (robot_dot,) = ax.plot([], [], color=theme.robot_color, markersize=12, linestyle="none")
    fig.tight_layout()

    def update(frame_index: int) -> tuple[Any, ...]:
        row = rows[frame_index]
        img.set_data(
            _build_grid_array(world.width, world.height, world.walls, beeper_frames[frame_index])
        )
        visited = rows[: frame_index + 1]
        path_line.set_data([int(r["x"]) for r in visited], [int(r["y"]) for r in visited])
        robot_dot.set_data([int(row["x"])], [int(row["y"])])
        robot_dot.set_marker(_robot_marker(Direction[str(row["facing"])]))
        ax.set_title(f"step={row['step']}  {row['action']}  bag={row['bag']}")
        return (img, path_line, robot_dot)

    anim = animation.FuncAnimation(
        fig, update, frames=len(rows), interval=max(1, int(1000 / fps)), blit=False
    )

    ensure_parent(output_path)
    writer: animation.PillowWriter | animation.FFMpegWriter
    if output_path.suffix.lower() == ".gif":
        writer = animation.PillowWriter(fps=fps)
    else:
        writer = animation.FFMpegWriter(fps=fps)
    anim.save(output_path, writer=writer)
    plt.close(fig)
    return output_path
