"""Text rendering of the world for terminal playback."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import TextIO

from karel_runner.config.constants import (
    DEFAULT_FRAME_DELAY_MS,
    MAP_BEEPER_CHAR,
    MAP_WALL_CHAR,
)
from karel_runner.domain.world import World
from karel_runner.io.maps import FACING_CHARS
from karel_runner.io.reader import read_lines

CLEAR_SCREEN = "\x1b[2J\x1b[H"


def render_ascii(world: World) -> str:
    """Return the board as map characters; the robot hides what is under it."""
    rows: list[str] = []
    robot_cell = world.robot.position
    beeper_cells = set(world.beepers)
    for y in range(world.height):
        chars: list[str] = []
        for x in range(world.width):
            cell = (x, y)
            if cell == robot_cell:
                chars.append(FACING_CHARS[world.robot.facing])
            elif cell in beeper_cells:
                chars.append(MAP_BEEPER_CHAR)
            elif cell in world.walls:
                chars.append(MAP_WALL_CHAR)
            else:
                chars.append(".")
        rows.append("".join(chars))
    return "\n".join(rows) + "\n"


class ConsoleDisplay:
    """World listener that redraws the board after every mutation."""

    def __init__(
        self,
        stream: TextIO | None = None,
        frame_delay_ms: int = DEFAULT_FRAME_DELAY_MS,
        clear: bool = True,
    ) -> None:
        if frame_delay_ms < 0:
            raise ValueError("frame_delay_ms must be >= 0")
        self.stream = stream if stream is not None else sys.stdout
        self.frame_delay_ms = frame_delay_ms
        self.clear = clear
        self.frames = 0

    def show(self, world: World) -> None:
        """Pause for one frame, then draw *world*."""
        if self.frame_delay_ms:
            time.sleep(self.frame_delay_ms / 1000)
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(render_ascii(world))
        self.stream.write("\n")
        self.stream.flush()
        self.frames += 1

    def __call__(self, world: World, action: str) -> None:
        self.show(world)


def show_banner(path: Path, stream: TextIO | None = None) -> bool:
    """Print the splash text at *path*; returns False when the file is absent."""
    try:
        lines = read_lines(path)
    except FileNotFoundError:
        return False
    out = stream if stream is not None else sys.stdout
    for line in lines:
        out.write(line + "\n")
    out.flush()
    return True
