"""Run orchestration: load sources, wire listeners, execute, summarise."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from karel_runner.config.types import RunConfig, RunResult
from karel_runner.domain.errors import KarelError, NestingDepthError
from karel_runner.domain.world import World
from karel_runner.io.maps import load_map
from karel_runner.io.reader import read_lines
from karel_runner.language.executor import Interpreter
from karel_runner.language.grammar import classify_program
from karel_runner.language.macros import MacroRegistry
from karel_runner.simulation.persistence import TraceRecorder
from karel_runner.viz.console import ConsoleDisplay, show_banner
from karel_runner.viz.theme import get_theme


def _result(world: World, error: KarelError | None = None) -> RunResult:
    robot = world.robot
    return RunResult(
        completed=error is None,
        steps=world.steps,
        x=robot.x,
        y=robot.y,
        facing=robot.facing.name,
        bag=robot.beepers,
        board_beepers=len(world.beepers),
        error_kind=error.kind.value if error is not None else None,
        error_line=error.line if error is not None else None,
        error_message=error.message if error is not None else None,
    )


def run_program(
    lines: Sequence[str], world: World, macros: MacroRegistry | None = None
) -> RunResult:
    """Execute *lines* against *world* and report the outcome.

    Interpreter errors never escape: the first one aborts the run and is
    returned in the result together with the world state at that moment.
    """
    interpreter = Interpreter(classify_program(lines), world, macros)
    try:
        interpreter.run()
    except KarelError as exc:
        return _result(world, exc)
    except RecursionError:
        # Mutually recursive instructions are not rejected up front.
        return _result(world, NestingDepthError("instruction calls nest too deeply"))
    return _result(world)


def run(config: RunConfig, stream: TextIO | None = None) -> RunResult:
    """Run one program file against one map file as described by *config*.

    Raises :class:`MapError` for a bad map and :exc:`FileNotFoundError` for a
    missing program file; everything after loading is reported in the result.
    """
    out = stream if stream is not None else sys.stdout
    theme = get_theme(config.theme)
    world = load_map(config.map_path)
    lines = read_lines(config.program_path)
    world.set_bag(config.initial_beepers)

    display: ConsoleDisplay | None = None
    if config.display:
        if config.banner_path is not None:
            show_banner(config.banner_path, out)
        display = ConsoleDisplay(out, frame_delay_ms=config.frame_delay_ms)
        display.show(world)
        world.listeners.append(display)

    recorder: TraceRecorder | None = None
    if config.trace_path is not None:
        recorder = TraceRecorder(config.trace_path, run_id=config.run_id)
        recorder.record_initial(world)
        world.listeners.append(recorder)

    try:
        result = run_program(lines, world)
    finally:
        if recorder is not None:
            recorder.close()

    if display is not None:
        display.show(world)
    if config.snapshot_path is not None:
        from karel_runner.viz.render import render_world_snapshot

        render_world_snapshot(world, config.snapshot_path, theme=theme)
    return result
