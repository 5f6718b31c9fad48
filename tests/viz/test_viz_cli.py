"""Tests for the karel-viz command-line entrypoint."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from karel_runner.io.maps import parse_map
from karel_runner.simulation.persistence import TraceRecorder
from karel_runner.viz_cli import main


def _write_run(tmp_path: Path) -> None:
    (tmp_path / "map.txt").write_text("^.\n*#\n", encoding="utf-8")
    world = parse_map(["^.", "*#"])
    recorder = TraceRecorder(tmp_path / "trace.parquet", run_id="cli")
    recorder.record_initial(world)
    world.listeners.append(recorder)
    world.turn_left()
    world.turn_left()
    world.move()
    world.pick_beeper()
    recorder.close()


def test_animate_writes_gif_inside_base_dir(tmp_path: Path) -> None:
    _write_run(tmp_path)
    main(
        [
            "animate",
            "--trace",
            "trace.parquet",
            "--map",
            "map.txt",
            "--output",
            "out/run.gif",
            "--base-dir",
            str(tmp_path),
        ]
    )
    assert (tmp_path / "out" / "run.gif").exists()


def test_map_writes_png_with_theme(tmp_path: Path) -> None:
    _write_run(tmp_path)
    output = tmp_path / "start.png"
    main(["--theme", "dark", "map", "--map", str(tmp_path / "map.txt"), "--output", str(output)])
    assert output.exists()


def test_unknown_theme_is_usage_error(tmp_path: Path) -> None:
    _write_run(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["--theme", "neon", "map", "--map", str(tmp_path / "map.txt"), "--output", "x.png"])
    assert excinfo.value.code == 2


def test_subcommand_is_required() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
