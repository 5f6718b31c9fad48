"""Tests for the karel command-line entrypoint."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from karel_runner.cli import main

PROGRAM = """BEGINNING-OF-PROGRAM
\tDEFINE-NEW-INSTRUCTION turnright AS
\tBEGIN
\t\tturnleft;
\t\tturnleft;
\t\tturnleft
\tEND
\tBEGINNING-OF-EXECUTION
\t\tWHILE front-is-clear DO
\t\tBEGIN
\t\t\tmove
\t\tEND;
\t\tIF next-to-a-beeper THEN
\t\tBEGIN
\t\t\tpickbeeper
\t\tEND;
\t\tELSE
\t\tBEGIN
\t\t\tturnright
\t\tEND;
\t\tturnoff
\tEND-OF-EXECUTION
END-OF-PROGRAM
"""


def _inputs(tmp_path: Path, program: str = PROGRAM) -> tuple[Path, Path]:
    map_path = tmp_path / "map.txt"
    map_path.write_text(">..*\n....\n", encoding="utf-8")
    program_path = tmp_path / "instructions.txt"
    program_path.write_text(program, encoding="utf-8")
    return map_path, program_path


def test_main_prints_json_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    map_path, program_path = _inputs(tmp_path)
    main(["--map", str(map_path), "--program", str(program_path), "--no-display"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["completed"] is True
    assert (summary["x"], summary["y"]) == (3, 0)
    assert summary["facing"] == "EAST"
    assert summary["bag"] == 1
    assert summary["board_beepers"] == 0
    assert summary["error_kind"] is None


def test_main_reads_config_file_and_cli_overrides(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    map_path, program_path = _inputs(tmp_path)
    trace_path = tmp_path / "trace.parquet"
    config_path = tmp_path / "run.json"
    config_path.write_text(
        json.dumps(
            {
                "map": str(map_path),
                "program": str(program_path),
                "display": "off",
                "beepers": 7,
                "trace": str(trace_path),
            }
        ),
        encoding="utf-8",
    )
    main(["--config", str(config_path), "--beepers", "2"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["bag"] == 3
    assert trace_path.exists()


def test_main_exits_nonzero_on_runtime_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    program = PROGRAM.replace("\t\tturnoff", "\t\tmove;\n\t\tturnoff")
    map_path, program_path = _inputs(tmp_path, program)
    with pytest.raises(SystemExit) as excinfo:
        main(["--map", str(map_path), "--program", str(program_path), "--no-display"])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    summary = json.loads(captured.out)
    assert summary["completed"] is False
    assert summary["error_kind"] == "runtime"
    assert summary["error_line"] == 21
    assert "front is blocked" in captured.err


def test_main_reports_map_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _, program_path = _inputs(tmp_path)
    bad_map = tmp_path / "bad.txt"
    bad_map.write_text(">..\n..\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["--map", str(bad_map), "--program", str(program_path), "--no-display"])
    assert excinfo.value.code == 1
    summary = json.loads(capsys.readouterr().out)
    assert summary["error_kind"] == "map"
    assert summary["error_line"] == 2


def test_main_missing_program_is_usage_error(tmp_path: Path) -> None:
    map_path, _ = _inputs(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["--map", str(map_path), "--program", str(tmp_path / "none.txt"), "--no-display"])
    assert excinfo.value.code == 2


def test_main_rejects_negative_beepers(tmp_path: Path) -> None:
    map_path, program_path = _inputs(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["--map", str(map_path), "--program", str(program_path), "--beepers", "-1"])
    assert excinfo.value.code == 2


def test_main_rejects_unknown_theme(tmp_path: Path) -> None:
    map_path, program_path = _inputs(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["--map", str(map_path), "--program", str(program_path), "--theme", "neon"])
    assert excinfo.value.code == 2


def test_main_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path / "missing.json")])
    assert excinfo.value.code == 2
