"""CLI entrypoint for running a robot program against a map.

This module owns CLI argument parsing and result reporting. All domain logic
lives in the extracted modules:

- ``karel_runner.io``          – program/map loading
- ``karel_runner.language``    – the interpreter
- ``karel_runner.simulation``  – run orchestration and trace persistence
- ``karel_runner.viz``         – console playback and image rendering
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from karel_runner.config.constants import (
    DEFAULT_BANNER_PATH,
    DEFAULT_FRAME_DELAY_MS,
    DEFAULT_MAP_PATH,
    DEFAULT_PROGRAM_PATH,
    DEFAULT_THEME_NAME,
)
from karel_runner.config.types import RunConfig
from karel_runner.domain.errors import KarelError
from karel_runner.simulation.engine import run
from karel_runner.viz.theme import get_theme

# ---------------------------------------------------------------------------
# Value coercion helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_path(raw: object, key: str) -> Path | None:
    """Coerce raw value to Path; ``None`` stays ``None``."""
    if raw is None:
        return None
    if isinstance(raw, (str, Path)):
        return Path(raw)
    raise ValueError(f"{key} must be a path")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run a robot program on a grid map")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--beepers", type=int, default=None, help="Beepers in the bag at start (default 0)"
    )
    parser.add_argument(
        "--map", type=Path, default=None, help=f"Map file (default {DEFAULT_MAP_PATH})"
    )
    parser.add_argument(
        "--program",
        type=Path,
        default=None,
        help=f"Instruction file (default {DEFAULT_PROGRAM_PATH})",
    )
    parser.add_argument(
        "--frame-delay",
        type=int,
        default=None,
        help=f"Milliseconds between console frames (default {DEFAULT_FRAME_DELAY_MS})",
    )
    parser.add_argument("--display", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--banner",
        type=Path,
        default=None,
        help=f"Splash text shown before a displayed run (default {DEFAULT_BANNER_PATH})",
    )
    parser.add_argument("--trace", type=Path, default=None, help="Parquet execution trace")
    parser.add_argument("--snapshot", type=Path, default=None, help="Final-state image")
    parser.add_argument("--run-id", type=str, default=None)
    parser.add_argument(
        "--theme",
        type=str,
        default=None,
        help=f"Snapshot colour theme (default {DEFAULT_THEME_NAME})",
    )
    return parser


def _build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> RunConfig:
    banner = _coerce_path(_get_val(args.banner, "banner", file_cfg, DEFAULT_BANNER_PATH), "banner")
    return RunConfig(
        initial_beepers=_coerce_int(_get_val(args.beepers, "beepers", file_cfg, 0), "beepers"),
        map_path=Path(str(_get_val(args.map, "map", file_cfg, DEFAULT_MAP_PATH))),
        program_path=Path(str(_get_val(args.program, "program", file_cfg, DEFAULT_PROGRAM_PATH))),
        frame_delay_ms=_coerce_int(
            _get_val(args.frame_delay, "frame_delay", file_cfg, DEFAULT_FRAME_DELAY_MS),
            "frame_delay",
        ),
        display=_coerce_bool(_get_val(args.display, "display", file_cfg, True), "display"),
        banner_path=banner,
        trace_path=_coerce_path(_get_val(args.trace, "trace", file_cfg, None), "trace"),
        snapshot_path=_coerce_path(_get_val(args.snapshot, "snapshot", file_cfg, None), "snapshot"),
        run_id=str(_get_val(args.run_id, "run_id", file_cfg, "run")),
        theme=get_theme(str(_get_val(args.theme, "theme", file_cfg, DEFAULT_THEME_NAME))).name,
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a single run.

    Prints a JSON summary of the run and exits with status 1 when the run was
    aborted by an error.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    try:
        config = _build_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        result = run(config)
    except FileNotFoundError:
        parser.error(f"Instruction file not found: {config.program_path}")
    except KarelError as exc:
        summary: dict[str, object] = {
            "completed": False,
            "error_kind": exc.kind.value,
            "error_line": exc.line,
            "error_message": exc.message,
        }
        print(json.dumps(summary, ensure_ascii=False, indent=2))
        sys.exit(1)

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    if not result.completed:
        print(f"error: {result.error_message}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
