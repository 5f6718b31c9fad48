from __future__ import annotations

import argparse
from pathlib import Path

from karel_runner.io.maps import load_map
from karel_runner.viz.render import render_trace_animation, render_world_snapshot
from karel_runner.viz.theme import get_theme


def _build_animate_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("animate", help="Replay a Parquet execution trace over its map")
    p.set_defaults(func=_handle_animate)
    p.add_argument("--trace", type=Path, required=True)
    p.add_argument("--map", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--fps", type=int, default=4)
    p.add_argument("--run-id", type=str, default=None)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_map_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("map", help="Render the start state of a map file")
    p.set_defaults(func=_handle_map)
    p.add_argument("--map", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--title", type=str, default=None)


def _handle_animate(args: argparse.Namespace) -> None:
    render_trace_animation(
        trace_path=args.trace,
        map_path=args.map,
        output_path=args.output,
        fps=args.fps,
        base_dir=args.base_dir,
        run_id=args.run_id,
        theme=get_theme(args.theme),
    )


def _handle_map(args: argparse.Namespace) -> None:
    render_world_snapshot(
        load_map(args.map),
        args.output,
        title=args.title,
        theme=get_theme(args.theme),
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Rendering tools for robot runs")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name (default, dark)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_animate_parser(sub)
    _build_map_parser(sub)
    args = parser.parse_args(argv)

    try:
        get_theme(args.theme)
    except ValueError as exc:
        parser.error(str(exc))

    args.func(args)


if __name__ == "__main__":
    main()
