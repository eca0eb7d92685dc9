from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import Settings, default_settings, load_settings
from .core.board import build_board
from .core.errors import TrappedKnightError
from .core.walker import walk
from .explorer.trapped_walk import path_values, walk_report
from .viz.palettes import PALETTES

logger = logging.getLogger(__name__)


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config) if args.config else default_settings()
    if args.size is not None:
        settings.board.size = args.size
    if args.start is not None:
        settings.board.start = (args.start[0], args.start[1])
    return settings


def cmd_walk(args: argparse.Namespace) -> int:
    settings = _resolve_settings(args)
    board = build_board(settings.board.size)
    board.audit()
    start = settings.board.start or board.center
    path = walk(board, start)
    print(json.dumps(walk_report(board, start, path), indent=2))
    if args.sequence:
        values = [board.value_at(start), *path_values(board, path)]
        print(", ".join(str(v) for v in values))
    return 0


def cmd_board(args: argparse.Namespace) -> int:
    board = build_board(args.size)
    width = len(str(board.max_value))
    for row in board.cells:
        print(" ".join(str(v).rjust(width) for v in row))
    return 0


def cmd_plot(args: argparse.Namespace) -> int:
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from .viz.plot import plot_path

    settings = _resolve_settings(args)
    if args.palette:
        settings.plot.palette = args.palette
    board = build_board(settings.board.size)
    start = settings.board.start or board.center
    path = walk(board, start)

    ax = plot_path(
        board,
        path,
        start=start,
        palette=settings.plot.palette,
        line_width=settings.plot.line_width,
        title=settings.plot.title,
    )
    out = Path(args.output)
    ax.figure.savefig(out)
    plt.close(ax.figure)
    print(f"Wrote {out}")
    return 0


def _add_walk_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", help="Path to YAML/JSON settings file")
    p.add_argument("--size", type=int, help="Board size (even); the board spans 0..size on each axis")
    p.add_argument("--start", nargs=2, type=int, metavar=("ROW", "COL"), help="Start square (default: center)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Trapped Knight on a spirally numbered board")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    walk_p = sub.add_parser("walk", help="Walk the knight until trapped and print a JSON report")
    _add_walk_options(walk_p)
    walk_p.add_argument("--sequence", action="store_true", help="Also print the visited square numbers")
    walk_p.set_defaults(func=cmd_walk)

    board_p = sub.add_parser("board", help="Print the spiral numbering of a board")
    board_p.add_argument("--size", type=int, required=True, help="Board size (even)")
    board_p.set_defaults(func=cmd_board)

    plot_p = sub.add_parser("plot", help="Render the knight's path to an image file")
    _add_walk_options(plot_p)
    plot_p.add_argument("--palette", choices=sorted(PALETTES), help="Color set for the path bands")
    plot_p.add_argument("--output", required=True, help="Image file to write (e.g. knight.png)")
    plot_p.set_defaults(func=cmd_plot)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except TrappedKnightError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
