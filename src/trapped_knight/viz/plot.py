from __future__ import annotations

from collections.abc import Sequence

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from trapped_knight.core.board import Board, Coord
from trapped_knight.viz.palettes import PALETTES, color_bands


def plot_path(
    board: Board,
    path: Sequence[Coord],
    *,
    start: Coord | None = None,
    palette: str = "vw",
    ax=None,
    line_width: float = 8.0,
    title: str | None = None,
):
    """Draw the knight's journey as line segments colored in bands along the path.

    Columns run along x and rows along y, with y inverted so the spiral's "up" reads up.
    """
    if palette not in PALETTES:
        raise ValueError(f"unknown palette {palette!r}")
    if ax is None:
        fig = plt.figure(figsize=(8, 8))
        ax = fig.add_subplot(111)

    if start is None:
        start = board.center
    points = [start, *path]
    segments = [
        [(a[1], a[0]), (b[1], b[0])]
        for a, b in zip(points, points[1:])
    ]
    colors = color_bands(len(segments), PALETTES[palette])

    lc = LineCollection(segments, colors=colors, linewidths=line_width, capstyle="round")
    ax.add_collection(lc)

    rows = [p[0] for p in points]
    cols = [p[1] for p in points]
    ax.set_xlim(min(cols) - 1, max(cols) + 1)
    ax.set_ylim(max(rows) + 1, min(rows) - 1)
    ax.set_aspect("equal")
    ax.set_xlabel("column")
    ax.set_ylabel("row")
    ax.set_title(title or f"Trapped knight, board {board.size + 1}x{board.size + 1}, {len(path)} moves")
    return ax
