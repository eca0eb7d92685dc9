from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from trapped_knight.core.board import UNNUMBERED, Board, Coord, build_board
from trapped_knight.core.errors import PreconditionError
from trapped_knight.core.moves import knight_moves
from trapped_knight.core.walker import walk


def path_values(board: Board, path: Sequence[Coord]) -> list[int]:
    return [board.value_at(coord) for coord in path]


def _as_coord(raw: Any) -> Coord:
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or len(raw) != 2:
        raise PreconditionError(f"start must be a (row, col) pair, got {raw!r}")
    try:
        return (int(raw[0]), int(raw[1]))
    except (TypeError, ValueError) as e:
        raise PreconditionError(f"start must hold integers, got {raw!r}") from e


def _edge_contact(board: Board, squares: Sequence[Coord]) -> bool:
    """True if any knight move from `squares` leaves the board or hits an unnumbered square.

    When this holds the walk may have been cut short by the board size rather than by
    the numbering itself.
    """
    for coord in squares:
        for dest in knight_moves(coord):
            if not board.in_bounds(dest) or board.value_at(dest) == UNNUMBERED:
                return True
    return False


def walk_report(board: Board, start: Coord, path: Sequence[Coord]) -> dict:
    """Summarize a finished walk from `start` along `path` on `board`."""
    trapped_at = path[-1] if path else start
    start_value = board.value_at(start)
    values = path_values(board, path)
    max_visited = max([start_value, *values])
    max_at = board.locate(max_visited)
    populated = board.populated_count

    return {
        "size": board.size,
        "start": list(start),
        "start_value": start_value,
        "steps": len(path),
        "trapped_at": list(trapped_at),
        "final_value": board.value_at(trapped_at),
        "max_value_visited": max_visited,
        "max_value_at": list(max_at) if max_at is not None else None,
        "populated_cells": populated,
        "coverage": (len(path) + 1) / populated,
        "edge_contact": _edge_contact(board, (start, *path)),
    }


def explore_trapped(size: int, start: Coord | None = None) -> dict:
    board = build_board(size)
    board.audit()

    start = board.center if start is None else _as_coord(start)
    path = walk(board, start)
    return walk_report(board, start, path)
