from __future__ import annotations

import logging

from .board import UNNUMBERED, Board, Coord
from .errors import PreconditionError
from .moves import in_bounds_moves

logger = logging.getLogger(__name__)

Path = tuple[Coord, ...]


def next_square(board: Board, coord: Coord, visited: set[int]) -> Coord | None:
    """Lowest-numbered unvisited knight destination from `coord`, or None when trapped.

    Unnumbered squares are not destinations. Spiral values are unique, so a plain
    minimum needs no tie-break.
    """
    best: Coord | None = None
    best_value = 0
    for dest in in_bounds_moves(board, coord):
        value = board.value_at(dest)
        if value == UNNUMBERED or value in visited:
            continue
        if best is None or value < best_value:
            best = dest
            best_value = value
    return best


def walk(board: Board, start: Coord | None = None) -> Path:
    """Walk the knight greedily from `start` (default: the board center) until trapped.

    Returns the visited squares in order, excluding `start`. The last element is the
    square where the knight got stuck; an empty path means it was stuck at `start`.
    """
    if start is None:
        start = board.center
    if not board.in_bounds(start):
        raise PreconditionError(f"start {start} outside board 0..{board.size}")

    visited = {board.value_at(start)}
    path: list[Coord] = []
    current = start

    while True:
        nxt = next_square(board, current, visited)
        if nxt is None:
            break
        current = nxt
        path.append(current)
        visited.add(board.value_at(current))

    logger.info(
        "No more moves after %s steps, trapped at %s, final value is %s",
        len(path),
        current,
        board.value_at(current),
    )
    return tuple(path)
