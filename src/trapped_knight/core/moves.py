from __future__ import annotations

from .board import Board, Coord

KNIGHT_OFFSETS: tuple[Coord, ...] = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)


def knight_moves(coord: Coord) -> list[Coord]:
    """All eight knight destinations from `coord`, ignoring the board edge."""
    r, c = coord
    return [(r + dr, c + dc) for dr, dc in KNIGHT_OFFSETS]


def in_bounds_moves(board: Board, coord: Coord) -> list[Coord]:
    """Knight destinations from `coord` that lie on `board`.

    Must run before any cell value is read for a candidate.
    """
    return [dest for dest in knight_moves(coord) if board.in_bounds(dest)]
