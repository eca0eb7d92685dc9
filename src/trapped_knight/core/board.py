from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ConfigurationError, PreconditionError

logger = logging.getLogger(__name__)

Coord = tuple[int, int]

# Spiral leg order. "up" decreases the row index, "right" increases the column index.
SPIRAL_DIRECTIONS: tuple[Coord, ...] = ((0, 1), (-1, 0), (0, -1), (1, 0))

UNNUMBERED = 0


@dataclass(frozen=True, slots=True)
class Board:
    size: int
    cells: tuple[tuple[int, ...], ...]

    @property
    def center(self) -> Coord:
        half = self.size // 2
        return (half, half)

    @property
    def max_value(self) -> int:
        return max(max(row) for row in self.cells)

    @property
    def populated_count(self) -> int:
        return sum(1 for row in self.cells for v in row if v != UNNUMBERED)

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r <= self.size and 0 <= c <= self.size

    def value_at(self, coord: Coord) -> int:
        if not self.in_bounds(coord):
            raise PreconditionError(f"coordinate {coord} outside board 0..{self.size}")
        r, c = coord
        return self.cells[r][c]

    def locate(self, value: int) -> Coord | None:
        """Coordinate holding `value`, or None if the spiral never assigned it."""
        if value == UNNUMBERED:
            return None
        for r, row in enumerate(self.cells):
            for c, v in enumerate(row):
                if v == value:
                    return (r, c)
        return None

    def rows(self) -> list[list[int]]:
        return [list(row) for row in self.cells]

    def audit(self) -> None:
        # Non-mutating: the board is frozen, this only re-checks construction invariants.
        n = self.size + 1
        if len(self.cells) != n or any(len(row) != n for row in self.cells):
            raise AssertionError("board is not square")

        values = [v for row in self.cells for v in row if v != UNNUMBERED]
        if any(v < 0 for v in values):
            raise AssertionError("negative cell value")
        if len(set(values)) != len(values):
            raise AssertionError("spiral values not unique")
        if set(values) != set(range(1, len(values) + 1)):
            raise AssertionError("spiral values not contiguous from 1")
        if self.value_at(self.center) != 1:
            raise AssertionError("spiral origin is not at the center")


def _leg_length(leg: int) -> int:
    # 1, 1, 2, 2, 3, 3, ...
    return leg // 2 + 1


def build_board(size: int) -> Board:
    """Number a (size+1)x(size+1) board along an outward square spiral.

    The center (size/2, size/2) holds 1. Legs run right, up, left, down with lengths
    1, 1, 2, 2, 3, 3, ... and each step takes the next integer. A new leg is only started
    while the current square is strictly inside the board, and a leg that would end off
    the board is dropped whole rather than clipped. Squares never reached hold 0.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise ConfigurationError(f"size must be an int, got {type(size).__name__}")
    if size <= 0 or size % 2 != 0:
        raise ConfigurationError(f"size must be a positive even number, got {size}")

    grid = [[UNNUMBERED] * (size + 1) for _ in range(size + 1)]
    r = c = size // 2
    grid[r][c] = 1
    count = 2
    leg = 0

    while 0 < r < size and 0 < c < size:
        dr, dc = SPIRAL_DIRECTIONS[leg % 4]
        steps = _leg_length(leg)
        end_r, end_c = r + dr * steps, c + dc * steps
        if not (0 <= end_r <= size and 0 <= end_c <= size):
            break
        for _ in range(steps):
            r += dr
            c += dc
            grid[r][c] = count
            count += 1
        leg += 1

    logger.debug("Built spiral board size=%s legs=%s max_value=%s", size, leg, count - 1)
    return Board(size=size, cells=tuple(tuple(row) for row in grid))
