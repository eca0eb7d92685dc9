"""Trapped Knight package."""

from .core.board import Board, build_board
from .core.errors import ConfigurationError, PreconditionError, TrappedKnightError
from .core.walker import walk
from .explorer.trapped_walk import explore_trapped

__all__ = [
    "Board",
    "build_board",
    "walk",
    "explore_trapped",
    "ConfigurationError",
    "PreconditionError",
    "TrappedKnightError",
]
