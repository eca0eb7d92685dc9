"""trapped_knight.explorer"""

from .trapped_walk import explore_trapped, path_values, walk_report

__all__ = [
    "explore_trapped",
    "path_values",
    "walk_report",
]
