from __future__ import annotations


class TrappedKnightError(Exception):
    """Base class for errors raised by trapped_knight."""


class ConfigurationError(TrappedKnightError, ValueError):
    """Board size or settings are unusable (e.g. an odd or non-positive size)."""


class PreconditionError(TrappedKnightError, ValueError):
    """A coordinate handed to the board or the walker lies outside the grid."""
