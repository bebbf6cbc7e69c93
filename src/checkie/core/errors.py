"""Recoverable rule violations.

None of these are fatal: the turn controller converts them into rejection
results and leaves the game state untouched.
"""

from __future__ import annotations


class CheckersError(Exception):
    """Base class for every rule violation raised by the core."""


class InvalidTileIndex(CheckersError, ValueError):
    """Tile index outside [0, 63]."""

    def __init__(self, tile: object) -> None:
        super().__init__(f"Invalid tile index: {tile!r}")
        self.tile = tile


class IllegalSelection(CheckersError):
    """Tile holds no movable piece of the side to move."""


class IllegalDestination(CheckersError):
    """Destination is not among the active piece's legal targets."""
