"""Tile type alias and coordinate helpers.

Board layout (row-major, row 0 at the top, BLUE's home row):
    (0,0)=0,  (1,0)=1,  ..., (7,0)=7
    (0,1)=8,  (1,1)=9,  ..., (7,1)=15
    ...
    (0,7)=56, (1,7)=57, ..., (7,7)=63

Pieces live on the dark tiles only, i.e. those where ``x + y`` is odd.
"""

from __future__ import annotations

from typing import TypeAlias

from checkie.core.errors import InvalidTileIndex

Tile: TypeAlias = int  # 0–63

BOARD_SIZE = 8
NUM_TILES = BOARD_SIZE * BOARD_SIZE


def to_index(x: int, y: int) -> Tile | None:
    """Tile for coordinate (x, y), or ``None`` when it is off the board.

    Diagonal offset arithmetic routinely steps off the edge, so this never
    raises.
    """
    if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
        return None
    return y * BOARD_SIZE + x


def is_valid_tile(tile: object) -> bool:
    """Check whether *tile* is an int in [0, 63]."""
    return isinstance(tile, int) and not isinstance(tile, bool) and 0 <= tile < NUM_TILES


def validate_tile(tile: object) -> Tile:
    """Return *tile* unchanged, or raise :class:`InvalidTileIndex`."""
    if not is_valid_tile(tile):
        raise InvalidTileIndex(tile)
    return tile  # type: ignore[return-value]


def to_coord(tile: Tile) -> tuple[int, int]:
    """(x, y) for *tile*."""
    validate_tile(tile)
    return tile % BOARD_SIZE, tile // BOARD_SIZE


def col_of(tile: Tile) -> int:
    return tile & 7


def row_of(tile: Tile) -> int:
    return tile >> 3


def is_playable(tile: Tile) -> bool:
    """Dark tile that can ever hold a piece."""
    return (col_of(tile) + row_of(tile)) % 2 == 1
