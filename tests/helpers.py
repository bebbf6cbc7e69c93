"""Position builders shared by the test modules."""

from __future__ import annotations

from collections.abc import Iterable

from checkie.core.enums import Side
from checkie.core.notation import position_to_fen
from checkie.core.position import Position


def build_position(
    red: Iterable[int] = (),
    blue: Iterable[int] = (),
    *,
    kings: Iterable[int] = (),
    side: Side = Side.RED,
) -> Position:
    """Position with pieces on the given tile indices."""
    king_tiles = set(kings)
    pos = Position.empty(side)
    for tile in red:
        pos.add_piece(Side.RED, tile, is_king=tile in king_tiles)
    for tile in blue:
        pos.add_piece(Side.BLUE, tile, is_king=tile in king_tiles)
    return pos


def fen_of(
    red: Iterable[int] = (),
    blue: Iterable[int] = (),
    *,
    kings: Iterable[int] = (),
    side: Side = Side.RED,
) -> str:
    return position_to_fen(build_position(red, blue, kings=kings, side=side))
