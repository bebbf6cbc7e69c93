"""Board - tile occupancy on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from checkie.core.enums import Side
from checkie.core.piece import PieceId
from checkie.core.types import NUM_TILES, Tile


class Board:
    """Mutable 64-tile grid of piece references.

    A tile holds the :class:`PieceId` of its occupant (side + registry
    index) or ``None``. Piece attributes live in the registries.
    """

    __slots__ = ("_tiles", "_occupied")

    def __init__(self) -> None:
        self._tiles: list[PieceId | None] = [None] * NUM_TILES
        # [side] -> set of occupied tiles for that side.
        self._occupied: tuple[set[Tile], set[Tile]] = (set(), set())

    # -- Element access -----------------------------------------------------

    def __getitem__(self, tile: Tile) -> PieceId | None:
        return self._tiles[tile]

    def __setitem__(self, tile: Tile, occupant: PieceId | None) -> None:
        old = self._tiles[tile]
        if old == occupant:
            return
        if old is not None:
            self._occupied[int(old.side)].discard(tile)
        self._tiles[tile] = occupant
        if occupant is not None:
            self._occupied[int(occupant.side)].add(tile)

    def __iter__(self) -> Iterator[PieceId | None]:
        return iter(self._tiles)

    def is_empty(self, tile: Tile) -> bool:
        return self._tiles[tile] is None

    def occupant_side(self, tile: Tile) -> Side | None:
        occupant = self._tiles[tile]
        return None if occupant is None else occupant.side

    # -- Query helpers ------------------------------------------------------

    def tiles_of(self, side: Side) -> list[Tile]:
        """Tiles occupied by *side*, ascending."""
        return sorted(self._occupied[int(side)])

    def count(self, side: Side) -> int:
        return len(self._occupied[int(side)])

    # -- Mutation / copying -------------------------------------------------

    def relocate(self, from_tile: Tile, to_tile: Tile) -> None:
        occupant = self._tiles[from_tile]
        self[from_tile] = None
        self[to_tile] = occupant

    def copy(self) -> Board:
        b = Board()
        b._tiles = self._tiles.copy()
        b._occupied = (set(self._occupied[0]), set(self._occupied[1]))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(8):
            row = []
            for x in range(8):
                occupant = self._tiles[y * 8 + x]
                row.append(occupant.side.symbol if occupant else ".")
            rows.append(f"{y} {' '.join(row)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
