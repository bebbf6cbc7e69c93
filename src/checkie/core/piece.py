"""Piece record and its stable identifier."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.enums import Side
from checkie.core.types import Tile, to_coord, to_index

# Option slots: forward(-x), forward(+x), backward(-x), backward(+x).
SLOT_COUNT = 4


def _empty_slots() -> list[Tile | None]:
    return [None] * SLOT_COUNT


@dataclass(frozen=True, slots=True)
class PieceId:
    """Stable ``(side, index)`` handle resolved through a registry."""

    side: Side
    index: int

    def __str__(self) -> str:
        return f"{self.side}#{self.index}"


@dataclass(slots=True)
class Piece:
    """Mutable piece record, owned by its side's :class:`PieceRegistry`."""

    side: Side
    index: int
    x: int
    y: int
    is_king: bool = False
    in_play: bool = True
    must_jump: bool = False
    moves: list[Tile | None] = field(default_factory=_empty_slots)
    jumps: list[Tile | None] = field(default_factory=_empty_slots)

    @property
    def id(self) -> PieceId:
        return PieceId(self.side, self.index)

    @property
    def tile(self) -> Tile:
        tile = to_index(self.x, self.y)
        assert tile is not None
        return tile

    @property
    def symbol(self) -> str:
        """``r``/``b`` for men, ``R``/``B`` for kings."""
        s = self.side.symbol
        return s.upper() if self.is_king else s

    # ── Options ──────────────────────────────────────────────────────────

    def clear_options(self) -> None:
        self.must_jump = False
        self.moves = _empty_slots()
        self.jumps = _empty_slots()

    def legal_moves(self) -> tuple[Tile, ...]:
        return tuple(t for t in self.moves if t is not None)

    def legal_jumps(self) -> tuple[Tile, ...]:
        return tuple(t for t in self.jumps if t is not None)

    @property
    def can_move(self) -> bool:
        return any(t is not None for t in self.moves)

    # ── Mutation ─────────────────────────────────────────────────────────

    def place(self, tile: Tile) -> None:
        self.x, self.y = to_coord(tile)

    def crown(self) -> bool:
        """Promote; returns True only on the first promotion."""
        if self.is_king:
            return False
        self.is_king = True
        return True

    def remove(self) -> None:
        """Mark captured. Permanent."""
        self.in_play = False
        self.clear_options()
