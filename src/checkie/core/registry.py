"""Per-side piece collection."""

from __future__ import annotations

from collections.abc import Iterator

from checkie.core.enums import Side
from checkie.core.piece import Piece

PIECES_PER_SIDE = 12


class PieceRegistry:
    """Fixed-capacity collection of one side's pieces.

    Registry indices are stable for the lifetime of a game; captured pieces
    stay in place with ``in_play = False``.
    """

    __slots__ = ("side", "_pieces")

    def __init__(self, side: Side) -> None:
        self.side = side
        self._pieces: list[Piece] = []

    def __getitem__(self, index: int) -> Piece:
        return self._pieces[index]

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def add(self, x: int, y: int, *, is_king: bool = False) -> Piece:
        if len(self._pieces) >= PIECES_PER_SIDE:
            raise ValueError(f"{self.side} already has {PIECES_PER_SIDE} pieces")
        piece = Piece(self.side, len(self._pieces), x, y, is_king=is_king)
        self._pieces.append(piece)
        return piece

    def in_play(self) -> list[Piece]:
        return [p for p in self._pieces if p.in_play]

    @property
    def in_play_count(self) -> int:
        return sum(1 for p in self._pieces if p.in_play)

    def copy(self) -> PieceRegistry:
        r = PieceRegistry(self.side)
        r._pieces = [
            Piece(
                p.side,
                p.index,
                p.x,
                p.y,
                is_king=p.is_king,
                in_play=p.in_play,
                must_jump=p.must_jump,
                moves=list(p.moves),
                jumps=list(p.jumps),
            )
            for p in self._pieces
        ]
        return r

    @classmethod
    def initial(cls, side: Side) -> PieceRegistry:
        """Twelve men on the dark tiles of *side*'s three home rows.

        Index 0 sits on the home row; indices grow toward the centre.
        """
        r = cls(side)
        for i in range(PIECES_PER_SIDE):
            y = side.home_row + side.forward * (i // 4)
            x = 2 * (i % 4) + (y + 1) % 2
            r.add(x, y)
        return r

    def __repr__(self) -> str:
        return f"PieceRegistry({self.side}, in_play={self.in_play_count})"
