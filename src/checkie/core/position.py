"""Position — board + piece registries + side to move + capture counters."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.piece import Piece, PieceId
from checkie.core.registry import PieceRegistry
from checkie.core.rules import Rules
from checkie.core.types import Tile, to_coord, to_index


@dataclass(frozen=True, slots=True)
class CaptureOutcome:
    """What a single capture changed."""

    removed_tile: Tile
    removed_piece: PieceId
    promoted: bool
    dead_count: int  # victims taken so far by the capturing side


class Position:
    """Complete rules state of a checkers game.

    The board only references pieces; the two registries own them. All
    mutation goes through :meth:`move_piece` and :meth:`capture_piece`,
    which keep tiles and piece coordinates in step. Callers validate
    legality first.
    """

    __slots__ = ("board", "registries", "side_to_move", "captured")

    def __init__(
        self,
        board: Board | None = None,
        registries: dict[Side, PieceRegistry] | None = None,
        side_to_move: Side = Side.RED,
        captured: dict[Side, int] | None = None,
    ) -> None:
        self.board = board if board is not None else Board()
        self.registries = (
            registries
            if registries is not None
            else {side: PieceRegistry(side) for side in Side}
        )
        self.side_to_move = side_to_move
        # [side] -> opponent pieces that side has captured.
        self.captured = captured if captured is not None else dict.fromkeys(Side, 0)

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def initial(cls, side_to_move: Side = Side.RED) -> Position:
        """Standard starting arrangement, twelve men per side."""
        pos = cls(
            registries={side: PieceRegistry.initial(side) for side in Side},
            side_to_move=side_to_move,
        )
        for registry in pos.registries.values():
            for piece in registry:
                pos.board[piece.tile] = piece.id
        return pos

    @classmethod
    def empty(cls, side_to_move: Side = Side.RED) -> Position:
        return cls(side_to_move=side_to_move)

    def add_piece(self, side: Side, tile: Tile, *, is_king: bool = False) -> Piece:
        """Place a new piece for custom setups."""
        if not self.board.is_empty(tile):
            raise ValueError(f"Tile {tile} is already occupied")
        x, y = to_coord(tile)
        piece = self.registries[side].add(x, y, is_king=is_king)
        self.board[tile] = piece.id
        return piece

    # ── Lookups ──────────────────────────────────────────────────────────

    def registry(self, side: Side) -> PieceRegistry:
        return self.registries[side]

    def piece(self, piece_id: PieceId) -> Piece:
        return self.registries[piece_id.side][piece_id.index]

    def piece_at(self, tile: Tile) -> Piece | None:
        occupant = self.board[tile]
        return None if occupant is None else self.piece(occupant)

    def lost(self, side: Side) -> int:
        """How many of *side*'s pieces have been captured."""
        return self.captured[side.opposite]

    # ── Mutation ─────────────────────────────────────────────────────────

    def move_piece(self, piece: Piece, dest: Tile) -> bool:
        """Relocate *piece* to *dest*; returns True if it was crowned."""
        self.board.relocate(piece.tile, dest)
        piece.place(dest)
        if Rules.is_crown_row(piece.y):
            return piece.crown()
        return False

    def capture_piece(self, piece: Piece, dest: Tile) -> CaptureOutcome:
        """Jump *piece* to *dest*, removing the opponent on the midpoint."""
        dx, dy = to_coord(dest)
        mid = to_index((piece.x + dx) // 2, (piece.y + dy) // 2)
        victim_id = self.board[mid] if mid is not None else None
        if mid is None or victim_id is None or victim_id.side == piece.side:
            raise ValueError(f"No opposing piece between {piece.tile} and {dest}")

        victim = self.piece(victim_id)
        self.board[mid] = None
        victim.remove()
        self.captured[piece.side] += 1

        promoted = self.move_piece(piece, dest)
        return CaptureOutcome(
            removed_tile=mid,
            removed_piece=victim_id,
            promoted=promoted,
            dead_count=self.captured[piece.side],
        )

    def switch_side(self) -> Side:
        self.side_to_move = self.side_to_move.opposite
        return self.side_to_move

    def copy(self) -> Position:
        return Position(
            self.board.copy(),
            {side: reg.copy() for side, reg in self.registries.items()},
            self.side_to_move,
            dict(self.captured),
        )

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(8):
            row = []
            for x in range(8):
                tile = y * 8 + x
                piece = self.piece_at(tile)
                row.append(piece.symbol if piece else ".")
            rows.append(f"{y} {' '.join(row)}")
        rows.append("  0 1 2 3 4 5 6 7")
        rows.append(
            f"to move: {self.side_to_move}  "
            f"captured: red={self.captured[Side.RED]} blue={self.captured[Side.BLUE]}"
        )
        return "\n".join(rows)
