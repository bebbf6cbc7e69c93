"""Immutable board views handed to rendering collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from checkie.core.enums import Side
from checkie.core.piece import PieceId
from checkie.core.types import Tile
from checkie.game.interfaces import GamePhase

if TYPE_CHECKING:
    from checkie.core.piece import Piece
    from checkie.core.position import Position


@dataclass(frozen=True, slots=True)
class PieceView:
    id: PieceId
    x: int
    y: int
    is_king: bool
    in_play: bool
    must_jump: bool
    moves: tuple[Tile | None, ...]
    jumps: tuple[Tile | None, ...]

    @classmethod
    def of(cls, piece: Piece) -> PieceView:
        return cls(
            id=piece.id,
            x=piece.x,
            y=piece.y,
            is_king=piece.is_king,
            in_play=piece.in_play,
            must_jump=piece.must_jump,
            moves=tuple(piece.moves),
            jumps=tuple(piece.jumps),
        )

    @property
    def side(self) -> Side:
        return self.id.side

    @property
    def tile(self) -> Tile:
        return self.y * 8 + self.x


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Board + pieces + turn flags at one instant."""

    tiles: tuple[PieceId | None, ...]
    red: tuple[PieceView, ...]
    blue: tuple[PieceView, ...]
    side_to_move: Side
    phase: GamePhase
    active_piece: PieceId | None
    no_forced_jumps: bool
    red_captured: int
    blue_captured: int
    winner: Side | None = None

    @classmethod
    def capture(
        cls,
        position: Position,
        *,
        phase: GamePhase,
        active_piece: PieceId | None,
        no_forced_jumps: bool,
        winner: Side | None,
    ) -> BoardSnapshot:
        return cls(
            tiles=tuple(position.board),
            red=tuple(PieceView.of(p) for p in position.registry(Side.RED)),
            blue=tuple(PieceView.of(p) for p in position.registry(Side.BLUE)),
            side_to_move=position.side_to_move,
            phase=phase,
            active_piece=active_piece,
            no_forced_jumps=no_forced_jumps,
            red_captured=position.captured[Side.RED],
            blue_captured=position.captured[Side.BLUE],
            winner=winner,
        )

    def pieces(self, side: Side) -> tuple[PieceView, ...]:
        return self.red if side is Side.RED else self.blue

    def piece_at(self, tile: Tile) -> PieceView | None:
        occupant = self.tiles[tile]
        if occupant is None:
            return None
        return self.pieces(occupant.side)[occupant.index]
