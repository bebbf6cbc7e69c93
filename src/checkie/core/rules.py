"""High-level checkers rules: selection/destination checks, win detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import GameResult, Side
from checkie.core.errors import IllegalDestination, IllegalSelection
from checkie.core.move_generator import MoveGenerator
from checkie.core.types import BOARD_SIZE, Tile, validate_tile

if TYPE_CHECKING:
    from checkie.core.piece import Piece
    from checkie.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Capture is mandatory: while any piece of the side to move can jump,
    only jumping pieces may be selected and only jumps are offered.
    """

    @staticmethod
    def is_crown_row(y: int) -> bool:
        """Rows 0 and 7 both crown, including a home row reached mid-chain."""
        return y in (0, BOARD_SIZE - 1)

    @staticmethod
    def side_has_move(position: Position, side: Side) -> bool:
        """Any in-play piece of *side* with a simple move or a capture.

        Reads the options already computed for *side*.
        """
        return any(
            piece.can_move or piece.must_jump
            for piece in position.registry(side).in_play()
        )

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Recompute the side to move and decide whether it has lost."""
        side = position.side_to_move
        MoveGenerator(position).compute_side(side)
        if Rules.side_has_move(position, side):
            return GameResult.IN_PROGRESS
        return GameResult.win_for(side.opposite)

    @staticmethod
    def legal_destinations(piece: Piece, no_forced_jumps: bool) -> tuple[Tile, ...]:
        return piece.legal_moves() if no_forced_jumps else piece.legal_jumps()

    @staticmethod
    def check_selection(position: Position, tile: object, no_forced_jumps: bool) -> Piece:
        """Return the piece on *tile* if the side to move may pick it up."""
        tile = validate_tile(tile)
        piece = position.piece_at(tile)
        side = position.side_to_move
        if piece is None:
            raise IllegalSelection(f"Tile {tile} is empty")
        if piece.side is not side:
            raise IllegalSelection(f"Tile {tile} holds a {piece.side} piece; {side} to move")
        if not piece.in_play:
            raise IllegalSelection(f"Piece {piece.id} is no longer in play")
        if no_forced_jumps:
            if not piece.can_move:
                raise IllegalSelection(f"Piece on tile {tile} has no move")
        elif not piece.must_jump:
            raise IllegalSelection(f"A capture is mandatory; piece on tile {tile} cannot jump")
        return piece

    @staticmethod
    def check_destination(piece: Piece, tile: object, no_forced_jumps: bool) -> Tile:
        tile = validate_tile(tile)
        if tile not in Rules.legal_destinations(piece, no_forced_jumps):
            kind = "move" if no_forced_jumps else "jump"
            raise IllegalDestination(f"Tile {tile} is not a legal {kind} for {piece.id}")
        return tile
