"""Simple-move and capture generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Side
from checkie.core.types import to_index

if TYPE_CHECKING:
    from checkie.core.piece import Piece
    from checkie.core.position import Position


# (dx, forward multiplier) per option slot; slot order matches Piece.moves.
FORWARD_SLOTS: tuple[tuple[int, int], ...] = ((-1, 1), (1, 1))
BACKWARD_SLOTS: tuple[tuple[int, int], ...] = ((-1, -1), (1, -1))
ALL_SLOTS: tuple[tuple[int, int], ...] = FORWARD_SLOTS + BACKWARD_SLOTS


class MoveGenerator:
    """Fills in the ``moves`` / ``jumps`` slots of pieces in a :class:`Position`.

    Options are always rebuilt from scratch: every compute call clears the
    piece first so nothing stale survives a board mutation.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def compute_side(self, side: Side) -> bool:
        """Recompute every in-play piece of *side*.

        Returns ``no_forced_jumps``: True iff no piece of *side* can capture.
        """
        no_forced_jumps = True
        for piece in self._pos.registry(side):
            if self.compute_piece(piece):
                no_forced_jumps = False
        return no_forced_jumps

    def compute_piece(self, piece: Piece, *, all_directions: bool = False) -> bool:
        """Rebuild *piece*'s options; returns its ``must_jump``.

        ``all_directions`` lets a man look for captures on the backward
        diagonals too. It is only meant for the continuation of a capture
        chain, never for ordinary turns.
        """
        piece.clear_options()
        if not piece.in_play:
            return False
        self._gen_moves(piece)
        self._gen_jumps(piece, all_directions)
        return piece.must_jump

    def clear_side(self, side: Side) -> None:
        for piece in self._pos.registry(side):
            piece.clear_options()

    @staticmethod
    def slots_for(piece: Piece, all_directions: bool = False) -> tuple[tuple[int, int], ...]:
        if piece.is_king or all_directions:
            return ALL_SLOTS
        return FORWARD_SLOTS

    # -- Generators ---------------------------------------------------------

    def _gen_moves(self, piece: Piece) -> None:
        board = self._board
        fwd = piece.side.forward
        for slot, (dx, sign) in enumerate(self.slots_for(piece)):
            target = to_index(piece.x + dx, piece.y + sign * fwd)
            if target is not None and board.is_empty(target):
                piece.moves[slot] = target

    def _gen_jumps(self, piece: Piece, all_directions: bool) -> None:
        board = self._board
        fwd = piece.side.forward
        opponent = piece.side.opposite
        for slot, (dx, sign) in enumerate(self.slots_for(piece, all_directions)):
            dy = sign * fwd
            over = to_index(piece.x + dx, piece.y + dy)
            if over is None or board.occupant_side(over) is not opponent:
                continue
            landing = to_index(piece.x + 2 * dx, piece.y + 2 * dy)
            if landing is not None and board.is_empty(landing):
                piece.jumps[slot] = landing
                piece.must_jump = True
