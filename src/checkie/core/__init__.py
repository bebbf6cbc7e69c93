"""Core domain layer — pure checkers rules with zero external dependencies.

Quick start::

    from checkie.core import MoveGenerator, Position, Side

    pos = Position.initial()
    no_forced_jumps = MoveGenerator(pos).compute_side(Side.RED)
    for piece in pos.registry(Side.RED).in_play():
        print(piece.id, piece.legal_moves())
"""

from checkie.core.board import Board
from checkie.core.enums import GameResult, Side
from checkie.core.errors import (
    CheckersError,
    IllegalDestination,
    IllegalSelection,
    InvalidTileIndex,
)
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import (
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
    square_to_tile,
    tile_to_square,
)
from checkie.core.piece import Piece, PieceId
from checkie.core.position import CaptureOutcome, Position
from checkie.core.registry import PIECES_PER_SIDE, PieceRegistry
from checkie.core.rules import Rules
from checkie.core.types import (
    NUM_TILES,
    Tile,
    is_playable,
    is_valid_tile,
    to_coord,
    to_index,
)

__all__ = [
    # Enums
    "GameResult",
    "Side",
    # Errors
    "CheckersError",
    "IllegalDestination",
    "IllegalSelection",
    "InvalidTileIndex",
    # Types / helpers
    "NUM_TILES",
    "PIECES_PER_SIDE",
    "Tile",
    "is_playable",
    "is_valid_tile",
    "to_coord",
    "to_index",
    # Domain objects
    "Board",
    "CaptureOutcome",
    "MoveGenerator",
    "Piece",
    "PieceId",
    "PieceRegistry",
    "Position",
    "Rules",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "square_to_tile",
    "tile_to_square",
]
