"""Game state aggregate — position, FSM phase, active piece and history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from checkie.core.enums import GameResult, Side
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import position_from_fen
from checkie.core.piece import Piece, PieceId
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.core.types import Tile
from checkie.game.config import GameConfig
from checkie.game.interfaces import GamePhase, MoveKind
from checkie.game.snapshot import BoardSnapshot

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single step (simple move or one capture) in the history."""

    piece: PieceId
    from_tile: Tile
    to_tile: Tile
    kind: MoveKind
    removed_tile: Tile | None = None
    promoted: bool = False


@dataclass
class GameState:
    """Everything the turn controller owns, passed around explicitly.

    This is a pure data/logic class — no threading, no UI.
    """

    config: GameConfig = field(default_factory=GameConfig)
    position: Position = field(init=False)
    phase: GamePhase = field(default=GamePhase.SETUP, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    active: PieceId | None = field(default=None, init=False)
    locked: bool = field(default=False, init=False)  # mid capture chain
    no_forced_jumps: bool = field(default=True, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.position = Position.empty(self.config.starting_side)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self) -> None:
        """(Re)build board and registries from the config; phase SETUP."""
        if self.config.start_fen:
            self.position = position_from_fen(self.config.start_fen)
        else:
            self.position = Position.initial(self.config.starting_side)
        self.phase = GamePhase.SETUP
        self.result = GameResult.IN_PROGRESS
        self.active = None
        self.locked = False
        self.no_forced_jumps = True
        self.move_history.clear()

    # ── Turn boundaries ──────────────────────────────────────────────────

    def begin_turn(self) -> bool:
        """Recompute the side to move; returns whether it can play at all."""
        side = self.side_to_move
        MoveGenerator(self.position).clear_side(side.opposite)
        outcome = Rules.game_result(self.position)
        self.no_forced_jumps = not any(
            piece.must_jump for piece in self.position.registry(side).in_play()
        )
        self.active = None
        self.locked = False
        return outcome is GameResult.IN_PROGRESS

    def declare_winner(self, side: Side) -> None:
        self.result = GameResult.win_for(side)
        self.phase = GamePhase.GAME_OVER
        self.active = None
        self.locked = False

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Side:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Side | None:
        return self.result.winner

    @property
    def active_piece(self) -> Piece | None:
        if self.active is None:
            return None
        return self.position.piece(self.active)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot.capture(
            self.position,
            phase=self.phase,
            active_piece=self.active,
            no_forced_jumps=self.no_forced_jumps,
            winner=self.winner,
        )

    def log_board(self) -> None:
        _LOGGER.debug("Board:\n%r", self.position)
