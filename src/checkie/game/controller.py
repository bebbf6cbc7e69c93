"""TurnController — the central orchestrator of a checkers game.

Coordinates: GameState, MoveGenerator, Rules.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.enums import Side
from checkie.core.errors import CheckersError, InvalidTileIndex
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.rules import Rules
from checkie.core.types import Tile, validate_tile
from checkie.game.config import GameConfig
from checkie.game.interfaces import (
    GamePhase,
    IGameController,
    MoveKind,
    MoveResult,
    SelectionResult,
)
from checkie.game.snapshot import BoardSnapshot
from checkie.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveResult, GameState], None]
TurnCallback = Callable[[Side], None]  # side now to move
GameOverCallback = Callable[[Side], None]  # winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController(IGameController):
    """Drives the selection → destination → turn-end cycle.

    Each public call processes one input event to completion, including any
    turn switch and win check, and never leaves a half-applied move behind:
    every validation happens before the first mutation.

    Thread-safety: methods are designed to be called from a single thread.
    """

    __slots__ = ("_state", "events")

    def __init__(self, config: GameConfig | None = None) -> None:
        self._state = GameState(config or GameConfig())
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._state.config

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def side_to_move(self) -> Side:
        return self._state.side_to_move

    # ── IGameController impl ─────────────────────────────────────────────

    def start_game(self, config: GameConfig | None = None) -> BoardSnapshot:
        self._state = GameState(config or self._state.config)
        state = self._state
        state.setup()
        self._emit_phase(GamePhase.SETUP)
        _LOGGER.info("New game, %s to move", state.side_to_move)

        if state.begin_turn():
            self._set_phase(GamePhase.AWAITING_SELECTION)
        else:
            # Custom positions can start with the mover already blocked.
            self._finish(state.side_to_move.opposite)
            self._emit_game_over()
        return state.snapshot()

    def reset(self) -> BoardSnapshot:
        """Back to SETUP with the current config."""
        return self.start_game()

    def select_tile(self, tile: int) -> SelectionResult:
        state = self._state
        if state.phase != GamePhase.AWAITING_SELECTION:
            return SelectionResult.rejected(
                f"Cannot select a piece while {state.phase.name.lower()}"
            )
        try:
            piece = Rules.check_selection(state.position, tile, state.no_forced_jumps)
        except CheckersError as exc:
            _LOGGER.debug("Selection rejected: %s", exc)
            return SelectionResult.rejected(str(exc))

        state.active = piece.id
        self._set_phase(GamePhase.AWAITING_DESTINATION)
        _LOGGER.debug("Selected %s on tile %d", piece.id, tile)
        return self._selection_for(piece)

    def choose_destination(self, tile: int) -> MoveResult:
        state = self._state
        if state.phase != GamePhase.AWAITING_DESTINATION:
            return MoveResult.rejected(
                f"No piece selected while {state.phase.name.lower()}"
            )
        piece = state.active_piece
        assert piece is not None

        try:
            validate_tile(tile)
        except InvalidTileIndex as exc:
            return MoveResult.rejected(str(exc))

        try:
            dest = Rules.check_destination(piece, tile, state.no_forced_jumps)
        except CheckersError as exc:
            if state.locked:
                _LOGGER.debug("Chain continuation rejected: %s", exc)
            else:
                _LOGGER.debug("Destination rejected, selection cancelled: %s", exc)
                state.active = None
                self._set_phase(GamePhase.AWAITING_SELECTION)
            return MoveResult.rejected(str(exc))

        if state.no_forced_jumps:
            result = self._play_move(piece, dest)
        else:
            result = self._play_capture(piece, dest)

        self._emit_move(result)
        if state.is_game_over:
            self._emit_game_over()
        return result

    def query_board(self) -> BoardSnapshot:
        return self._state.snapshot()

    # ── Extra queries / commands ─────────────────────────────────────────

    def cancel_selection(self) -> bool:
        """Drop the active piece. Refused in the middle of a capture chain."""
        state = self._state
        if state.phase != GamePhase.AWAITING_DESTINATION or state.locked:
            return False
        state.active = None
        self._set_phase(GamePhase.AWAITING_SELECTION)
        return True

    def current_selection(self) -> SelectionResult | None:
        piece = self._state.active_piece
        return None if piece is None else self._selection_for(piece)

    def selectable_tiles(self) -> tuple[Tile, ...]:
        """Tiles the side to move may currently pick up."""
        state = self._state
        if state.phase != GamePhase.AWAITING_SELECTION:
            return ()
        tiles: list[Tile] = []
        for piece in state.position.registry(state.side_to_move).in_play():
            ok = piece.can_move if state.no_forced_jumps else piece.must_jump
            if ok:
                tiles.append(piece.tile)
        return tuple(sorted(tiles))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _selection_for(self, piece: Piece) -> SelectionResult:
        no_forced_jumps = self._state.no_forced_jumps
        return SelectionResult(
            accepted=True,
            active_piece=piece.id,
            legal_destinations=Rules.legal_destinations(piece, no_forced_jumps),
            forced=not no_forced_jumps,
        )

    def _play_move(self, piece: Piece, dest: Tile) -> MoveResult:
        state = self._state
        from_tile = piece.tile
        promoted = state.position.move_piece(piece, dest)
        state.move_history.append(
            MoveRecord(piece.id, from_tile, dest, MoveKind.MOVED, promoted=promoted)
        )
        _LOGGER.debug(
            "%s moved %d -> %d%s",
            piece.id,
            from_tile,
            dest,
            " (crowned)" if promoted else "",
        )

        winner = self._end_turn()
        return MoveResult(
            kind=MoveKind.GAME_OVER if winner is not None else MoveKind.MOVED,
            piece=piece.id,
            from_tile=from_tile,
            to_tile=dest,
            promoted=promoted,
            next_side=None if winner is not None else state.side_to_move,
            winner=winner,
        )

    def _play_capture(self, piece: Piece, dest: Tile) -> MoveResult:
        state = self._state
        config = state.config
        position = state.position
        from_tile = piece.tile
        outcome = position.capture_piece(piece, dest)
        state.move_history.append(
            MoveRecord(
                piece.id,
                from_tile,
                dest,
                MoveKind.CAPTURED,
                removed_tile=outcome.removed_tile,
                promoted=outcome.promoted,
            )
        )
        _LOGGER.debug(
            "%s captured %s on %d, landing on %d",
            piece.id,
            outcome.removed_piece,
            outcome.removed_tile,
            dest,
        )

        gen = MoveGenerator(position)
        gen.compute_side(piece.side)
        can_continue = gen.compute_piece(piece, all_directions=config.chain_any_direction)

        kind = MoveKind.CAPTURED
        winner = None
        if can_continue and outcome.promoted and config.crowning_ends_chain:
            kind = MoveKind.TURN_ENDED
            winner = self._end_turn()
        elif can_continue:
            kind = MoveKind.CAPTURED_CHAIN_CONTINUES
            state.locked = True
            _LOGGER.debug("%s must keep capturing: %s", piece.id, piece.legal_jumps())
        else:
            winner = self._end_turn()

        if winner is not None:
            kind = MoveKind.GAME_OVER
        return MoveResult(
            kind=kind,
            piece=piece.id,
            from_tile=from_tile,
            to_tile=dest,
            removed_tile=outcome.removed_tile,
            removed_piece=outcome.removed_piece,
            promoted=outcome.promoted,
            dead_count=outcome.dead_count,
            next_side=None if winner is not None else state.side_to_move,
            winner=winner,
        )

    def _end_turn(self) -> Side | None:
        """Flip the side to move; returns the winner if the game ended."""
        state = self._state
        self._set_phase(GamePhase.TURN_END)
        mover = state.side_to_move
        state.position.switch_side()

        if not state.begin_turn():
            self._finish(mover)
            return mover

        _LOGGER.debug(
            "%s to move, %s",
            state.side_to_move,
            "free choice" if state.no_forced_jumps else "capture forced",
        )
        for cb in self.events.on_turn_changed:
            cb(state.side_to_move)
        self._set_phase(GamePhase.AWAITING_SELECTION)
        return None

    def _finish(self, winner: Side) -> None:
        state = self._state
        state.declare_winner(winner)
        _LOGGER.info("Game over, %s wins", winner)
        state.log_board()

    def _set_phase(self, phase: GamePhase) -> None:
        self._state.phase = phase
        self._emit_phase(phase)

    def _emit_move(self, result: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(result, self._state)

    def _emit_game_over(self) -> None:
        winner = self._state.winner
        assert winner is not None
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
