"""Qt bridge exposing the turn controller to a Qt UI layer."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.game.controller import TurnController


class GameBridge(QObject):
    """Slot-driven wrapper that re-publishes controller results as signals.

    The input layer connects its "tile chosen" signals to :meth:`select_tile`
    and :meth:`choose_destination`; renderers and sound players listen to the
    outgoing signals. Everything runs on the thread the bridge lives in.
    """

    board_changed = pyqtSignal(object)  # BoardSnapshot
    selection_made = pyqtSignal(object)  # SelectionResult
    selection_rejected = pyqtSignal(int, str)
    move_made = pyqtSignal(object)  # MoveResult
    move_rejected = pyqtSignal(int, str)
    piece_captured = pyqtSignal(int, int, object)  # tile, dead count, capturing side
    piece_promoted = pyqtSignal(int)
    turn_changed = pyqtSignal(object)  # Side now to move
    game_over = pyqtSignal(object)  # winning Side

    def __init__(
        self,
        controller: TurnController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller if controller is not None else TurnController()

    @property
    def controller(self) -> TurnController:
        return self._controller

    @pyqtSlot()
    def start_game(self) -> None:
        snapshot = self._controller.start_game()
        self.board_changed.emit(snapshot)
        if snapshot.winner is not None:
            self.game_over.emit(snapshot.winner)
        else:
            self.turn_changed.emit(snapshot.side_to_move)

    @pyqtSlot()
    def reset(self) -> None:
        self.start_game()

    @pyqtSlot(int)
    def select_tile(self, tile: int) -> None:
        result = self._controller.select_tile(tile)
        if result.accepted:
            self.selection_made.emit(result)
        else:
            self.selection_rejected.emit(tile, result.error or "")

    @pyqtSlot(int)
    def choose_destination(self, tile: int) -> None:
        result = self._controller.choose_destination(tile)
        if not result.accepted:
            self.move_rejected.emit(tile, result.error or "")
            return

        self.move_made.emit(result)
        if result.removed_tile is not None and result.piece is not None:
            self.piece_captured.emit(
                result.removed_tile,
                result.dead_count or 0,
                result.piece.side,
            )
        if result.promoted and result.to_tile is not None:
            self.piece_promoted.emit(result.to_tile)
        self.board_changed.emit(self._controller.query_board())

        if result.winner is not None:
            self.game_over.emit(result.winner)
        elif result.next_side is not None and not result.chain_continues:
            self.turn_changed.emit(result.next_side)
