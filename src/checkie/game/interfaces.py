"""Game-layer state enums, result records and the controller interface.

The high-level :class:`~checkie.game.controller.TurnController` implements
:class:`IGameController`; UI, audio and input collaborators only ever see
the result records defined here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Side
from checkie.core.piece import PieceId
from checkie.core.types import Tile

if TYPE_CHECKING:
    from checkie.game.config import GameConfig
    from checkie.game.snapshot import BoardSnapshot


# ── Turn controller FSM states ───────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of the turn controller."""

    SETUP = auto()
    AWAITING_SELECTION = auto()
    AWAITING_DESTINATION = auto()
    TURN_END = auto()
    GAME_OVER = auto()


class MoveKind(IntEnum):
    """Outcome of a destination choice."""

    REJECTED = auto()
    MOVED = auto()
    CAPTURED = auto()
    CAPTURED_CHAIN_CONTINUES = auto()
    TURN_ENDED = auto()  # capture whose chain was cut short by crowning
    GAME_OVER = auto()


# ── Result records ───────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Answer to a tile selection."""

    accepted: bool
    active_piece: PieceId | None = None
    legal_destinations: tuple[Tile, ...] = ()
    forced: bool = False  # destinations are captures
    error: str | None = None

    @classmethod
    def rejected(cls, error: str) -> SelectionResult:
        return cls(accepted=False, error=error)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Answer to a destination choice.

    ``dead_count`` is the capturing side's running total of victims, which a
    graveyard display uses to place the removed piece.
    """

    kind: MoveKind
    piece: PieceId | None = None
    from_tile: Tile | None = None
    to_tile: Tile | None = None
    removed_tile: Tile | None = None
    removed_piece: PieceId | None = None
    promoted: bool = False
    dead_count: int | None = None
    next_side: Side | None = None
    winner: Side | None = None
    error: str | None = None

    @classmethod
    def rejected(cls, error: str) -> MoveResult:
        return cls(kind=MoveKind.REJECTED, error=error)

    @property
    def accepted(self) -> bool:
        return self.kind != MoveKind.REJECTED

    @property
    def is_capture(self) -> bool:
        return self.removed_tile is not None

    @property
    def chain_continues(self) -> bool:
        return self.kind == MoveKind.CAPTURED_CHAIN_CONTINUES


# ── Abstract interface ──────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the turn orchestrator."""

    @abstractmethod
    def start_game(self, config: GameConfig | None = None) -> BoardSnapshot:
        """Reset to the starting position and return the board."""

    @abstractmethod
    def select_tile(self, tile: int) -> SelectionResult:
        """Nominate the piece to move."""

    @abstractmethod
    def choose_destination(self, tile: int) -> MoveResult:
        """Nominate where the active piece goes."""

    @abstractmethod
    def query_board(self) -> BoardSnapshot:
        """Read-only view for rendering. Never mutates."""
