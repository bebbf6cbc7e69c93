"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """One of the two players.

    RED starts on rows 5–7 and travels toward row 0; BLUE starts on rows
    0–2 and travels toward row 7.
    """

    RED = 0
    BLUE = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a forward step."""
        return -1 if self is Side.RED else 1

    @property
    def home_row(self) -> int:
        return 7 if self is Side.RED else 0

    @property
    def crown_row(self) -> int:
        """Far back rank; landing here promotes a man."""
        return 0 if self is Side.RED else 7

    @property
    def symbol(self) -> str:
        return "r" if self is Side.RED else "b"

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    RED_WINS = 1
    BLUE_WINS = 2

    @classmethod
    def win_for(cls, side: Side) -> GameResult:
        return cls.RED_WINS if side is Side.RED else cls.BLUE_WINS

    @property
    def winner(self) -> Side | None:
        if self == GameResult.RED_WINS:
            return Side.RED
        if self == GameResult.BLUE_WINS:
            return Side.BLUE
        return None
