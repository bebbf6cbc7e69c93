"""Rule-variant configuration for a game."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from checkie.core.enums import Side


@dataclass(slots=True, frozen=True)
class GameConfig:
    """Immutable game settings.

    Args:
        starting_side: Side that moves first.
        chain_any_direction: While continuing a capture chain, a man may also
            capture along its backward diagonals.
        crowning_ends_chain: A man crowned by a capture stops there even if
            another capture is available.
        start_fen: Custom starting position in :mod:`checkie.core.notation`
            text; its side-to-move field wins over ``starting_side``.
    """

    starting_side: Side = Side.RED
    chain_any_direction: bool = True
    crowning_ends_chain: bool = False
    start_fen: str | None = None

    @classmethod
    def classic(cls) -> GameConfig:
        return cls()

    @classmethod
    def english(cls) -> GameConfig:
        """English draughts: men never capture backward; crowning ends the turn."""
        return cls(chain_any_direction=False, crowning_ends_chain=True)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GameConfig:
        """Build from a settings mapping; ``starting_side`` may be a name."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown game settings: {sorted(unknown)}")
        values = dict(data)
        side = values.get("starting_side")
        if isinstance(side, str):
            try:
                values["starting_side"] = Side[side.upper()]
            except KeyError:
                raise ValueError(f"Invalid starting side: {side!r}") from None
        elif side is not None:
            values["starting_side"] = Side(side)
        return cls(**values)
