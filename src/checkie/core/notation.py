"""Standard square numbering and the position text format.

Squares are the 32 dark tiles, numbered 1–32 starting on RED's home row
(row 7) and ending on BLUE's (row 0). RED starts on 1–12 and BLUE on
21–32, as the first mover does in published checkers notation.

A position is written ``<side>:<side><squares>:<side><squares>``, for
example ``R:R1,2,K14:B21,30``. ``K`` marks a king.
"""

from __future__ import annotations

from checkie.core.enums import Side
from checkie.core.position import Position
from checkie.core.registry import PIECES_PER_SIDE
from checkie.core.types import Tile, col_of, is_playable, row_of, to_index, validate_tile

SQUARE_COUNT = 32

_SIDE_CHARS: dict[str, Side] = {"R": Side.RED, "B": Side.BLUE}
_CHAR_OF: dict[Side, str] = {v: k for k, v in _SIDE_CHARS.items()}

STARTING_FEN = (
    "R:R1,2,3,4,5,6,7,8,9,10,11,12:B21,22,23,24,25,26,27,28,29,30,31,32"
)


def square_to_tile(square: int) -> Tile:
    """Tile index of numbered *square* (1–32)."""
    if not 1 <= square <= SQUARE_COUNT:
        raise ValueError(f"Invalid square number: {square!r}")
    row, k = divmod(square - 1, 4)
    y = 7 - row
    x = 7 - 2 * k - (1 if row % 2 == 0 else 0)
    tile = to_index(x, y)
    assert tile is not None
    return tile


def tile_to_square(tile: Tile) -> int | None:
    """Square number of *tile*, or ``None`` for a light tile."""
    validate_tile(tile)
    if not is_playable(tile):
        return None
    row = 7 - row_of(tile)
    k = (7 - col_of(tile) - (1 if row % 2 == 0 else 0)) // 2
    return 4 * row + k + 1


# ── Position text ────────────────────────────────────────────────────────────


def _parse_side_field(field: str, fen: str) -> tuple[Side, list[tuple[int, bool]]]:
    field = field.strip()
    if not field or field[0] not in _SIDE_CHARS:
        raise ValueError(f"Invalid piece field {field!r}: {fen!r}")
    side = _SIDE_CHARS[field[0]]
    entries: list[tuple[int, bool]] = []
    body = field[1:].strip()
    if not body:
        return side, entries
    for token in body.split(","):
        token = token.strip()
        is_king = token.startswith("K")
        digits = token[1:] if is_king else token
        if not digits.isdigit():
            raise ValueError(f"Invalid square {token!r}: {fen!r}")
        entries.append((int(digits), is_king))
    return side, entries


def position_from_fen(fen: str) -> Position:
    """Parse position text into a :class:`Position`.

    Capture counters start at zero: they count captures made from here on.
    """
    parts = fen.strip().split(":")
    if len(parts) != 3:
        raise ValueError(f"Invalid position (need 3 fields): {fen!r}")

    side_part = parts[0].strip()
    if side_part not in _SIDE_CHARS:
        raise ValueError(f"Invalid side-to-move field: {side_part!r}")
    pos = Position.empty(_SIDE_CHARS[side_part])

    seen_sides: set[Side] = set()
    for field in parts[1:]:
        side, entries = _parse_side_field(field, fen)
        if side in seen_sides:
            raise ValueError(f"Duplicate {side} field: {fen!r}")
        seen_sides.add(side)
        if len(entries) > PIECES_PER_SIDE:
            raise ValueError(f"Too many {side} pieces: {fen!r}")
        for square, is_king in entries:
            tile = square_to_tile(square)
            if not pos.board.is_empty(tile):
                raise ValueError(f"Square {square} listed twice: {fen!r}")
            # A man listed on its far row is a king already.
            crowned = is_king or row_of(tile) == side.crown_row
            pos.add_piece(side, tile, is_king=crowned)
    return pos


def position_to_fen(pos: Position) -> str:
    """Serialise the in-play pieces of *pos*."""
    fields = [_CHAR_OF[pos.side_to_move]]
    for side in (Side.RED, Side.BLUE):
        tokens: list[tuple[int, str]] = []
        for piece in pos.registry(side).in_play():
            square = tile_to_square(piece.tile)
            assert square is not None
            tokens.append((square, f"K{square}" if piece.is_king else str(square)))
        tokens.sort()
        fields.append(_CHAR_OF[side] + ",".join(text for _, text in tokens))
    return ":".join(fields)
