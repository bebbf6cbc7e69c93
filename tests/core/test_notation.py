"""Tests for square numbering and position text."""

import pytest

from checkie.core.enums import Side
from checkie.core.errors import InvalidTileIndex
from checkie.core.notation import (
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
    square_to_tile,
    tile_to_square,
)
from checkie.core.position import Position
from checkie.core.types import is_playable


class TestSquareNumbers:
    def test_known_squares(self) -> None:
        assert square_to_tile(1) == 62
        assert square_to_tile(9) == 46
        assert square_to_tile(13) == 39
        assert square_to_tile(32) == 1

    def test_every_square_is_a_dark_tile(self) -> None:
        tiles = {square_to_tile(n) for n in range(1, 33)}
        assert len(tiles) == 32
        assert all(is_playable(t) for t in tiles)

    def test_inverse(self) -> None:
        for n in range(1, 33):
            assert tile_to_square(square_to_tile(n)) == n

    def test_light_tile_has_no_number(self) -> None:
        assert tile_to_square(0) is None

    @pytest.mark.parametrize("square", [0, 33, -4])
    def test_invalid_square(self, square: int) -> None:
        with pytest.raises(ValueError):
            square_to_tile(square)

    def test_invalid_tile(self) -> None:
        with pytest.raises(InvalidTileIndex):
            tile_to_square(64)


class TestPositionText:
    def test_starting_fen_matches_initial_layout(self) -> None:
        parsed = position_from_fen(STARTING_FEN)
        initial = Position.initial()
        for side in Side:
            assert parsed.board.tiles_of(side) == initial.board.tiles_of(side)
        assert parsed.side_to_move == Side.RED

    def test_initial_serialises_to_starting_fen(self) -> None:
        assert position_to_fen(Position.initial()) == STARTING_FEN

    def test_kings_and_side(self) -> None:
        pos = position_from_fen("B:RK14:B5,K30")
        assert pos.side_to_move == Side.BLUE
        red = pos.piece_at(square_to_tile(14))
        blue_man = pos.piece_at(square_to_tile(5))
        blue_king = pos.piece_at(square_to_tile(30))
        assert red is not None and red.is_king and red.side == Side.RED
        assert blue_man is not None and not blue_man.is_king
        assert blue_king is not None and blue_king.is_king

    def test_round_trip_text(self) -> None:
        text = "B:R3,K14,20:BK1,5,30"
        assert position_to_fen(position_from_fen(text)) == text

    def test_capture_counters_start_at_zero(self) -> None:
        pos = position_from_fen("R:R1,2:B32")
        assert pos.captured[Side.RED] == 0
        assert pos.captured[Side.BLUE] == 0

    def test_man_on_far_row_loads_as_king(self) -> None:
        pos = position_from_fen("R:R1,30:B3,31")
        assert pos.piece_at(square_to_tile(30)).is_king  # type: ignore[union-attr]
        assert pos.piece_at(square_to_tile(3)).is_king  # type: ignore[union-attr]
        # Home-row men stay men.
        assert not pos.piece_at(square_to_tile(1)).is_king  # type: ignore[union-attr]
        assert not pos.piece_at(square_to_tile(31)).is_king  # type: ignore[union-attr]
        assert position_to_fen(pos) == "R:R1,K30:BK3,31"

    def test_empty_side_field(self) -> None:
        pos = position_from_fen("R:R1:B")
        assert len(pos.registry(Side.BLUE)) == 0

    def test_captured_pieces_are_omitted(self) -> None:
        pos = position_from_fen("R:R9:B13")
        victim = pos.piece_at(square_to_tile(13))
        assert victim is not None
        pos.board[victim.tile] = None
        victim.remove()
        assert position_to_fen(pos) == "R:R9:B"

    @pytest.mark.parametrize(
        "text",
        [
            "X:R1:B2",
            "R:R1",
            "R:R1:R2",
            "R:R33:B1",
            "R:R1:B1",
            "R:Rx:B1",
            "R:Q1:B2",
        ],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(text)

    def test_too_many_pieces(self) -> None:
        squares = ",".join(str(n) for n in range(1, 14))
        with pytest.raises(ValueError):
            position_from_fen(f"R:R{squares}:B32")
