"""Tests for simple-move and capture generation."""

from checkie.core.enums import Side
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.position import Position

from helpers import build_position


def _piece(pos: Position, tile: int) -> Piece:
    piece = pos.piece_at(tile)
    assert piece is not None
    return piece


class TestStartingPosition:
    def test_no_forced_jumps(self) -> None:
        pos = Position.initial()
        assert MoveGenerator(pos).compute_side(Side.RED) is True

    def test_front_row_can_move(self) -> None:
        pos = Position.initial()
        MoveGenerator(pos).compute_side(Side.RED)
        assert _piece(pos, 40).legal_moves() == (33,)
        assert _piece(pos, 42).legal_moves() == (33, 35)
        assert _piece(pos, 46).legal_moves() == (37, 39)

    def test_back_rows_are_blocked(self) -> None:
        pos = Position.initial()
        MoveGenerator(pos).compute_side(Side.RED)
        for tile in (49, 51, 53, 55, 56, 58, 60, 62):
            assert not _piece(pos, tile).can_move

    def test_blue_moves_down_the_board(self) -> None:
        pos = Position.initial(Side.BLUE)
        MoveGenerator(pos).compute_side(Side.BLUE)
        assert _piece(pos, 17).legal_moves() == (24, 26)
        assert _piece(pos, 23).legal_moves() == (30,)


class TestSimpleMoves:
    def test_man_moves_forward_only(self) -> None:
        pos = build_position(red=[35])
        piece = _piece(pos, 35)
        MoveGenerator(pos).compute_piece(piece)
        assert piece.moves == [26, 28, None, None]

    def test_king_moves_all_diagonals(self) -> None:
        pos = build_position(red=[27], kings=[27])
        piece = _piece(pos, 27)
        MoveGenerator(pos).compute_piece(piece)
        assert piece.moves == [18, 20, 34, 36]

    def test_blue_king_slots_are_relative_to_blue(self) -> None:
        pos = build_position(blue=[27], kings=[27])
        piece = _piece(pos, 27)
        MoveGenerator(pos).compute_piece(piece)
        assert piece.moves == [34, 36, 18, 20]

    def test_occupied_target_is_not_a_move(self) -> None:
        pos = build_position(red=[35, 26])
        piece = _piece(pos, 35)
        MoveGenerator(pos).compute_piece(piece)
        assert piece.legal_moves() == (28,)

    def test_edge_piece_has_single_move(self) -> None:
        pos = build_position(red=[40])
        piece = _piece(pos, 40)
        MoveGenerator(pos).compute_piece(piece)
        assert piece.moves == [None, 33, None, None]


class TestJumps:
    def test_capture_over_adjacent_opponent(self) -> None:
        # Red (2,5), Blue (1,4), landing (0,3)
        pos = build_position(red=[42], blue=[33])
        piece = _piece(pos, 42)
        assert MoveGenerator(pos).compute_piece(piece)
        assert piece.must_jump
        assert piece.legal_jumps() == (24,)
        assert piece.jumps[0] == 24

    def test_side_reports_forced_jump(self) -> None:
        pos = build_position(red=[42, 46], blue=[33])
        assert MoveGenerator(pos).compute_side(Side.RED) is False
        assert not _piece(pos, 46).must_jump

    def test_landing_must_be_empty(self) -> None:
        pos = build_position(red=[42], blue=[33, 24])
        piece = _piece(pos, 42)
        assert not MoveGenerator(pos).compute_piece(piece)
        assert piece.legal_jumps() == ()

    def test_landing_must_be_on_board(self) -> None:
        pos = build_position(red=[33], blue=[24])
        piece = _piece(pos, 33)
        assert not MoveGenerator(pos).compute_piece(piece)

    def test_own_piece_cannot_be_jumped(self) -> None:
        pos = build_position(red=[42, 33])
        assert not MoveGenerator(pos).compute_piece(_piece(pos, 42))

    def test_man_does_not_capture_backward(self) -> None:
        pos = build_position(red=[35], blue=[44])
        assert not MoveGenerator(pos).compute_piece(_piece(pos, 35))

    def test_chain_continuation_looks_backward(self) -> None:
        pos = build_position(red=[35], blue=[44])
        piece = _piece(pos, 35)
        assert MoveGenerator(pos).compute_piece(piece, all_directions=True)
        assert piece.jumps == [None, None, None, 53]
        # Simple moves stay forward-only.
        assert piece.moves == [26, 28, None, None]

    def test_king_captures_backward(self) -> None:
        pos = build_position(red=[35], blue=[44], kings=[35])
        piece = _piece(pos, 35)
        assert MoveGenerator(pos).compute_piece(piece)
        assert piece.legal_jumps() == (53,)

    def test_blue_captures_toward_row_seven(self) -> None:
        pos = build_position(red=[26], blue=[17], side=Side.BLUE)
        piece = _piece(pos, 17)
        assert MoveGenerator(pos).compute_piece(piece)
        assert piece.legal_jumps() == (35,)


class TestRecomputation:
    def test_stale_options_are_cleared(self) -> None:
        pos = build_position(red=[35])
        piece = _piece(pos, 35)
        piece.moves[3] = 63
        piece.jumps[0] = 5
        piece.must_jump = True
        MoveGenerator(pos).compute_piece(piece)
        assert piece.moves == [26, 28, None, None]
        assert piece.jumps == [None] * 4
        assert not piece.must_jump

    def test_captured_piece_is_skipped(self) -> None:
        pos = build_position(red=[42, 46], blue=[33])
        piece = _piece(pos, 42)
        pos.board[42] = None
        piece.remove()
        piece.moves[0] = 33
        assert MoveGenerator(pos).compute_side(Side.RED) is True
        assert piece.moves == [None] * 4
        assert not piece.must_jump

    def test_clear_side(self) -> None:
        pos = Position.initial()
        gen = MoveGenerator(pos)
        gen.compute_side(Side.RED)
        gen.clear_side(Side.RED)
        assert all(not p.can_move for p in pos.registry(Side.RED))
