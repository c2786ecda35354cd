"""Tests for raw attack squares."""

from voidchess.core.attacks import attacks, is_attacked_by
from voidchess.core.board import Board
from voidchess.core.enums import Color, PieceKind
from voidchess.core.piece import Piece
from voidchess.core.types import Position


def _sq(*names: str) -> set[Position]:
    return {Position.parse(n) for n in names}


def _attacks_of(placement: dict[str, str], square: str) -> set[Position]:
    board = Board.from_placement(placement)
    pos = Position.parse(square)
    piece = board[pos]
    assert piece is not None
    return set(attacks(piece, pos, board))


class TestLeapers:
    def test_knight_in_corner(self) -> None:
        assert _attacks_of({"a1": "N"}, "a1") == _sq("b3", "c2")

    def test_knight_in_center(self) -> None:
        assert len(_attacks_of({"d4": "N"}, "d4")) == 8

    def test_king_on_edge(self) -> None:
        assert _attacks_of({"e1": "K"}, "e1") == _sq("d1", "f1", "d2", "e2", "f2")

    def test_leapers_include_own_pieces(self) -> None:
        assert Position.parse("e2") in _attacks_of({"e1": "K", "e2": "P"}, "e1")


class TestPawns:
    def test_white_pawn_attacks_forward_diagonals(self) -> None:
        assert _attacks_of({"e4": "P"}, "e4") == _sq("d5", "f5")

    def test_black_pawn_attacks_downward(self) -> None:
        assert _attacks_of({"e5": "p"}, "e5") == _sq("d4", "f4")

    def test_edge_pawn_has_one_attack(self) -> None:
        assert _attacks_of({"a2": "P"}, "a2") == _sq("b3")

    def test_pawn_does_not_attack_straight_ahead(self) -> None:
        assert Position.parse("e5") not in _attacks_of({"e4": "P"}, "e4")


class TestSliders:
    def test_rook_on_empty_board(self) -> None:
        assert len(_attacks_of({"a1": "R"}, "a1")) == 14

    def test_bishop_on_empty_board(self) -> None:
        assert len(_attacks_of({"d4": "B"}, "d4")) == 13

    def test_queen_on_empty_board(self) -> None:
        assert len(_attacks_of({"d4": "Q"}, "d4")) == 27

    def test_ray_includes_first_blocker_of_either_color(self) -> None:
        own = _attacks_of({"a1": "R", "a3": "P"}, "a1")
        enemy = _attacks_of({"a1": "R", "a3": "p"}, "a1")
        for targets in (own, enemy):
            assert Position.parse("a3") in targets
            assert Position.parse("a4") not in targets


class TestIsAttackedBy:
    def test_initial_position(self) -> None:
        board = Board.initial()
        assert is_attacked_by(Position.parse("f3"), Color.WHITE, board)
        assert not is_attacked_by(Position.parse("e4"), Color.WHITE, board)
        assert is_attacked_by(Position.parse("f6"), Color.BLACK, board)

    def test_blocked_ray(self) -> None:
        board = Board.from_placement({"a1": "r", "a4": "P"})
        assert is_attacked_by(Position.parse("a3"), Color.BLACK, board)
        assert not is_attacked_by(Position.parse("a5"), Color.BLACK, board)

    def test_color_filter(self) -> None:
        board = Board()
        board[Position.parse("d4")] = Piece(Color.WHITE, PieceKind.KNIGHT)
        assert is_attacked_by(Position.parse("e6"), Color.WHITE, board)
        assert not is_attacked_by(Position.parse("e6"), Color.BLACK, board)
