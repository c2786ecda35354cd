"""Move generation tests, including perft counts.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from voidchess.core.enums import CastleSide, CastlingRights, Color, MoveKind, PieceKind
from voidchess.core.move import Move
from voidchess.core.move_generator import MoveGenerator, board_after
from voidchess.core.piece import Piece
from voidchess.core.types import Position
from voidchess.game.state import GameState


def perft(state: GameState, depth: int) -> int:
    """Count leaf nodes at *depth* by applying every legal move."""
    if depth == 0:
        return 1
    return sum(
        perft(state.apply(src, move), depth - 1) for src, move in state.legal_moves()
    )


def _targets(state: GameState, square: str) -> set[str]:
    pos = Position.parse(square)
    color = state.piece_at(pos).color
    return {m.destination(color).name for m in state.moves_from(pos)}


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        assert perft(GameState.initial(), 1) == 20

    def test_depth_2(self) -> None:
        assert perft(GameState.initial(), 2) == 400

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(GameState.initial(), 3) == 8_902


# ── Kiwipete (castling on both wings) ────────────────────────────────────────

# fmt: off
KIWIPETE = {
    "a8": "r", "e8": "k", "h8": "r",
    "a7": "p", "c7": "p", "d7": "p", "e7": "q", "f7": "p", "g7": "b",
    "a6": "b", "b6": "n", "e6": "p", "f6": "n", "g6": "p",
    "d5": "P", "e5": "N",
    "b4": "p", "e4": "P",
    "c3": "N", "f3": "Q", "h3": "p",
    "a2": "P", "b2": "P", "c2": "P", "d2": "B", "e2": "B",
    "f2": "P", "g2": "P", "h2": "P",
    "a1": "R", "e1": "K", "h1": "R",
}
# fmt: on


class TestPerftKiwipete:
    def test_depth_1(self) -> None:
        state = GameState.custom(KIWIPETE, castling=CastlingRights.ALL)
        assert perft(state, 1) == 48


# ── Position 3: en-passant and pins along the rank ───────────────────────────

# fmt: off
POS3 = {
    "c7": "p",
    "d6": "p",
    "a5": "K", "b5": "P", "h5": "r",
    "b4": "R", "f4": "p", "h4": "k",
    "e2": "P", "g2": "P",
}
# fmt: on


class TestPerftPos3:
    def test_depth_1(self) -> None:
        assert perft(GameState.custom(POS3), 1) == 14

    def test_depth_2(self) -> None:
        assert perft(GameState.custom(POS3), 2) == 191


# ── Individual pieces ────────────────────────────────────────────────────────


class TestPawnMoves:
    def test_single_and_double_step(self) -> None:
        assert _targets(GameState.initial(), "e2") == {"e3", "e4"}

    def test_double_step_blocked_by_piece_in_between(self) -> None:
        state = GameState.custom({"e1": "K", "e8": "k", "e2": "P", "e3": "n"})
        assert _targets(state, "e2") == set()

    def test_double_step_only_from_pawn_rank(self) -> None:
        state = GameState.custom({"e1": "K", "e8": "k", "d3": "P"})
        assert _targets(state, "d3") == {"d4"}

    def test_captures_only_diagonally(self) -> None:
        state = GameState.custom(
            {"e1": "K", "e8": "k", "d4": "P", "d5": "p", "c5": "p", "e5": "B"}
        )
        moves = state.moves_from(Position.parse("d4"))
        assert moves == [Move.take(Position.parse("c5"))]

    def test_promotion_offers_four_pieces(self) -> None:
        state = GameState.custom({"e1": "K", "h8": "k", "a7": "P"})
        moves = state.moves_from(Position.parse("a7"))
        assert len(moves) == 4
        assert all(m.kind == MoveKind.PROMOTE for m in moves)
        assert {m.promotion.kind for m in moves} == {
            PieceKind.QUEEN,
            PieceKind.ROOK,
            PieceKind.BISHOP,
            PieceKind.KNIGHT,
        }
        assert all(m.promotion.color == Color.WHITE for m in moves)

    def test_capture_promotion(self) -> None:
        state = GameState.custom(
            {"e1": "K", "h1": "k", "a7": "P", "a8": "r", "b8": "n"}
        )
        moves = state.moves_from(Position.parse("a7"))
        assert {m.to.name for m in moves} == {"b8"}
        assert len(moves) == 4

    def test_en_passant_available_right_after_double_step(self) -> None:
        state = GameState.custom(
            {"e1": "K", "e8": "k", "e5": "P", "d5": "p"}, en_passant="d6"
        )
        moves = state.moves_from(Position.parse("e5"))
        ep = Move.take(Position.parse("d6"), Position.parse("d5"))
        assert ep in moves
        assert ep.is_en_passant

    def test_en_passant_needs_opponent_pawn_behind_target(self) -> None:
        state = GameState.custom(
            {"e1": "K", "e8": "k", "e5": "P", "d5": "n"}, en_passant="d6"
        )
        assert all(not m.is_en_passant for m in state.moves_from(Position.parse("e5")))

    def test_en_passant_exposing_king_on_rank_is_illegal(self) -> None:
        state = GameState.custom(
            {"a5": "K", "e5": "P", "d5": "p", "h5": "r", "e8": "k"},
            en_passant="d6",
        )
        assert all(not m.is_en_passant for m in state.moves_from(Position.parse("e5")))


class TestPins:
    def test_pinned_rook_moves_only_along_pin(self) -> None:
        state = GameState.custom({"e1": "K", "e4": "R", "e8": "q", "a8": "k"})
        assert _targets(state, "e4") == {"e2", "e3", "e5", "e6", "e7", "e8"}

    def test_pinned_knight_cannot_move(self) -> None:
        state = GameState.custom({"e1": "K", "e3": "N", "e8": "r", "a8": "k"})
        assert state.moves_from(Position.parse("e3")) == []

    def test_in_check_only_evasions(self) -> None:
        state = GameState.custom(
            {"e1": "K", "e8": "r", "a8": "k", "b2": "R"}, side_to_move=Color.WHITE
        )
        legal = {
            (src.name, m.destination(Color.WHITE).name)
            for src, m in state.legal_moves()
        }
        assert ("b2", "e2") in legal
        assert ("b2", "b8") not in legal
        assert ("e1", "e2") not in legal
        assert ("e1", "d1") in legal


class TestKingMoves:
    def test_king_cannot_step_into_attack(self) -> None:
        state = GameState.custom({"e1": "K", "d8": "r", "h8": "k"})
        assert "d1" not in _targets(state, "e1")
        assert "d2" not in _targets(state, "e1")

    def test_king_cannot_retreat_along_checking_ray(self) -> None:
        state = GameState.custom({"e2": "K", "e8": "r", "a8": "k"})
        assert "e1" not in _targets(state, "e2")

    def test_king_cannot_capture_defended_piece(self) -> None:
        state = GameState.custom({"e1": "K", "e2": "q", "e3": "r", "a8": "k"})
        assert "e2" not in _targets(state, "e1")

    def test_king_can_capture_undefended_piece(self) -> None:
        state = GameState.custom({"e1": "K", "e2": "q", "a8": "k"})
        assert Move.take(Position.parse("e2")) in state.moves_from(Position.parse("e1"))


class TestCastling:
    _BASE = {"e1": "K", "a1": "R", "h1": "R", "e8": "k"}

    def _state(self, extra: dict[str, str] | None = None) -> GameState:
        placement = dict(self._BASE)
        placement.update(extra or {})
        return GameState.custom(placement, castling=CastlingRights.WHITE_BOTH)

    def _castles(self, state: GameState) -> set[CastleSide]:
        return {
            m.castle
            for m in state.moves_from(Position.parse("e1"))
            if m.kind == MoveKind.CASTLE
        }

    def test_both_sides_available(self) -> None:
        assert self._castles(self._state()) == {CastleSide.SHORT, CastleSide.LONG}

    def test_needs_flag(self) -> None:
        state = GameState.custom(self._BASE, castling=CastlingRights.WHITE_SHORT)
        assert self._castles(state) == {CastleSide.SHORT}

    def test_blocked_by_piece_between(self) -> None:
        assert self._castles(self._state({"b1": "N"})) == {CastleSide.SHORT}

    def test_not_out_of_check(self) -> None:
        assert self._castles(self._state({"e5": "r"})) == set()

    def test_not_through_attacked_square(self) -> None:
        assert self._castles(self._state({"f5": "r"})) == {CastleSide.LONG}

    def test_rook_side_square_attacked_blocks(self) -> None:
        # b1 is attacked: the king never crosses it, but the castling path does.
        assert self._castles(self._state({"b5": "r"})) == {CastleSide.SHORT}

    def test_requires_rook_in_corner(self) -> None:
        state = GameState.custom(
            {"e1": "K", "h1": "R", "e8": "k"}, castling=CastlingRights.WHITE_BOTH
        )
        assert self._castles(state) == {CastleSide.SHORT}

    def test_castling_moves_king_and_rook(self) -> None:
        board = self._state().board
        after = board_after(
            board, Position.parse("e1"), Move.castling(CastleSide.SHORT), Color.WHITE
        )
        assert after[Position.parse("g1")] == Piece(Color.WHITE, PieceKind.KING)
        assert after[Position.parse("f1")] == Piece(Color.WHITE, PieceKind.ROOK)
        assert after.is_empty(Position.parse("e1"))
        assert after.is_empty(Position.parse("h1"))


class TestGeneratorQueries:
    def test_empty_square_has_no_moves(self) -> None:
        gen = MoveGenerator(GameState.initial())
        assert gen.moves(Position.parse("e4")) == []

    def test_is_in_check(self) -> None:
        state = GameState.custom({"e1": "K", "e8": "r", "a8": "k"})
        gen = MoveGenerator(state)
        assert gen.is_in_check(Color.WHITE)
        assert not gen.is_in_check(Color.BLACK)

    def test_has_legal_move(self) -> None:
        gen = MoveGenerator(GameState.initial())
        assert gen.has_legal_move(Color.WHITE)
        assert gen.has_legal_move(Color.BLACK)

    def test_board_after_en_passant_removes_victim(self) -> None:
        board = GameState.custom({"e1": "K", "e8": "k", "e5": "P", "d5": "p"}).board
        move = Move.take(Position.parse("d6"), Position.parse("d5"))
        after = board_after(board, Position.parse("e5"), move, Color.WHITE)
        assert after.is_empty(Position.parse("d5"))
        assert after[Position.parse("d6")] == Piece(Color.WHITE, PieceKind.PAWN)


class TestMoveValue:
    def test_castle_needs_side(self) -> None:
        with pytest.raises(ValueError):
            Move(MoveKind.CASTLE)

    def test_step_needs_target(self) -> None:
        with pytest.raises(ValueError):
            Move(MoveKind.MOVE)

    def test_promotion_needs_piece(self) -> None:
        with pytest.raises(ValueError):
            Move(MoveKind.PROMOTE, to=Position.parse("a8"))

    def test_castling_destination_depends_on_color(self) -> None:
        move = Move.castling(CastleSide.LONG)
        assert move.destination(Color.WHITE) == Position.parse("c1")
        assert move.destination(Color.BLACK) == Position.parse("c8")
