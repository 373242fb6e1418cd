"""Tests for the Piece and Move value objects."""

import pytest

from rookie.core.enums import Color, MoveKind, PieceType
from rookie.core.move import Move
from rookie.core.piece import Piece
from rookie.core.types import E1, E2, E4, E7, E8, G1


class TestPiece:
    @pytest.mark.parametrize("char", list("PNBRQKpnbrqk"))
    def test_fen_char_round_trip(self, char: str) -> None:
        assert str(Piece.from_char(char)) == char

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_moved_and_promoted(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        moved = pawn.moved()
        assert moved.has_moved and not pawn.has_moved
        assert moved.moved() is moved
        queen = moved.promoted(PieceType.QUEEN)
        assert queen == Piece(Color.WHITE, PieceType.QUEEN, has_moved=True)
        assert queen.is_same_kind(Piece(Color.WHITE, PieceType.QUEEN))
        assert not queen.is_same_kind(None)


class TestMoveText:
    def test_plain_move(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        move = Move(E2, E4, pawn)
        assert str(move) == "e2e4"
        assert move.is_double_pawn_push
        assert not move.is_capture

    def test_promotion_suffix(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN, has_moved=True)
        assert str(Move(E7, E8, pawn, kind=MoveKind.PROMOTION)) == "e7e8q"

    def test_castle_is_king_move(self) -> None:
        king = Piece(Color.WHITE, PieceType.KING)
        move = Move(E1, G1, king, kind=MoveKind.CASTLE_KINGSIDE)
        assert str(move) == "e1g1"
        assert move.is_castle
        assert not move.is_capture
