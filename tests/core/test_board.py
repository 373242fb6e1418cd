"""Tests for Board."""

import pytest

from rookie.core.board import Board
from rookie.core.enums import Color, MoveKind, PieceType
from rookie.core.move import Move
from rookie.core.piece import Piece
from rookie.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    D5, E2, E4, E5,
    SQUARES,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for sq, pt in zip((A1, B1, C1, D1, E1, F1, G1, H1), expected):
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at {sq}"
        for sq, pt in zip((A8, B8, C8, D8, E8, F8, G8, H8), expected):
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE, PieceType.PAWN)
        black = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(white) == 8 and all(sq.rank == 1 for sq in white)
        assert len(black) == 8 and all(sq.rank == 6 for sq in black)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in SQUARES[16:48]:
            assert board.is_empty(sq)

    def test_counts(self) -> None:
        board = Board.initial()
        assert board.piece_count() == 32
        assert board.piece_count(Color.WHITE) == 16

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert Board().king_square(Color.BLACK) is None


class TestBoardValue:
    def test_equality_and_hash(self) -> None:
        assert Board.initial() == Board.initial()
        assert hash(Board.initial()) == hash(Board.initial())
        assert Board.initial() != Board()

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board([None] * 63)

    def test_from_dict_round_trip(self) -> None:
        board = Board.initial()
        assert Board.from_dict(board.as_dict()) == board

    def test_repr_shows_ranks(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert text.splitlines()[-1] == "  a b c d e f g h"


class TestAfterMove:
    def test_original_untouched(self) -> None:
        board = Board.initial()
        pawn = board[E2]
        assert pawn is not None
        new_board, captured = board.after_move(Move(E2, E4, pawn))
        assert board[E2] == pawn
        assert new_board[E2] is None
        assert new_board[E4] == pawn.moved()
        assert captured == ()

    def test_castling_moves_rook(self) -> None:
        king = Piece(Color.WHITE, PieceType.KING)
        rook = Piece(Color.WHITE, PieceType.ROOK)
        board = Board.from_dict({E1: king, H1: rook, A1: rook})
        new_board, captured = board.after_move(
            Move(E1, G1, king, kind=MoveKind.CASTLE_KINGSIDE)
        )
        assert new_board[G1] == king.moved()
        assert new_board[F1] == rook.moved()
        assert new_board[H1] is None
        assert new_board[A1] == rook
        assert captured == ()

    def test_en_passant_removes_pawn_behind(self) -> None:
        white = Piece(Color.WHITE, PieceType.PAWN, has_moved=True)
        black = Piece(Color.BLACK, PieceType.PAWN, has_moved=True)
        d6 = D5.offset(0, 1)
        assert d6 is not None
        board = Board.from_dict({E5: white, D5: black})
        new_board, captured = board.after_move(
            Move(E5, d6, white, black, MoveKind.EN_PASSANT)
        )
        assert new_board[D5] is None
        assert new_board[d6] == white
        assert captured == (black,)

    def test_missing_piece_raises(self) -> None:
        with pytest.raises(ValueError):
            Board().after_move(Move(E2, E4, Piece(Color.WHITE, PieceType.PAWN)))
