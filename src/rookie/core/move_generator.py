"""Pseudo-legal and legal move generation for a single piece."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_attacked,
    is_in_check,
)
from rookie.core.enums import Color, MoveKind, PieceType
from rookie.core.layout import (
    CASTLE_PATHS,
    KING_HOME,
    PAWN_DIRECTION,
    PAWN_START_RANK,
    PROMOTION_RANK,
)
from rookie.core.move import Move
from rookie.core.piece import Piece
from rookie.core.types import Square, make_square

if TYPE_CHECKING:
    from rookie.core.position import Position

_CASTLE_KINDS = (MoveKind.CASTLE_KINGSIDE, MoveKind.CASTLE_QUEENSIDE)


class MoveGenerator:
    """Generates moves for the side to move of a given :class:`Position`.

    Positions are immutable, so the generator never has to restore anything:
    king safety is checked on a throwaway position from
    :meth:`Position.play_raw`.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> list[Move]:
        """Strictly legal moves for the piece on *sq*.

        Empty when *sq* is empty or holds a piece of the side not to move.
        """
        return [move for move in self.pseudo_moves(sq) if self._keeps_king_safe(move)]

    def all_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        legal: list[Move] = []
        for sq in self._board.pieces(self._pos.side_to_move):
            legal.extend(self.legal_moves(sq))
        return legal

    def has_legal_moves(self) -> bool:
        """Whether the side to move has at least one legal move."""
        for sq in self._board.pieces(self._pos.side_to_move):
            for move in self.pseudo_moves(sq):
                if self._keeps_king_safe(move):
                    return True
        return False

    def pseudo_moves(self, sq: Square) -> list[Move]:
        """Moves obeying geometry and occupancy (may leave own king in check)."""
        piece = self._board[sq]
        if piece is None or piece.color != self._pos.side_to_move:
            return []

        moves: list[Move] = []
        idx = sq.index
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, piece, KNIGHT_TARGETS[idx], moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(sq, piece, BISHOP_RAYS[idx], moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(sq, piece, ROOK_RAYS[idx], moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(sq, piece, QUEEN_RAYS[idx], moves)
        else:
            self._gen_steps(sq, piece, KING_TARGETS[idx], moves)
            self._gen_castling(sq, piece, moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_in_check(self._pos, color)

    def is_square_attacked(self, sq: Square, defending: Color) -> bool:
        """Is *sq* attacked by the side opposing *defending*?"""
        return is_attacked(self._pos, sq, defending)

    # -- Legality filter (private) -----------------------------------------

    def _keeps_king_safe(self, move: Move) -> bool:
        # The mover's king is tested, not the king of the side to move next.
        after = self._pos.play_raw(move)
        return not is_in_check(after, move.piece.color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, pawn: Piece, moves: list[Move]) -> None:
        board = self._board
        color = pawn.color
        direction = PAWN_DIRECTION[color]
        last_rank = PROMOTION_RANK[color]

        one_step = sq.offset(0, direction)
        if one_step is not None and board.is_empty(one_step):
            kind = MoveKind.PROMOTION if one_step.rank == last_rank else MoveKind.NORMAL
            moves.append(Move(sq, one_step, pawn, kind=kind))
            if sq.rank == PAWN_START_RANK[color]:
                two_step = one_step.offset(0, direction)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(Move(sq, two_step, pawn))

        for df in (-1, 1):
            cap_sq = sq.offset(df, direction)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    kind = (
                        MoveKind.PROMOTION
                        if cap_sq.rank == last_rank
                        else MoveKind.NORMAL
                    )
                    moves.append(Move(sq, cap_sq, pawn, target, kind))
            elif cap_sq == self._pos.en_passant:
                victim = board[make_square(cap_sq.file, sq.rank)]
                if (
                    victim is not None
                    and victim.color != color
                    and victim.piece_type == PieceType.PAWN
                ):
                    moves.append(Move(sq, cap_sq, pawn, victim, MoveKind.EN_PASSANT))

    def _gen_steps(
        self,
        sq: Square,
        piece: Piece,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(Move(sq, to_sq, piece, target))

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq, piece))
                    continue
                if target.color != piece.color:
                    moves.append(Move(sq, to_sq, piece, target))
                break

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Move]) -> None:
        color = king.color
        if king_sq != KING_HOME[color] or self.is_in_check(color):
            return

        board = self._board
        rights = self._pos.castling
        for kind in _CASTLE_KINDS:
            path = CASTLE_PATHS[(color, kind)]
            if not rights & path.right:
                continue
            rook = board[path.rook_from]
            if rook is None or rook.color != color or rook.piece_type != PieceType.ROOK:
                continue
            if not all(board.is_empty(s) for s in path.between):
                continue
            # The landing square is covered by the legality filter.
            if self.is_square_attacked(path.transit, color):
                continue
            moves.append(Move(king_sq, path.king_to, king, kind=kind))


# -- Functional API ----------------------------------------------------------


def pseudo_moves(position: Position, sq: Square) -> list[Move]:
    return MoveGenerator(position).pseudo_moves(sq)


def legal_moves(position: Position, sq: Square) -> list[Move]:
    """Legal moves of the piece on *sq*, empty if it is not the mover's."""
    return MoveGenerator(position).legal_moves(sq)


def all_legal_moves(position: Position) -> list[Move]:
    return MoveGenerator(position).all_legal_moves()


def has_legal_moves(position: Position) -> bool:
    return MoveGenerator(position).has_legal_moves()
