"""State transition: commit one move and derive the next position."""

from __future__ import annotations

import logging
from dataclasses import replace

from rookie.core.attacks import is_in_check
from rookie.core.enums import CastlingRights, Color, PieceType
from rookie.core.layout import KING_RIGHTS, ROOK_HOMES
from rookie.core.move import Move
from rookie.core.move_generator import MoveGenerator
from rookie.core.piece import Piece
from rookie.core.position import Position
from rookie.core.types import Square, make_square

_LOGGER = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """A submitted move is not legal in the position it was applied to."""


def apply_move(position: Position, move: Move, *, validate: bool = False) -> Position:
    """Commit *move* and return the resulting position.

    *move* should come from :meth:`MoveGenerator.legal_moves` for *position*.
    With ``validate=True`` anything else, or any move on a finished game,
    raises :class:`IllegalMoveError`; otherwise the caller is trusted.
    """
    if position.is_terminal:
        if validate:
            raise IllegalMoveError(
                f"Game is over ({position.status.name}); cannot play {move}"
            )
        _LOGGER.warning(
            "Applying %s to a terminal position (%s)", move, position.status.name
        )

    if validate and move not in MoveGenerator(position).legal_moves(move.from_sq):
        raise IllegalMoveError(f"Illegal move {move} for {position.side_to_move}")

    mover = position.board[move.from_sq]
    if mover is None:
        raise IllegalMoveError(f"No piece on {move.from_sq}")
    victim = position.board[move.to_sq]

    board, captured = position.board.after_move(move)
    mover_color = mover.color

    if mover.piece_type == PieceType.PAWN or captured:
        halfmove_clock = 0
    else:
        halfmove_clock = position.halfmove_clock + 1

    fullmove_number = position.fullmove_number
    if mover_color == Color.BLACK:
        fullmove_number += 1

    after = Position(
        board=board,
        side_to_move=mover_color.opposite,
        castling=_next_castling(position.castling, move, mover, victim),
        en_passant=_next_en_passant(move, mover),
        last_move=move,
        captured_pieces=position.captured_pieces + captured,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
        is_draw=position.is_draw,
    )
    after = evaluate_status(after)
    _LOGGER.debug(
        "Applied %s -> %s to move, %s", move, after.side_to_move, after.status.name
    )
    return after


def evaluate_status(position: Position) -> Position:
    """Recompute check / checkmate / stalemate for the side to move."""
    check = is_in_check(position, position.side_to_move)
    has_moves = MoveGenerator(position).has_legal_moves()
    return replace(
        position,
        is_check=check,
        is_checkmate=check and not has_moves,
        is_stalemate=not check and not has_moves,
    )


# ── Bookkeeping helpers ──────────────────────────────────────────────────


def _next_castling(
    castling: CastlingRights, move: Move, mover: Piece, victim: Piece | None
) -> CastlingRights:
    if mover.piece_type == PieceType.KING:
        castling &= ~KING_RIGHTS[mover.color]

    if mover.piece_type == PieceType.ROOK and move.from_sq in ROOK_HOMES:
        owner, right = ROOK_HOMES[move.from_sq]
        if owner == mover.color:
            castling &= ~right

    # A rook taken on its corner before it ever moved costs its owner the right.
    if (
        victim is not None
        and victim.piece_type == PieceType.ROOK
        and move.to_sq in ROOK_HOMES
    ):
        owner, right = ROOK_HOMES[move.to_sq]
        if owner == victim.color:
            castling &= ~right

    return castling


def _next_en_passant(move: Move, mover: Piece) -> Square | None:
    if mover.piece_type != PieceType.PAWN:
        return None
    if abs(move.to_sq.rank - move.from_sq.rank) != 2:
        return None
    return make_square(move.from_sq.file, (move.from_sq.rank + move.to_sq.rank) // 2)
