"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from rookie.core import Position, apply_move, legal_moves, parse_square

    pos = Position.initial()
    move = legal_moves(pos, parse_square("e2"))[-1]  # e2e4
    pos = apply_move(pos, move)
"""

from rookie.core.attacks import is_attacked, is_in_check
from rookie.core.board import Board
from rookie.core.enums import CastlingRights, Color, GameStatus, MoveKind, PieceType
from rookie.core.fen import STARTING_FEN, position_from_fen, position_to_fen
from rookie.core.move import Move
from rookie.core.move_generator import (
    MoveGenerator,
    all_legal_moves,
    has_legal_moves,
    legal_moves,
    pseudo_moves,
)
from rookie.core.piece import Piece
from rookie.core.position import Position
from rookie.core.rules import Rules
from rookie.core.transition import IllegalMoveError, apply_move, evaluate_status
from rookie.core.types import SQUARES, Square, make_square, parse_square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameStatus",
    "MoveKind",
    "PieceType",
    # Types / helpers
    "SQUARES",
    "Square",
    "make_square",
    "parse_square",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Engine operations
    "all_legal_moves",
    "apply_move",
    "evaluate_status",
    "has_legal_moves",
    "is_attacked",
    "is_in_check",
    "legal_moves",
    "pseudo_moves",
    # Errors
    "IllegalMoveError",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
