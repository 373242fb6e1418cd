"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.enums import GameStatus
from rookie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from rookie.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Unlike the cached flags on ``Position`` these are computed from the
    board every time, which makes them suitable for positions built by hand.
    """

    # Product policy: no draw rules (repetition, 50-move, material) are
    # evaluated. Stalemate is the only drawn outcome the engine detects.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).has_legal_moves()

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).has_legal_moves()

    @staticmethod
    def is_draw(position: Position) -> bool:
        """Draw by rule. Not evaluated: reports the position's cached flag."""
        return position.is_draw

    @staticmethod
    def game_status(position: Position) -> GameStatus:
        gen = MoveGenerator(position)
        in_check = gen.is_in_check(position.side_to_move)
        if not gen.has_legal_moves():
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.ONGOING
