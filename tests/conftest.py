"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from rookie.core.fen import position_to_fen
from rookie.core.move import Move
from rookie.core.move_generator import legal_moves
from rookie.core.position import Position
from rookie.core.transition import apply_move
from rookie.core.types import parse_square

FindMove = Callable[[Position, str], Move]
PlayMoves = Callable[..., Position]


def _find_move(position: Position, uci: str) -> Move:
    from_sq = parse_square(uci[:2])
    to_sq = parse_square(uci[2:4])
    for move in legal_moves(position, from_sq):
        if move.to_sq == to_sq:
            return move
    raise AssertionError(f"{uci} is not legal in {position_to_fen(position)}")


@pytest.fixture
def find_move() -> FindMove:
    """Look up the engine's legal Move for a UCI string such as ``'e2e4'``."""
    return _find_move


@pytest.fixture
def play() -> PlayMoves:
    """Apply a sequence of UCI moves, each validated against the engine."""

    def _play(position: Position, *ucis: str) -> Position:
        for uci in ucis:
            position = apply_move(position, _find_move(position, uci), validate=True)
        return position

    return _play
