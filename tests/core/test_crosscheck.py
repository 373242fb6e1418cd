"""Cross-check move generation and status against python-chess."""

from __future__ import annotations

import chess
import pytest

from rookie.core.fen import STARTING_FEN, position_from_fen, position_to_fen
from rookie.core.move_generator import all_legal_moves
from rookie.core.position import Position
from rookie.core.transition import apply_move

FENS = [
    STARTING_FEN,
    "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
    "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
    "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1",
    "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8",
    "r4rk1/1pp1qppp/p1np1n2/2b1p1B1/2B1P1b1/P1NP1N2/1PP1QPPP/R4RK1 w - - 0 10",
    "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2",
]


def _oracle_moves(board: chess.Board) -> set[str]:
    """python-chess legal moves, with promotions restricted to the queen."""
    return {
        m.uci() for m in board.legal_moves if m.promotion in (None, chess.QUEEN)
    }


def _engine_moves(position: Position) -> set[str]:
    return {str(move) for move in all_legal_moves(position)}


def _assert_same_state(position: Position, board: chess.Board) -> None:
    ours = position_to_fen(position).split()
    theirs = board.fen().split()
    assert ours[0] == theirs[0]
    assert ours[1] == theirs[1]
    assert ours[2] == theirs[2]
    assert (position.halfmove_clock, position.fullmove_number) == (
        board.halfmove_clock,
        board.fullmove_number,
    )
    assert position.is_check == board.is_check()
    assert position.is_checkmate == board.is_checkmate()
    assert position.is_stalemate == board.is_stalemate()
    assert _engine_moves(position) == _oracle_moves(board)


@pytest.mark.parametrize("fen", FENS)
def test_legal_moves_match(fen: str) -> None:
    position = position_from_fen(fen)
    board = chess.Board(fen)
    _assert_same_state(position, board)


@pytest.mark.parametrize("fen", FENS)
def test_every_reply_matches(fen: str) -> None:
    position = position_from_fen(fen)
    board = chess.Board(fen)
    for move in all_legal_moves(position):
        board.push(chess.Move.from_uci(str(move)))
        _assert_same_state(apply_move(position, move), board)
        board.pop()


@pytest.mark.parametrize("fen", FENS)
def test_deterministic_playout(fen: str) -> None:
    position = position_from_fen(fen)
    board = chess.Board(fen)
    for ply in range(40):
        moves = sorted(all_legal_moves(position), key=str)
        if not moves:
            assert position.is_terminal
            break
        move = moves[(ply * 7) % len(moves)]
        position = apply_move(position, move, validate=True)
        board.push(chess.Move.from_uci(str(move)))
        _assert_same_state(position, board)
