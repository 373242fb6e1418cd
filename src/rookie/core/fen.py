"""FEN parsing and serialization."""

from __future__ import annotations

import logging

from rookie.core.board import Board
from rookie.core.enums import CastlingRights, Color
from rookie.core.piece import Piece
from rookie.core.position import Position
from rookie.core.transition import evaluate_status
from rookie.core.types import Square, make_square, parse_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_INITIAL_CELLS = Board.initial().cells


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position` with status flags set.

    Pieces standing anywhere other than their initial square are marked as
    having moved.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    cells: list[Piece | None] = [None] * 64
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                idx = make_square(file, rank).index
                piece = Piece.from_char(ch)
                if not piece.is_same_kind(_INITIAL_CELLS[idx]):
                    piece = piece.moved()
                cells[idx] = piece
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    board = Board(cells)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        rights = {
            "K": CastlingRights.WHITE_KINGSIDE,
            "Q": CastlingRights.WHITE_QUEENSIDE,
            "k": CastlingRights.BLACK_KINGSIDE,
            "q": CastlingRights.BLACK_QUEENSIDE,
        }
        seen: set[str] = set()
        for ch in castling_part:
            right = rights.get(ch)
            if right is None or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if ep.rank != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks (optional)
    halfmove = _parse_counter(parts, 4, default=0, minimum=0)
    fullmove = _parse_counter(parts, 5, default=1, minimum=1)

    for color in Color:
        if board.king_square(color) is None:
            _LOGGER.warning("FEN has no %s king: %s", color, fen)

    return evaluate_status(
        Position(
            board=board,
            side_to_move=side,
            castling=castling,
            en_passant=ep,
            halfmove_clock=halfmove,
            fullmove_number=fullmove,
        )
    )


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = ""
    if pos.white_kingside:
        castling_str += "K"
    if pos.white_queenside:
        castling_str += "Q"
    if pos.black_kingside:
        castling_str += "k"
    if pos.black_queenside:
        castling_str += "q"
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = pos.en_passant.name if pos.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )


def _parse_counter(parts: list[str], index: int, *, default: int, minimum: int) -> int:
    if len(parts) <= index:
        return default
    try:
        value = int(parts[index])
    except ValueError:
        raise ValueError(f"Invalid FEN counter: {parts[index]!r}") from None
    if value < minimum:
        raise ValueError(f"Invalid FEN counter: {parts[index]!r}")
    return value

