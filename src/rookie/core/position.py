"""Position: one complete, immutable snapshot of a game."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from rookie.core.board import Board
from rookie.core.enums import CastlingRights, Color, GameStatus
from rookie.core.move import Move
from rookie.core.piece import Piece
from rookie.core.types import Square


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board, side to move, castling, en passant, clocks.

    Positions are values. A transition builds a new ``Position`` and leaves
    the previous one untouched, so callers may keep older positions around
    for review or undo. The ``is_*`` status flags are computed when the
    position is produced and never change afterwards.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    last_move: Move | None = None
    captured_pieces: tuple[Piece, ...] = ()
    halfmove_clock: int = 0
    fullmove_number: int = 1
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    # Draw rules are not evaluated; nothing in the engine sets this.
    is_draw: bool = False

    @classmethod
    def initial(cls) -> Position:
        """Standard 32-piece layout, all castling rights, White to move."""
        return cls()

    # ── Board access ─────────────────────────────────────────────────────

    @property
    def pieces(self) -> Mapping[Square, Piece]:
        """Read-only square → piece mapping."""
        return MappingProxyType(self.board.as_dict())

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    # ── Castling rights ──────────────────────────────────────────────────

    @property
    def white_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_KINGSIDE)

    @property
    def white_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_QUEENSIDE)

    @property
    def black_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_KINGSIDE)

    @property
    def black_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_QUEENSIDE)

    # ── Status ───────────────────────────────────────────────────────────

    @property
    def status(self) -> GameStatus:
        if self.is_checkmate:
            return GameStatus.CHECKMATE
        if self.is_stalemate:
            return GameStatus.STALEMATE
        if self.is_check:
            return GameStatus.CHECK
        return GameStatus.ONGOING

    @property
    def is_terminal(self) -> bool:
        return self.is_checkmate or self.is_stalemate

    # ── Raw transition ───────────────────────────────────────────────────

    def play_raw(self, move: Move) -> Position:
        """Relocate pieces and flip the side to move, nothing else.

        Castling rights, en passant, clocks and status flags are carried over
        unchanged. Used for king-safety simulation, where recomputing status
        would recurse into move generation.
        """
        board, _ = self.board.after_move(move)
        return replace(self, board=board, side_to_move=self.side_to_move.opposite)
