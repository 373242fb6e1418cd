"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from rookie.core.enums import MoveKind, PieceType
from rookie.core.piece import Piece
from rookie.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable description of an intended transition.

    ``piece`` is the mover as it stood before the move. ``captured`` is set
    for normal and en passant captures only; the rook relocated by castling
    is not a capture.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    kind: MoveKind = MoveKind.NORMAL

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_castle(self) -> bool:
        return self.kind in (MoveKind.CASTLE_KINGSIDE, MoveKind.CASTLE_QUEENSIDE)

    @property
    def is_double_pawn_push(self) -> bool:
        return (
            self.piece.piece_type == PieceType.PAWN
            and abs(self.to_sq.rank - self.from_sq.rank) == 2
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq.name}{self.to_sq.name}"
        if self.kind == MoveKind.PROMOTION:
            base += "q"
        return base
