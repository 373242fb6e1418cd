"""Fixed geometry of the standard game: home squares, pawn ranks, castling paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from rookie.core.enums import CastlingRights, Color, MoveKind, PieceType
from rookie.core.types import (
    A1,
    A8,
    B1,
    B8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
)

BACK_RANK: Final[tuple[PieceType, ...]] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

HOME_RANK: Final = {Color.WHITE: 0, Color.BLACK: 7}
PAWN_START_RANK: Final = {Color.WHITE: 1, Color.BLACK: 6}
PROMOTION_RANK: Final = {Color.WHITE: 7, Color.BLACK: 0}
PAWN_DIRECTION: Final = {Color.WHITE: 1, Color.BLACK: -1}

# Pawns always promote to the strongest piece; there is no under-promotion.
PROMOTION_PIECE: Final = PieceType.QUEEN

KING_HOME: Final = {Color.WHITE: E1, Color.BLACK: E8}


@dataclass(frozen=True, slots=True)
class CastlePath:
    """Squares involved in one castling move."""

    right: CastlingRights
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]  # must all be empty
    transit: Square  # the king passes over it, must not be attacked


CASTLE_PATHS: Final[dict[tuple[Color, MoveKind], CastlePath]] = {
    (Color.WHITE, MoveKind.CASTLE_KINGSIDE): CastlePath(
        CastlingRights.WHITE_KINGSIDE, G1, H1, F1, (F1, G1), F1
    ),
    (Color.WHITE, MoveKind.CASTLE_QUEENSIDE): CastlePath(
        CastlingRights.WHITE_QUEENSIDE, C1, A1, D1, (B1, C1, D1), D1
    ),
    (Color.BLACK, MoveKind.CASTLE_KINGSIDE): CastlePath(
        CastlingRights.BLACK_KINGSIDE, G8, H8, F8, (F8, G8), F8
    ),
    (Color.BLACK, MoveKind.CASTLE_QUEENSIDE): CastlePath(
        CastlingRights.BLACK_QUEENSIDE, C8, A8, D8, (B8, C8, D8), D8
    ),
}

# Rook corner → (owner, right lost when that rook leaves or is captured there)
ROOK_HOMES: Final[dict[Square, tuple[Color, CastlingRights]]] = {
    path.rook_from: (color, path.right) for (color, _), path in CASTLE_PATHS.items()
}

KING_RIGHTS: Final = {
    Color.WHITE: CastlingRights.WHITE_BOTH,
    Color.BLACK: CastlingRights.BLACK_BOTH,
}
