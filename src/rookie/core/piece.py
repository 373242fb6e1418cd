"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from rookie.core.enums import Color, PieceType

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}


_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    ``has_moved`` is set on the first committed move of the piece and kept
    from then on; castling rights are tracked separately on the position.
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = False

    # ── Derived copies ───────────────────────────────────────────────────

    def moved(self) -> Piece:
        """This piece with ``has_moved`` set."""
        if self.has_moved:
            return self
        return replace(self, has_moved=True)

    def promoted(self, piece_type: PieceType) -> Piece:
        return replace(self, piece_type=piece_type)

    def is_same_kind(self, other: Piece | None) -> bool:
        """Same color and type, ignoring move history."""
        return (
            other is not None
            and other.color == self.color
            and other.piece_type == self.piece_type
        )

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)
