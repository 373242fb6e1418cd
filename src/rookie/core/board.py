"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from rookie.core.enums import Color, MoveKind, PieceType
from rookie.core.layout import (
    BACK_RANK,
    CASTLE_PATHS,
    HOME_RANK,
    PAWN_START_RANK,
    PROMOTION_PIECE,
)
from rookie.core.move import Move
from rookie.core.piece import Piece
from rookie.core.types import SQUARES, Square, make_square


class Board:
    """Fixed 64-slot board indexed by ``rank * 8 + file``.

    A board is never changed after construction; :meth:`after_move` returns a
    new board.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        cells = tuple(squares) if squares is not None else (None,) * 64
        if len(cells) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(cells)}")
        self._squares: tuple[Piece | None, ...] = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    @property
    def cells(self) -> tuple[Piece | None, ...]:
        return self._squares

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) for every occupied square, a1 first."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield SQUARES[idx], piece

    def pieces(self, color: Color, piece_type: PieceType | None = None) -> list[Square]:
        """Squares occupied by *color*'s pieces, optionally of one *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color
            and (piece_type is None or piece.piece_type == piece_type)
        ]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, ``None`` if it is missing."""
        for sq, piece in self.occupied():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        return None

    def piece_count(self, color: Color | None = None) -> int:
        return sum(
            1
            for piece in self._squares
            if piece is not None and (color is None or piece.color == color)
        )

    def as_dict(self) -> dict[Square, Piece]:
        return dict(self.occupied())

    # -- Raw move application -----------------------------------------------

    def after_move(self, move: Move) -> tuple[Board, tuple[Piece, ...]]:
        """Relocate pieces for *move*, returning the new board and captures.

        Only placement changes here: no rights, en passant or status
        bookkeeping. The castling rook and the promoted piece are handled,
        and the mover (and castling rook) come out marked as moved.
        """
        cells = list(self._squares)
        moving = cells[move.from_sq.index]
        if moving is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured: list[Piece] = []
        cells[move.from_sq.index] = None

        target = cells[move.to_sq.index]
        if target is not None:
            captured.append(target)

        if move.is_castle:
            path = CASTLE_PATHS[(moving.color, move.kind)]
            rook = cells[path.rook_from.index]
            cells[path.rook_from.index] = None
            if rook is not None:
                cells[path.rook_to.index] = rook.moved()
        elif move.kind == MoveKind.EN_PASSANT:
            # The captured pawn sits beside the mover, behind the target square.
            victim_idx = make_square(move.to_sq.file, move.from_sq.rank).index
            victim = cells[victim_idx]
            if victim is not None:
                captured.append(victim)
                cells[victim_idx] = None

        placed = moving.moved()
        if move.kind == MoveKind.PROMOTION:
            placed = placed.promoted(PROMOTION_PIECE)
        cells[move.to_sq.index] = placed

        return Board(cells), tuple(captured)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        cells: list[Piece | None] = [None] * 64
        for color in Color:
            pawn_rank = PAWN_START_RANK[color]
            back_rank = HOME_RANK[color]
            for f, pt in enumerate(BACK_RANK):
                cells[make_square(f, back_rank).index] = Piece(color, pt)
                cells[make_square(f, pawn_rank).index] = Piece(color, PieceType.PAWN)
        return cls(cells)

    @classmethod
    def from_dict(cls, pieces: Mapping[Square, Piece]) -> Board:
        cells: list[Piece | None] = [None] * 64
        for sq, piece in pieces.items():
            cells[sq.index] = piece
        return cls(cells)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
