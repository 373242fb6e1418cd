"""Attack detection and the precomputed geometry it shares with move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.enums import Color, PieceType
from rookie.core.types import SQUARES, Square

if TYPE_CHECKING:
    from rookie.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Precomputed lookup tables (indexed by Square.index) -------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in SQUARES:
        moves = [sq.offset(df, dr) for df, dr in offsets]
        targets.append(tuple(to_sq for to_sq in moves if to_sq is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            current = sq.offset(df, dr)
            while current is not None:
                ray.append(current)
                current = current.offset(df, dr)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_sources(color: Color) -> tuple[tuple[Square, ...], ...]:
    """Squares from which a *color* pawn would attack each target square."""
    behind = -1 if color == Color.WHITE else 1
    return _build_targets(((-1, behind), (1, behind)))


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_PAWN_SOURCES = (_build_pawn_sources(Color.WHITE), _build_pawn_sources(Color.BLACK))

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Attack detection ------------------------------------------------------


def is_attacked(position: Position, sq: Square, defending: Color) -> bool:
    """Is *sq* attacked by any piece of the side opposing *defending*?

    Scans outward from *sq*, ignoring whose turn it is. Each ray stops at its
    first occupied square.
    """
    board = position.board
    attacker = defending.opposite
    idx = sq.index

    for from_sq in KNIGHT_TARGETS[idx]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == attacker
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    if _ray_hits(position, ROOK_RAYS[idx], attacker, _ORTHOGONAL_SLIDERS):
        return True
    if _ray_hits(position, BISHOP_RAYS[idx], attacker, _DIAGONAL_SLIDERS):
        return True

    for from_sq in _PAWN_SOURCES[int(attacker)][idx]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == attacker
            and piece.piece_type == PieceType.PAWN
        ):
            return True

    for from_sq in KING_TARGETS[idx]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == attacker
            and piece.piece_type == PieceType.KING
        ):
            return True

    return False


def is_in_check(position: Position, color: Color) -> bool:
    """Is *color*'s king attacked? ``False`` when *color* has no king."""
    king_sq = position.board.king_square(color)
    if king_sq is None:
        return False
    return is_attacked(position, king_sq, color)


def _ray_hits(
    position: Position,
    rays: tuple[tuple[Square, ...], ...],
    attacker: Color,
    sliders: tuple[PieceType, ...],
) -> bool:
    board = position.board
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == attacker and piece.piece_type in sliders:
                return True
            break
    return False
