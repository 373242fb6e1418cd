"""Square value type and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

Every :class:`Square` is interned in :data:`SQUARES`; neighbour lookups go
through :meth:`Square.offset` which returns ``None`` instead of building an
off-board square.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate, file and rank both in ``0..7``."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise ValueError(f"Square out of range: file={self.file} rank={self.rank}")

    @property
    def index(self) -> int:
        """Slot in a 64-element board array (``rank * 8 + file``)."""
        return self.rank * 8 + self.file

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``'e4'``."""
        return chr(ord("a") + self.file) + str(self.rank + 1)

    def offset(self, df: int, dr: int) -> Square | None:
        """Square shifted by (*df*, *dr*), or ``None`` when it leaves the board."""
        f = self.file + df
        r = self.rank + dr
        if 0 <= f < 8 and 0 <= r < 8:
            return SQUARES[r * 8 + f]
        return None

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not 0 <= index < 64:
            raise ValueError(f"Square index out of range: {index}")
        return SQUARES[index]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Square({self.name})"


def make_square(file: int, rank: int) -> Square:
    """Interned square for *file* (0–7) and *rank* (0–7)."""
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"Square out of range: file={file} rank={rank}")
    return SQUARES[rank * 8 + file]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(e4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(ord(name[0]) - ord("a"), int(name[1]) - 1)


SQUARES: tuple[Square, ...] = tuple(Square(i & 7, i >> 3) for i in range(64))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[56:64]
