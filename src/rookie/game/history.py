"""Game history: the committed positions of one game, for review and undo."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rookie.core.enums import Color, GameStatus
from rookie.core.fen import STARTING_FEN, position_from_fen, position_to_fen
from rookie.core.move import Move
from rookie.core.move_generator import MoveGenerator
from rookie.core.piece import Piece
from rookie.core.position import Position
from rookie.core.transition import apply_move
from rookie.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    position: Position  # position after the move

    @property
    def was_check(self) -> bool:
        return self.position.is_check

    @property
    def was_capture(self) -> bool:
        return self.move.is_capture


@dataclass
class GameHistory:
    """Sequence of positions produced by committed moves.

    Positions are immutable, so undo is just dropping the last record and
    review is indexing into the list. No clocks, no players, no UI.
    """

    start_position: Position = field(default_factory=Position.initial, init=False)
    records: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        self.start_position = position_from_fen(self.start_fen)
        self.records.clear()

    # ── Moves ────────────────────────────────────────────────────────────

    def play(self, move: Move) -> MoveRecord:
        """Validate and commit *move*.

        Raises :class:`~rookie.core.transition.IllegalMoveError` for a move
        that is not legal in the current position or a game that is over.
        """
        after = apply_move(self.position, move, validate=True)
        record = MoveRecord(move=move, position=after)
        self.records.append(record)
        if after.is_terminal:
            _LOGGER.info("Game over after %s: %s", move, after.status.name)
        return record

    def undo(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.records:
            return None
        return self.records.pop().move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        if self.records:
            return self.records[-1].position
        return self.start_position

    def position_at(self, ply: int) -> Position:
        """Position after *ply* half-moves (0 is the start position)."""
        if not (0 <= ply <= len(self.records)):
            raise ValueError(f"Ply out of range: {ply} (0..{len(self.records)})")
        if ply == 0:
            return self.start_position
        return self.records[ply - 1].position

    def legal_moves(self, sq: Square) -> list[Move]:
        """Legal moves for the piece on *sq* in the current position."""
        return MoveGenerator(self.position).legal_moves(sq)

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def status(self) -> GameStatus:
        return self.position.status

    @property
    def is_over(self) -> bool:
        return self.position.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.records)

    @property
    def captured_pieces(self) -> tuple[Piece, ...]:
        return self.position.captured_pieces

    @property
    def fen(self) -> str:
        return position_to_fen(self.position)
