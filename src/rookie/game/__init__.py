"""Game layer: history of committed positions on top of the rules core."""

from rookie.game.history import GameHistory, MoveRecord

__all__ = ["GameHistory", "MoveRecord"]
