"""Core enumerations for piece colors and types."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece variants. Fixed for the lifetime of a piece."""

    ROOK = 0
    KNIGHT = 1
    BISHOP = 2
    QUEEN = 3
    KING = 4
    PAWN = 5

    @property
    def label(self) -> str:
        """Display name, e.g. ``PieceType.ROOK.label == 'Rook'``."""
        return self.name.capitalize()
