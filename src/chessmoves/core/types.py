"""Coordinate type and board geometry helpers.

Coordinates are ``(file, rank)`` pairs, both zero-based:
    (0, 0) = a1, (7, 0) = h1, (0, 7) = a8, (7, 7) = h8
"""

from __future__ import annotations

from typing import NamedTuple

from chessmoves.core.enums import Color

BOARD_SIZE = 8
MIN_INDEX = 0
MAX_INDEX = BOARD_SIZE - 1

# Rank step of a pawn advance, per color.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


class Coordinate(NamedTuple):
    """A square on the board as ``(file, rank)``."""

    file: int
    rank: int

    def offset(self, df: int, dr: int) -> Coordinate:
        """Coordinate shifted by *df* files and *dr* ranks (may be off-board)."""
        return Coordinate(self.file + df, self.rank + dr)

    def __str__(self) -> str:
        if not is_valid_position(self.file, self.rank):
            return f"({self.file}, {self.rank})"
        return coordinate_name(self)


def is_valid_position(file: int, rank: int) -> bool:
    """Both indexes lie in ``[0, 7]``."""
    return MIN_INDEX <= file <= MAX_INDEX and MIN_INDEX <= rank <= MAX_INDEX


def coordinate_name(coord: Coordinate) -> str:
    """Human-readable name, e.g. ``(4, 1)`` → ``'e2'``."""
    return chr(ord("a") + coord.file) + str(coord.rank + 1)


def parse_coordinate(name: str) -> Coordinate:
    """Parse square name, e.g. ``'e4'`` → ``Coordinate(4, 3)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(ord(name[0]) - ord("a"), int(name[1]) - 1)


def all_coordinates() -> list[Coordinate]:
    """Every on-board coordinate, rank by rank from a1."""
    return [Coordinate(f, r) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(f, 7) for f in range(8))
