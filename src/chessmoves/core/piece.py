"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move_generator import MoveGenerator
from chessmoves.core.types import Coordinate

if TYPE_CHECKING:
    from chessmoves.core.board import BoardQuery

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

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a colored piece standing on a coordinate.

    The piece does not hold a board. Move queries take the board as an
    argument, and the board is responsible for keeping ``(file, rank)`` equal
    to the square the piece is stored under.
    """

    color: Color
    piece_type: PieceType
    file: int
    rank: int

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.file, self.rank)

    # ── Movement ─────────────────────────────────────────────────────────

    def is_valid_move(self, board: BoardQuery, file: int, rank: int) -> bool:
        """Can this piece move to ``(file, rank)`` on *board*?"""
        return MoveGenerator(board).is_valid_move(self, file, rank)

    def possible_moves(self, board: BoardQuery) -> list[Coordinate]:
        """All squares this piece can move to on *board*, recomputed per call."""
        return MoveGenerator(board).possible_moves(self)

    # ── Copies ───────────────────────────────────────────────────────────

    def clone(self) -> Piece:
        """Independent copy, not yet placed on any board."""
        return replace(self)

    def moved_to(self, file: int, rank: int) -> Piece:
        """Copy of this piece standing on ``(file, rank)``."""
        return replace(self, file=file, rank=rank)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, file: int, rank: int) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, file, rank)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def name(self) -> str:
        """Readable name, e.g. 'white Knight'."""
        return f"{self.color} {self.piece_type.label}"
