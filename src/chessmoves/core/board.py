"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

import logging
from typing import Protocol

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import BOARD_SIZE, Coordinate, is_valid_position

_LOGGER = logging.getLogger(__name__)


class BoardQuery(Protocol):
    """Read-only board view consumed by the move engine."""

    def is_valid_position(self, file: int, rank: int) -> bool:
        """Both indexes lie on the board."""
        ...

    def is_occupied(self, file: int, rank: int) -> bool:
        """Some piece stands on ``(file, rank)``. Caller bounds-checks first."""
        ...

    def get_piece(self, file: int, rank: int) -> Piece:
        """Occupant of ``(file, rank)``. Caller checks occupancy first."""
        ...


class Board:
    """Mutable 8x8 grid holding at most one piece per square.

    Every stored piece's coordinate equals the square it is stored under;
    :meth:`place`, :meth:`remove` and :meth:`move` keep that in sync.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        # [rank][file] -> occupant
        self._squares: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- BoardQuery -----------------------------------------------------------

    def is_valid_position(self, file: int, rank: int) -> bool:
        return is_valid_position(file, rank)

    def is_occupied(self, file: int, rank: int) -> bool:
        return self._squares[rank][file] is not None

    def get_piece(self, file: int, rank: int) -> Piece:
        piece = self._squares[rank][file]
        if piece is None:
            raise ValueError(f"No piece on {Coordinate(file, rank)}")
        return piece

    # -- Element access -------------------------------------------------------

    def __getitem__(self, coord: tuple[int, int]) -> Piece | None:
        file, rank = coord
        return self._squares[rank][file]

    def pieces(self, color: Color) -> list[Piece]:
        """All pieces of *color*, rank by rank from a1."""
        return [
            piece
            for row in self._squares
            for piece in row
            if piece is not None and piece.color == color
        ]

    # -- Mutation / copying ---------------------------------------------------

    def place(self, piece: Piece) -> None:
        """Put *piece* on the square named by its own coordinate."""
        if not is_valid_position(piece.file, piece.rank):
            raise ValueError(
                f"Cannot place {piece.name} off the board at {piece.coordinate}"
            )
        if self._squares[piece.rank][piece.file] is not None:
            raise ValueError(f"Square {piece.coordinate} is already occupied")
        self._squares[piece.rank][piece.file] = piece
        _LOGGER.debug("Placed %s on %s", piece.name, piece.coordinate)

    def remove(self, file: int, rank: int) -> Piece:
        """Take the occupant off ``(file, rank)`` and return it."""
        piece = self.get_piece(file, rank)
        self._squares[rank][file] = None
        _LOGGER.debug("Removed %s from %s", piece.name, piece.coordinate)
        return piece

    def move(self, piece: Piece, file: int, rank: int) -> Piece:
        """Relocate *piece* to ``(file, rank)``, capturing any occupant.

        Legality is not checked here; ask the piece first. Returns the
        relocated piece.
        """
        on_board = is_valid_position(piece.file, piece.rank)
        if not on_board or self[piece.coordinate] != piece:
            raise ValueError(f"{piece.name} is not on {piece.coordinate}")
        if not is_valid_position(file, rank):
            raise ValueError(f"Target {Coordinate(file, rank)} is off the board")
        captured = self._squares[rank][file]
        moved = piece.moved_to(file, rank)
        self._squares[piece.rank][piece.file] = None
        self._squares[rank][file] = moved
        if captured is not None:
            _LOGGER.debug(
                "%s captured %s on %s", piece.name, captured.name, moved.coordinate
            )
        _LOGGER.debug(
            "Moved %s %s -> %s", piece.name, piece.coordinate, moved.coordinate
        )
        return moved

    def copy(self) -> Board:
        b = Board()
        b._squares = [row.copy() for row in self._squares]
        return b

    def clear(self) -> None:
        self._squares = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory --------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(BOARD_SIZE):
            b.place(Piece(Color.WHITE, PieceType.PAWN, f, 1))
            b.place(Piece(Color.BLACK, PieceType.PAWN, f, 6))

        back_rank = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for f, pt in enumerate(back_rank):
            b.place(Piece(Color.WHITE, pt, f, 0))
            b.place(Piece(Color.BLACK, pt, f, 7))
        return b

    # -- Dunder helpers -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self._squares[rank][file]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
