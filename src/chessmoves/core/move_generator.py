"""Per-piece move validation and move generation.

Moves are geometric only: no check detection, castling, en passant,
promotion or turn order. The board is queried through :class:`BoardQuery`
and never mutated.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessmoves.core.enums import PieceType
from chessmoves.core.types import (
    MAX_INDEX,
    PAWN_DIRECTION,
    PAWN_START_RANK,
    Coordinate,
)

if TYPE_CHECKING:
    from chessmoves.core.board import BoardQuery
    from chessmoves.core.piece import Piece


ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (1, 1), (1, -1), (-1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

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

# Candidate squares for a pawn, in both rank directions. Only the ones the
# validator accepts are ever generated.
PAWN_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 1),
    (-1, -1),
    (0, 1),
    (0, 2),
    (0, -1),
    (0, -2),
    (1, 1),
    (1, -1),
)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _edge_distance(index: int, step: int) -> int:
    """Squares available from *index* before leaving the board along *step*."""
    if step > 0:
        return MAX_INDEX - index
    if step < 0:
        return index
    return MAX_INDEX


class MoveGenerator:
    """Answers move queries for single pieces against a read-only board."""

    __slots__ = ("_board",)

    def __init__(self, board: BoardQuery) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def is_valid_move(self, piece: Piece, file: int, rank: int) -> bool:
        """Can *piece* move from its coordinate to ``(file, rank)``?

        A piece that is not on the board has no moves. Off-board targets, the
        piece's own square and squares held by the piece's own color are
        always rejected.
        """
        board = self._board
        if not board.is_valid_position(piece.file, piece.rank):
            return False
        if not board.is_valid_position(file, rank):
            return False
        if file == piece.file and rank == piece.rank:
            return False
        if board.is_occupied(file, rank):
            if board.get_piece(file, rank).color == piece.color:
                return False
        return _VALIDATORS[piece.piece_type](self, piece, file, rank)

    def possible_moves(self, piece: Piece) -> list[Coordinate]:
        """Every square *piece* can move to, in a deterministic order."""
        if not self._board.is_valid_position(piece.file, piece.rank):
            return []
        return _GENERATORS[piece.piece_type](self, piece)

    # -- Validators (private) ----------------------------------------------

    def _is_path_clear(self, piece: Piece, file: int, rank: int) -> bool:
        """All squares strictly between the piece and the target are empty."""
        df = file - piece.file
        dr = rank - piece.rank
        step_f = _sign(df)
        step_r = _sign(dr)
        board = self._board
        for i in range(1, max(abs(df), abs(dr))):
            if board.is_occupied(piece.file + i * step_f, piece.rank + i * step_r):
                return False
        return True

    def _valid_rook(self, piece: Piece, file: int, rank: int) -> bool:
        if file != piece.file and rank != piece.rank:
            return False
        return self._is_path_clear(piece, file, rank)

    def _valid_bishop(self, piece: Piece, file: int, rank: int) -> bool:
        if abs(file - piece.file) != abs(rank - piece.rank):
            return False
        return self._is_path_clear(piece, file, rank)

    def _valid_queen(self, piece: Piece, file: int, rank: int) -> bool:
        df = abs(file - piece.file)
        dr = abs(rank - piece.rank)
        if df != dr and df != 0 and dr != 0:
            return False
        return self._is_path_clear(piece, file, rank)

    def _valid_knight(self, piece: Piece, file: int, rank: int) -> bool:
        df = abs(file - piece.file)
        dr = abs(rank - piece.rank)
        return (df, dr) in ((1, 2), (2, 1))

    def _valid_king(self, piece: Piece, file: int, rank: int) -> bool:
        return abs(file - piece.file) <= 1 and abs(rank - piece.rank) <= 1

    def _valid_pawn(self, piece: Piece, file: int, rank: int) -> bool:
        board = self._board
        direction = PAWN_DIRECTION[piece.color]
        df = file - piece.file
        dr = rank - piece.rank

        if dr == direction:
            if df == 0:
                return not board.is_occupied(file, rank)
            if abs(df) == 1:
                # Capture only; own-color targets were rejected already.
                return board.is_occupied(file, rank)
            return False

        if dr == 2 * direction and df == 0:
            return (
                piece.rank == PAWN_START_RANK[piece.color]
                and not board.is_occupied(file, piece.rank + direction)
                and not board.is_occupied(file, rank)
            )

        return False

    # -- Generators (private) ----------------------------------------------

    def _gen_sliding(
        self, piece: Piece, directions: tuple[tuple[int, int], ...]
    ) -> list[Coordinate]:
        board = self._board
        moves: list[Coordinate] = []
        for df, dr in directions:
            length = min(_edge_distance(piece.file, df), _edge_distance(piece.rank, dr))
            for i in range(1, length + 1):
                f = piece.file + i * df
                r = piece.rank + i * dr
                if board.is_occupied(f, r):
                    if board.get_piece(f, r).color != piece.color:
                        moves.append(Coordinate(f, r))
                    break
                moves.append(Coordinate(f, r))
        return moves

    def _gen_offsets(
        self, piece: Piece, offsets: tuple[tuple[int, int], ...]
    ) -> list[Coordinate]:
        board = self._board
        moves: list[Coordinate] = []
        origin = piece.coordinate
        for df, dr in offsets:
            target = origin.offset(df, dr)
            if not board.is_valid_position(*target):
                continue
            if board.is_occupied(*target):
                if board.get_piece(*target).color == piece.color:
                    continue
            moves.append(target)
        return moves

    def _gen_rook(self, piece: Piece) -> list[Coordinate]:
        return self._gen_sliding(piece, ROOK_DIRS)

    def _gen_bishop(self, piece: Piece) -> list[Coordinate]:
        return self._gen_sliding(piece, BISHOP_DIRS)

    def _gen_queen(self, piece: Piece) -> list[Coordinate]:
        return self._gen_sliding(piece, QUEEN_DIRS)

    def _gen_knight(self, piece: Piece) -> list[Coordinate]:
        return self._gen_offsets(piece, KNIGHT_OFFSETS)

    def _gen_king(self, piece: Piece) -> list[Coordinate]:
        return self._gen_offsets(piece, KING_OFFSETS)

    def _gen_pawn(self, piece: Piece) -> list[Coordinate]:
        origin = piece.coordinate
        return [
            target
            for target in (origin.offset(df, dr) for df, dr in PAWN_OFFSETS)
            if self.is_valid_move(piece, *target)
        ]


_VALIDATORS: dict[PieceType, Callable[[MoveGenerator, Piece, int, int], bool]] = {
    PieceType.ROOK: MoveGenerator._valid_rook,
    PieceType.KNIGHT: MoveGenerator._valid_knight,
    PieceType.BISHOP: MoveGenerator._valid_bishop,
    PieceType.QUEEN: MoveGenerator._valid_queen,
    PieceType.KING: MoveGenerator._valid_king,
    PieceType.PAWN: MoveGenerator._valid_pawn,
}

_GENERATORS: dict[PieceType, Callable[[MoveGenerator, Piece], list[Coordinate]]] = {
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
    PieceType.PAWN: MoveGenerator._gen_pawn,
}
