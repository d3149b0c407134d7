"""Core domain layer — single-piece move legality with zero external dependencies.

Quick start::

    from chessmoves.core import Board, Color, Piece, PieceType

    board = Board()
    rook = Piece(Color.WHITE, PieceType.ROOK, 0, 0)
    board.place(rook)
    rook.is_valid_move(board, 0, 5)   # True
    rook.possible_moves(board)        # [Coordinate(file=1, rank=0), ...]
"""

from chessmoves.core.board import Board, BoardQuery
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move_generator import MoveGenerator
from chessmoves.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessmoves.core.piece import Piece
from chessmoves.core.types import (
    BOARD_SIZE,
    Coordinate,
    all_coordinates,
    coordinate_name,
    is_valid_position,
    parse_coordinate,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "all_coordinates",
    "coordinate_name",
    "is_valid_position",
    "parse_coordinate",
    # Domain objects
    "Board",
    "BoardQuery",
    "MoveGenerator",
    "Piece",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
