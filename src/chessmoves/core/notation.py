"""FEN piece-placement parsing and serialization."""

from __future__ import annotations

import logging

from chessmoves.core.board import Board
from chessmoves.core.piece import Piece
from chessmoves.core.types import BOARD_SIZE

_LOGGER = logging.getLogger(__name__)

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field of a FEN string into a :class:`Board`.

    A complete FEN string is accepted too; only its first field is read.
    """
    fields = placement.split()
    if not fields:
        raise ValueError(f"Empty FEN placement: {placement!r}")
    text = fields[0]

    ranks = text.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {text!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - 1 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {text!r}")
                file += step
            else:
                if file >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {text!r}")
                board.place(Piece.from_char(ch, file, rank))
                file += 1
            if file > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {text!r}")
        if file != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {text!r}")

    _LOGGER.debug("Parsed placement %s", text)
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* to a FEN piece-placement field."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for file in range(BOARD_SIZE):
            piece = board[file, rank]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
