from __future__ import annotations

from typing import Iterable, List, Optional

from .board import Board
from .piece import Piece, other_player


def _check_column(col: int) -> int:
    if isinstance(col, bool) or not isinstance(col, int):
        raise TypeError(f'column must be an int, got {type(col).__name__}')
    return col


def landing_row(board: Board, col: int) -> Optional[int]:
    """Row the next piece dropped in col would occupy, or None if it cannot land."""
    col = _check_column(col)
    if col < 0 or col >= board.cols:
        return None
    for r in range(board.rows):
        if board.grid[r][col] is Piece.BLANK:
            return r
    return None


def legal_columns(board: Board) -> List[int]:
    """Columns that still accept a piece."""
    return [c for c in range(board.cols) if board.grid[board.rows - 1][c] is Piece.BLANK]


def drop_piece(board: Board, col: int) -> Piece:
    """
    Drops the current player's piece into a column and passes the turn.

    Returns the placed mark (X or O), BLANK if the column is already full, or
    INVALID if the column is off the board. The turn passes in every case:
    an illegal drop costs the player their move.
    """
    col = _check_column(col)
    if col < 0 or col >= board.cols:
        result = Piece.INVALID
    else:
        r = landing_row(board, col)
        if r is None:
            result = Piece.BLANK
        else:
            board.grid[r][col] = board.turn
            result = board.turn
    board.turn = other_player(board.turn)
    return result


def play_sequence(board: Board, cols: Iterable[int]) -> List[Piece]:
    """Drops into each column in order and collects the results."""
    return [drop_piece(board, c) for c in cols]
