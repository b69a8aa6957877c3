from __future__ import annotations

from .board import Board
from .config import ROWS, COLS
from .moves import drop_piece
from .piece import Piece
from .scoring import game_state


class Piezas:
    """
    A Piezas game: a vertical board where pieces dropped in a column fall to
    the lowest empty cell. Coordinates are (row, col) with row 0 at the bottom:

        [2,0][2,1][2,2][2,3]
        [1,0][1,1][1,2][1,3]
        [0,0][0,1][0,2][0,3]

    Once every cell is filled, the player with the longest horizontal or
    vertical line of adjacent pieces wins.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS) -> None:
        self._board = Board(rows, cols)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> Piece:
        return self._board.turn

    def reset(self) -> None:
        self._board.reset()

    def drop_piece(self, col: int) -> Piece:
        return drop_piece(self._board, col)

    def piece_at(self, row: int, col: int) -> Piece:
        return self._board.piece_at(row, col)

    def game_state(self) -> Piece:
        return game_state(self._board)
