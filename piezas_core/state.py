from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .board import Board
from .config import ROWS, COLS
from .piece import Piece, PLAYERS


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a board: dimensions, cells and the player to move."""
    rows: int
    cols: int
    grid: Tuple[Piece, ...]  # row-major, bottom row first, length == rows * cols
    turn: Piece

    @classmethod
    def initial(cls, rows: int = ROWS, cols: int = COLS) -> 'GameState':
        return cls.from_board(Board(rows, cols))

    @classmethod
    def from_board(cls, board: Board) -> 'GameState':
        grid = tuple(cell for row in board.grid for cell in row)
        return cls(rows=board.rows, cols=board.cols, grid=grid, turn=board.turn)

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.cols + c

    def piece_at(self, r: int, c: int) -> Piece:
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            return Piece.INVALID
        return self.grid[self.index(r, c)]

    def validate(self) -> None:
        """Raises ValueError unless the snapshot could have come from real play."""
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f'bad board size {self.rows}x{self.cols}')
        if len(self.grid) != self.rows * self.cols:
            raise ValueError(f'grid has {len(self.grid)} cells, expected {self.rows * self.cols}')
        if not isinstance(self.turn, Piece) or self.turn not in PLAYERS:
            raise ValueError(f'turn must be X or O, got {self.turn!r}')
        for i, cell in enumerate(self.grid):
            if not isinstance(cell, Piece) or cell is Piece.INVALID:
                raise ValueError(f'bad cell {cell!r} at index {i}')
        for c in range(self.cols):
            seen_blank = False
            for r in range(self.rows):
                cell = self.piece_at(r, c)
                if cell is Piece.BLANK:
                    seen_blank = True
                elif seen_blank:
                    raise ValueError(f'floating piece at {(r, c)}')

    def to_board(self) -> Board:
        """Builds a fresh, independent Board holding this snapshot."""
        self.validate()
        board = Board(self.rows, self.cols)
        for (r, c) in board.coords():
            board.grid[r][c] = self.grid[self.index(r, c)]
        board.turn = self.turn
        return board
