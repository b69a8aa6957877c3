from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from .config import ROWS, COLS
from .piece import Piece

Coord = Tuple[int, int]  # (row, col), row 0 is the bottom


@dataclass
class Board:
    """The vertical grid plus the player to move next.

    Cells are stored bottom-up: grid[0] is the bottom row, so the first piece
    dropped in column c lands on (0, c).
    """
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Piece]] = field(default_factory=list, init=False)
    turn: Piece = field(default=Piece.X, init=False)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f'bad board size {self.rows}x{self.cols}')
        self.reset()

    def reset(self) -> None:
        """Clears every cell and gives the move to X."""
        self.grid = [[Piece.BLANK for _ in range(self.cols)] for _ in range(self.rows)]
        self.turn = Piece.X

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def piece_at(self, r: int, c: int) -> Piece:
        """Gets the piece at a coordinate, or INVALID when it is off the board."""
        if not self.in_bounds(r, c):
            return Piece.INVALID
        return self.grid[r][c]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board, bottom row first."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def row_cells(self, r: int) -> List[Piece]:
        """Cells of a row, left to right."""
        return list(self.grid[r])

    def column_cells(self, c: int) -> List[Piece]:
        """Cells of a column, bottom to top."""
        return [self.grid[r][c] for r in range(self.rows)]

    def lines(self) -> Iterator[List[Piece]]:
        """Every row, then every column."""
        for r in range(self.rows):
            yield self.row_cells(r)
        for c in range(self.cols):
            yield self.column_cells(c)

    def count(self, piece: Piece) -> int:
        return sum(1 for (r, c) in self.coords() if self.grid[r][c] is piece)

    def is_full(self) -> bool:
        return all(cell is not Piece.BLANK for row in self.grid for cell in row)

    def copy(self) -> 'Board':
        b = Board(self.rows, self.cols)
        b.grid = [row[:] for row in self.grid]
        b.turn = self.turn
        return b

    def pretty(self) -> str:
        """Text dump of the board, top row first, with column numbers underneath."""
        lines: List[str] = []
        for r in range(self.rows - 1, -1, -1):
            row = ['.' if cell is Piece.BLANK else cell.value for cell in self.grid[r]]
            lines.append(' '.join(row))
        lines.append(' '.join(str(c) for c in range(self.cols)))
        return '\n'.join(lines)
