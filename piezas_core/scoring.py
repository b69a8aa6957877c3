from __future__ import annotations

from typing import Dict, Iterable

from .board import Board
from .piece import Piece, PLAYERS


def _sweep(cells: Iterable[Piece], best: Dict[Piece, int]) -> None:
    """Updates best with the longest run of each player along one line."""
    owner = Piece.BLANK
    length = 0
    for cell in cells:
        if cell is owner:
            length += 1
        else:
            if owner in best and length > best[owner]:
                best[owner] = length
            owner = cell
            length = 1
    # The run still open at the end of the line
    if owner in best and length > best[owner]:
        best[owner] = length


def longest_runs(board: Board) -> Dict[Piece, int]:
    """
    Length of each player's longest run along any single row or column.
    Rows are swept left to right and columns bottom to top; diagonals do not count.
    Blank cells break runs and are never scored.
    """
    best: Dict[Piece, int] = {p: 0 for p in PLAYERS}
    for line in board.lines():
        _sweep(line, best)
    return best


def game_state(board: Board) -> Piece:
    """
    Verdict for the board: INVALID while any cell is blank, otherwise the player
    with the strictly longest run, or BLANK for a tie.
    """
    if not board.is_full():
        return Piece.INVALID
    best = longest_runs(board)
    x_max, o_max = best[Piece.X], best[Piece.O]
    if x_max > o_max:
        return Piece.X
    if o_max > x_max:
        return Piece.O
    return Piece.BLANK
