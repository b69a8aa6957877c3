from __future__ import annotations

from enum import Enum
from typing import Tuple


class Piece(str, Enum):
    """A cell value. INVALID is a return signal only and is never stored on a board."""
    BLANK = ' '
    X = 'X'
    O = 'O'
    INVALID = '?'

    @classmethod
    def parse(cls, text: str) -> 'Piece':
        """Parses a stored cell value ('X', 'O' or a blank). Rejects INVALID."""
        if isinstance(text, Piece):
            text = text.value
        if not isinstance(text, str):
            raise ValueError(f'not a piece: {text!r}')
        t = text.strip().upper()
        if t in ('', '.'):
            return cls.BLANK
        if t == 'X':
            return cls.X
        if t == 'O':
            return cls.O
        raise ValueError(f'not a piece: {text!r}')

    def __str__(self) -> str:
        return self.value


PLAYERS: Tuple[Piece, Piece] = (Piece.X, Piece.O)


def other_player(p: Piece) -> Piece:
    """Returns the opponent of a player."""
    if p is Piece.X:
        return Piece.O
    if p is Piece.O:
        return Piece.X
    raise ValueError(f'not a player: {p!r}')
