from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import env_flag
from .piece import Piece
from .piezas import Piezas
from .scoring import longest_runs

_VERDICTS = {
    Piece.X: 'X wins!',
    Piece.O: 'O wins!',
    Piece.BLANK: "It's a tie.",
    Piece.INVALID: 'Game not over.',
}


def parse_moves(text: str) -> List[int]:
    """Parses a comma or space separated list of column numbers."""
    sep = ',' if ',' in text else None
    return [int(t) for t in text.split(sep) if t.strip() != '']


def describe_drop(player: Piece, col: int, result: Piece) -> str:
    if result is Piece.INVALID:
        return f'{player} drops in column {col}: off the board, turn lost'
    if result is Piece.BLANK:
        return f'{player} drops in column {col}: column full, turn lost'
    return f'{player} drops in column {col}'


def print_verdict(game: Piezas) -> None:
    runs = longest_runs(game.board)
    print(f'Longest lines: X={runs[Piece.X]} O={runs[Piece.O]}')
    print(_VERDICTS[game.game_state()])


def replay(game: Piezas, moves: List[int], debug: bool = False) -> None:
    for col in moves:
        player = game.turn
        result = game.drop_piece(col)
        print(describe_drop(player, col, result))
        if debug:
            print(game.board.pretty(), file=sys.stderr)
    print(game.board.pretty())
    print_verdict(game)


def play(game: Piezas) -> None:
    """Hot-seat game at the terminal until the board is full."""
    print(game.board.pretty())
    while not game.board.is_full():
        text = input(f'{game.turn} to move, column: ').strip()
        try:
            col = int(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        player = game.turn
        result = game.drop_piece(col)
        print(describe_drop(player, col, result))
        print(game.board.pretty())
    print_verdict(game)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Piezas: drop pieces into a 3x4 board')
    parser.add_argument('--moves', default=None, help='Columns to replay from an empty board, e.g. 0,1,2')
    parser.add_argument('--play', action='store_true', help='Play a hot-seat game at the terminal')
    args = parser.parse_args(argv)

    debug = env_flag('PIEZAS_DEBUG')
    game = Piezas()

    if args.moves is not None:
        try:
            moves = parse_moves(args.moves)
        except ValueError:
            print(f'error: bad move list: {args.moves!r}', file=sys.stderr)
            return 2
        replay(game, moves, debug=debug)
        return 0

    if args.play:
        try:
            play(game)
        except (EOFError, KeyboardInterrupt):
            print('\nGame abandoned.')
            return 1
        return 0

    print(game.board.pretty())
    return 0


if __name__ == '__main__':
    sys.exit(main())
