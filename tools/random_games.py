import argparse
import random
import sys
from collections import Counter
from typing import List

sys.path.append('.')
import game  # type: ignore  # noqa: E402


def check_invariants(board: game.Board, drops: int) -> List[str]:
    """Returns a description of every rule the board currently breaks."""
    problems: List[str] = []
    expected_turn = game.Piece.X if drops % 2 == 0 else game.Piece.O
    if board.turn is not expected_turn:
        problems.append(f'turn is {board.turn} after {drops} drops')
    for c in range(board.cols):
        column = board.column_cells(c)
        k = sum(1 for p in column if p is not game.Piece.BLANK)
        if any(p is game.Piece.BLANK for p in column[:k]):
            problems.append(f'column {c} has a gap: {column}')
    for (r, c) in board.coords():
        if board.piece_at(r, c) is game.Piece.INVALID:
            problems.append(f'INVALID stored at {(r, c)}')
    verdict = game.game_state(board)
    if board.is_full() and verdict is game.Piece.INVALID:
        problems.append('full board reported as unfinished')
    if not board.is_full() and verdict is not game.Piece.INVALID:
        problems.append(f'unfinished board reported as {verdict!r}')
    return problems


def play_random_game(rng: random.Random, max_drops: int = 64) -> game.Board:
    board = game.Board()
    drops = 0
    while not board.is_full() and drops < max_drops:
        # One column either side of the board so forfeits happen too
        col = rng.randint(-1, board.cols)
        before = [row[:] for row in board.grid]
        result = game.drop_piece(board, col)
        drops += 1
        if result in (game.Piece.INVALID, game.Piece.BLANK) and board.grid != before:
            raise AssertionError(f'forfeited drop in column {col} changed the board')
        problems = check_invariants(board, drops)
        if problems:
            raise AssertionError('; '.join(problems))
    return board


def main():
    parser = argparse.ArgumentParser(description='Play random Piezas games and check the rules hold')
    parser.add_argument('--games', type=int, default=1000)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    tally = Counter()
    for i in range(args.games):
        try:
            board = play_random_game(rng)
        except AssertionError as e:
            print(f'game {i}: {e}', file=sys.stderr)
            return 1
        tally[game.game_state(board)] += 1
    print(f"Played {args.games} games (seed={args.seed})")
    for verdict, label in ((game.Piece.X, 'X wins'), (game.Piece.O, 'O wins'),
                           (game.Piece.BLANK, 'ties'), (game.Piece.INVALID, 'unfinished')):
        print(f"  {label}: {tally[verdict]}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
