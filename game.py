from __future__ import annotations

# Facade module that re-exports Piezas core functionality.
# Used by the Flask app, the tools and the tests.
# Single-responsibility modules live under piezas_core/*.

from piezas_core.config import ROWS, COLS, env_flag
from piezas_core.piece import Piece, PLAYERS, other_player
from piezas_core.board import Board, Coord
from piezas_core.moves import drop_piece, landing_row, legal_columns, play_sequence
from piezas_core.scoring import longest_runs, game_state
from piezas_core.state import GameState
from piezas_core.piezas import Piezas

__all__ = [
    'ROWS',
    'COLS',
    'env_flag',
    'Piece',
    'PLAYERS',
    'other_player',
    'Board',
    'Coord',
    'drop_piece',
    'landing_row',
    'legal_columns',
    'play_sequence',
    'longest_runs',
    'game_state',
    'GameState',
    'Piezas',
    'main',
]


def main() -> None:
    # CLI driver delegated to piezas_core.cli
    from piezas_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
