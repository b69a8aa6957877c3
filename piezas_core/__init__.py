"""
Piezas core Python package.

Pure rule logic for the Piezas board game; no I/O happens here.
Modules:
- piece.py: Piece, other_player
- board.py: Board, Coord
- moves.py: drop_piece, landing_row, legal_columns, play_sequence
- scoring.py: longest_runs, game_state
- piezas.py: Piezas, the reset / drop_piece / piece_at / game_state contract
- state.py: GameState, immutable snapshots for drivers
- cli.py: console driver
"""
