import unittest

from game import Piece, Piezas, longest_runs

X, O, BLANK, INVALID = Piece.X, Piece.O, Piece.BLANK, Piece.INVALID


def play(game, cols):
    return [game.drop_piece(c) for c in cols]


class TestPiezasBasics(unittest.TestCase):
    def setUp(self):
        self.game = Piezas()

    def test_given_new_game_when_dropping_in_column_0_then_x_lands_at_bottom(self):
        actual = self.game.drop_piece(0)
        self.assertIs(actual, X)
        self.assertEqual('X', self.game.piece_at(0, 0))
        self.assertIs(self.game.turn, O)

    def test_given_new_game_when_dropping_left_of_board_then_invalid_and_turn_lost(self):
        actual = self.game.drop_piece(-1)
        self.assertIs(actual, INVALID)
        self.assertIs(self.game.piece_at(0, 0), BLANK)
        self.assertIs(self.game.turn, O)

    def test_given_new_game_when_dropping_right_of_board_then_invalid_and_turn_lost(self):
        self.assertIs(self.game.drop_piece(4), INVALID)
        self.assertIs(self.game.turn, O)

    def test_given_one_column_when_dropping_three_times_then_pieces_stack_upwards(self):
        self.assertEqual(play(self.game, [2, 2, 2]), [X, O, X])
        self.assertIs(self.game.piece_at(0, 2), X)
        self.assertIs(self.game.piece_at(1, 2), O)
        self.assertIs(self.game.piece_at(2, 2), X)

    def test_given_full_first_column_when_dropping_then_blank_and_turn_lost(self):
        results = play(self.game, [0, 0, 0, 0])
        self.assertIs(results[3], BLANK)
        self.assertIs(self.game.piece_at(2, 0), X)
        # The fourth drop was O's and it was lost
        self.assertIs(self.game.turn, X)

    def test_given_full_middle_column_when_dropping_then_blank_and_column_kept(self):
        results = play(self.game, [2, 2, 2, 2])
        self.assertIs(results[3], BLANK)
        self.assertEqual([self.game.piece_at(r, 2) for r in range(3)], [X, O, X])

    def test_given_new_game_when_dropping_in_three_columns_then_players_alternate(self):
        self.assertEqual(play(self.game, [1, 2, 3]), [X, O, X])
        self.assertIs(self.game.piece_at(0, 1), X)
        self.assertIs(self.game.piece_at(0, 2), O)
        self.assertIs(self.game.piece_at(0, 3), X)

    def test_given_off_board_coords_when_querying_then_invalid(self):
        for (r, c) in [(-1, 0), (3, 0), (0, -1), (0, 4), (2, 6), (3, 2)]:
            self.assertIs(self.game.piece_at(r, c), INVALID)

    def test_given_played_game_when_reset_then_blank_and_x_to_move(self):
        play(self.game, [0, 2, 1])
        self.game.reset()
        for (r, c) in self.game.board.coords():
            self.assertIs(self.game.piece_at(r, c), BLANK)
        self.assertIs(self.game.turn, X)

    def test_given_played_game_when_reset_twice_then_same_as_once(self):
        play(self.game, [3, 3, 1, -1])
        self.game.reset()
        once = self.game.board.copy()
        self.game.reset()
        self.assertEqual(self.game.board, once)
        self.assertEqual(self.game.board, Piezas().board)


class TestGameStateScenarios(unittest.TestCase):
    def test_given_empty_board_when_evaluating_then_not_over(self):
        self.assertIs(Piezas().game_state(), INVALID)

    def test_given_partly_filled_board_when_evaluating_then_not_over(self):
        g = Piezas()
        play(g, [0, 1, 2, 3, 0, 1, 2, 3, 0, 1, 2])
        self.assertIs(g.piece_at(2, 3), BLANK)
        self.assertIs(g.game_state(), INVALID)

    def test_given_drops_into_full_columns_when_evaluating_then_last_column_empty_and_not_over(self):
        g = Piezas()
        results = play(g, [0, 1, 0, 0, 2, 2, 1, 2, 1, 2, 0, 1])
        self.assertEqual(results, [X, O, X, O, X, O, X, O, X, BLANK, BLANK, BLANK])
        self.assertEqual([g.piece_at(r, 0) for r in range(3)], [X, X, O])
        self.assertEqual([g.piece_at(r, 1) for r in range(3)], [O, X, X])
        self.assertEqual([g.piece_at(r, 2) for r in range(3)], [X, O, O])
        self.assertEqual([g.piece_at(r, 3) for r in range(3)], [BLANK, BLANK, BLANK])
        self.assertIs(g.game_state(), INVALID)

    def test_given_equal_longest_lines_when_evaluating_then_tie(self):
        g = Piezas()
        play(g, [0, 1, 0, 1, 0, 1, 2, 3, 2, 3, 2, 3])
        self.assertTrue(g.board.is_full())
        self.assertEqual(longest_runs(g.board), {X: 3, O: 3})
        self.assertIs(g.game_state(), BLANK)

    def test_given_x_owns_bottom_row_when_evaluating_then_x_wins(self):
        g = Piezas()
        results = play(g, [0, 0, 1, 1, 2, 2, 3, -1, 3, 0, 1, 2, 3])
        self.assertIs(results[7], INVALID)
        self.assertEqual([g.piece_at(0, c) for c in range(4)], [X, X, X, X])
        self.assertEqual([g.piece_at(1, c) for c in range(4)], [O, O, O, X])
        self.assertEqual(longest_runs(g.board), {X: 4, O: 3})
        self.assertIs(g.game_state(), X)

    def test_given_x_forfeits_first_when_evaluating_then_o_wins(self):
        g = Piezas()
        results = play(g, [-1, 0, 0, 1, 1, 2, 2, 3, -1, 3, 0, 1, 2, 3])
        self.assertEqual(results[:2], [INVALID, O])
        self.assertEqual([g.piece_at(0, c) for c in range(4)], [O, O, O, O])
        self.assertEqual(longest_runs(g.board), {X: 3, O: 4})
        self.assertIs(g.game_state(), O)

    def test_given_full_board_when_dropping_then_forfeit_and_verdict_kept(self):
        g = Piezas()
        play(g, [0, 1, 0, 1, 0, 1, 2, 3, 2, 3, 2, 3])
        before = g.board.copy()
        for c in range(4):
            self.assertIs(g.drop_piece(c), BLANK)
        self.assertEqual(g.board.grid, before.grid)
        self.assertIs(g.game_state(), BLANK)

    def test_given_game_when_evaluating_and_querying_then_board_unchanged(self):
        g = Piezas()
        play(g, [0, 1, 2])
        before = g.board.copy()
        g.game_state()
        g.piece_at(0, 0)
        self.assertEqual(g.board, before)


if __name__ == '__main__':
    unittest.main(verbosity=2)
