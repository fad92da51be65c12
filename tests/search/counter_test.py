import unittest

from sudoku_engine.search.counter import count_solutions, has_unique_solution
from tests.tools import (
    CLASSIC_PUZZLE,
    CLASSIC_SOLUTION,
    get_empty_board,
    get_single_clue_board,
    get_unsolvable_board,
)


class TestSolutionCounter(unittest.TestCase):
    def test_unique_classic_puzzle(self):
        self.assertTrue(has_unique_solution(CLASSIC_PUZZLE))
        self.assertEqual(count_solutions(CLASSIC_PUZZLE, 2), 1)
        self.assertEqual(count_solutions(CLASSIC_PUZZLE, 5), 1)

    def test_single_clue(self):
        board = get_single_clue_board()
        self.assertEqual(count_solutions(board, 2), 2)
        self.assertFalse(has_unique_solution(board))

    def test_empty_board_is_capped(self):
        board = get_empty_board()
        self.assertEqual(count_solutions(board, 2), 2)
        self.assertEqual(count_solutions(board, 10), 10)
        self.assertFalse(has_unique_solution(board))

    def test_full_board(self):
        self.assertEqual(count_solutions(CLASSIC_SOLUTION, 2), 1)
        self.assertTrue(has_unique_solution(CLASSIC_SOLUTION))

    def test_unsolvable(self):
        self.assertEqual(count_solutions(get_unsolvable_board(), 2), 0)
        self.assertFalse(has_unique_solution(get_unsolvable_board()))

    def test_cap_of_one(self):
        self.assertEqual(count_solutions(get_empty_board(), 1), 1)
        self.assertEqual(count_solutions(CLASSIC_PUZZLE, 1), 1)

    def test_does_not_mutate_input(self):
        board = get_single_clue_board()
        count_solutions(board, 2)
        has_unique_solution(board)
        self.assertEqual(board, get_single_clue_board())

    def test_invalid_cap(self):
        with self.assertRaises(ValueError):
            count_solutions(CLASSIC_PUZZLE, 0)
