"""Random complete grids."""
import random
from typing import Optional

from sudoku_engine.common.board import Board, make_empty_board
from sudoku_engine.search.order import get_candidate_order
from sudoku_engine.search.solver import fill_board


def generate_solved_grid(rng: Optional[random.Random] = None) -> Board:
    """Generate a random, fully filled, valid board.

    Same backtracking as the solver, but digits are tried in a fresh random
    order at every cell, so successive calls give different grids. An empty
    board always has a completion, so this never fails.

    Args:
        rng (Optional[random.Random]): Random source. Pass a seeded instance
            for reproducible grids.
    """
    board = make_empty_board()
    fill_board(board, get_candidate_order("shuffle", rng))
    return board
