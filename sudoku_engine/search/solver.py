"""Depth-first backtracking solver."""
from typing import Optional

from sudoku_engine.common.board import (
    Board,
    clone_board,
    find_first_empty,
    is_valid_placement,
)
from sudoku_engine.common.constants import EMPTY
from sudoku_engine.search.order import CandidateOrder, get_candidate_order


def fill_board(board: Board, order: CandidateOrder) -> bool:
    """Fill the empty cells of `board` in place.

    Cells are visited in row-major order and, at each one, digits are tried in
    the sequence given by `order`. On failure every cell filled here is reset,
    so `board` is left as it was passed in.

    Returns:
        bool: True if the board was completed.
    """
    cell = find_first_empty(board)
    if cell is None:
        return True

    r, c = cell
    for v in order.candidates():
        if is_valid_placement(board, r, c, v):
            board[r][c] = v
            if fill_board(board, order):
                return True
            board[r][c] = EMPTY

    return False


def solve_puzzle(board: Board) -> Optional[Board]:
    """Solve `board` without touching it.

    Digits are tried in ascending order, so a given input always yields the
    same solution.

    Args:
        board (Board): A 9x9 grid, 0 for empty cells. Filled cells must not
            already clash with each other.

    Returns:
        Optional[Board]: A new, fully filled board, or None if `board` has no
        solution.
    """
    working = clone_board(board)
    if fill_board(working, get_candidate_order("ascending")):
        return working
    return None
