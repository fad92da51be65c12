"""Capped solution counting."""
from sudoku_engine.common.board import (
    Board,
    clone_board,
    find_first_empty,
    is_valid_placement,
)
from sudoku_engine.common.constants import EMPTY
from sudoku_engine.search.order import get_candidate_order


def count_solutions(board: Board, max_count: int) -> int:
    """Count the solutions of `board`, stopping as soon as `max_count` are found.

    Args:
        board (Board): A 9x9 grid, 0 for empty cells. Not modified.
        max_count (int): Cap on the count, at least 1.

    Returns:
        int: The number of solutions, in [0, max_count].
    """
    if max_count < 1:
        raise ValueError(f"max_count must be a positive integer, got {max_count}")

    working = clone_board(board)
    order = get_candidate_order("ascending")
    count = 0

    def _search() -> bool:
        # returns True once the cap is hit, unwinding the whole search
        nonlocal count
        cell = find_first_empty(working)
        if cell is None:
            count += 1
            return count >= max_count

        r, c = cell
        for v in order.candidates():
            if is_valid_placement(working, r, c, v):
                working[r][c] = v
                done = _search()
                working[r][c] = EMPTY
                if done:
                    return True
        return False

    _search()
    return count


def has_unique_solution(board: Board) -> bool:
    """True if `board` has exactly one solution. Never enumerates more than two."""
    return count_solutions(board, 2) == 1
