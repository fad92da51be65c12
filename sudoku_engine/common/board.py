"""Grid model and placement primitives.

A board is a list of 9 rows, each a list of 9 ints in [0, 9]; 0 marks an
empty cell. Functions here never copy implicitly: callers that must keep
their grid intact call `clone_board` once and work on the clone.
"""
from typing import Iterator, List, Optional, Tuple

from sudoku_engine.common.constants import BOX_SIZE, EMPTY, GRID_SIZE

Board = List[List[int]]
Coordinate = Tuple[int, int]


def make_empty_board() -> Board:
    return [[EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]


def clone_board(board: Board) -> Board:
    return [list(row) for row in board]


def all_coordinates() -> List[Coordinate]:
    """All 81 coordinates in row-major order."""
    return [(r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE)]


def iter_empty(board: Board) -> Iterator[Coordinate]:
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if board[r][c] == EMPTY:
                yield r, c


def find_first_empty(board: Board) -> Optional[Coordinate]:
    """Return the first empty cell in row-major order, or None if the board is full."""
    return next(iter_empty(board), None)


def is_valid_placement(board: Board, row: int, col: int, value: int) -> bool:
    """Check whether `value` can go at (row, col) without a row, column or box clash.

    The scan does not skip (row, col) itself, so the target cell must be
    empty: a filled target holding `value` reports a clash with itself.
    """
    if value in board[row]:
        return False

    for r in range(GRID_SIZE):
        if board[r][col] == value:
            return False

    br, bc = (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE
    for r in range(br, br + BOX_SIZE):
        for c in range(bc, bc + BOX_SIZE):
            if board[r][c] == value:
                return False

    return True


def count_clues(board: Board) -> int:
    return sum(1 for row in board for v in row if v != EMPTY)


def is_complete(board: Board) -> bool:
    return find_first_empty(board) is None
