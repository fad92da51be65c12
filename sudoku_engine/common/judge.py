"""Whole-board rule checking."""
from collections import defaultdict
from typing import Dict, Iterable, List, Set

from sudoku_engine.common.board import Board, Coordinate, is_complete
from sudoku_engine.common.constants import BOX_SIZE, EMPTY, GRID_SIZE


class SudokuJudge:
    """
    Judge Sudoku board state.
    - Finds cells clashing with another cell in their row, column or 3x3 box
    - Checks validity (no clashes)
    - Checks whether the board is solved (complete and valid)
    """

    @staticmethod
    def _units() -> Iterable[List[Coordinate]]:
        for r in range(GRID_SIZE):
            yield [(r, c) for c in range(GRID_SIZE)]

        for c in range(GRID_SIZE):
            yield [(r, c) for r in range(GRID_SIZE)]

        for br in range(0, GRID_SIZE, BOX_SIZE):
            for bc in range(0, GRID_SIZE, BOX_SIZE):
                yield [
                    (r, c)
                    for r in range(br, br + BOX_SIZE)
                    for c in range(bc, bc + BOX_SIZE)
                ]

    @staticmethod
    def find_conflicts(board: Board) -> Set[Coordinate]:
        conflicts: Set[Coordinate] = set()
        for unit in SudokuJudge._units():
            seen: Dict[int, List[Coordinate]] = defaultdict(list)
            for r, c in unit:
                v = board[r][c]
                if v != EMPTY:
                    seen[v].append((r, c))
            for cells in seen.values():
                if len(cells) > 1:
                    conflicts.update(cells)
        return conflicts

    @staticmethod
    def is_valid(board: Board) -> bool:
        return not SudokuJudge.find_conflicts(board)

    @staticmethod
    def is_solved(board: Board) -> bool:
        return is_complete(board) and SudokuJudge.is_valid(board)
