# -*- coding: utf-8 -*-
"""Sudoku puzzle generation and solving."""

__version__ = "0.1.0"

from sudoku_engine.common.constants import Difficulty
from sudoku_engine.common.exceptions import PuzzleGenerationTimeout, SudokuEngineError
from sudoku_engine.generator import PuzzleCarver, generate_puzzle, generate_solved_grid
from sudoku_engine.search import count_solutions, has_unique_solution, solve_puzzle

__all__ = [
    "Difficulty",
    "PuzzleCarver",
    "PuzzleGenerationTimeout",
    "SudokuEngineError",
    "count_solutions",
    "generate_puzzle",
    "generate_solved_grid",
    "has_unique_solution",
    "solve_puzzle",
]
