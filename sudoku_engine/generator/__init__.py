"""Puzzle generation."""
from .carver import PuzzleCarver, generate_puzzle
from .full_grid import generate_solved_grid

__all__ = [
    "PuzzleCarver",
    "generate_puzzle",
    "generate_solved_grid",
]
