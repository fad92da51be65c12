# -*- coding: utf-8 -*-
"""Backtracking search over Sudoku boards."""
from .counter import count_solutions, has_unique_solution
from .order import CANDIDATE_ORDERS, CandidateOrder, get_candidate_order, shuffle_in_place
from .solver import solve_puzzle

__all__ = [
    "CANDIDATE_ORDERS",
    "CandidateOrder",
    "get_candidate_order",
    "shuffle_in_place",
    "solve_puzzle",
    "count_solutions",
    "has_unique_solution",
]
