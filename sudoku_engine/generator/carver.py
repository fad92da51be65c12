"""Puzzle carving: clue removal that keeps the solution unique."""
import random
import time
from typing import Callable, Optional, Union

from sudoku_engine.common.board import Board, all_coordinates, clone_board, count_clues
from sudoku_engine.common.config import GeneratorConfig
from sudoku_engine.common.config_validator import validate_config
from sudoku_engine.common.constants import EMPTY, TOTAL_CELLS, Difficulty
from sudoku_engine.common.exceptions import PuzzleGenerationTimeout
from sudoku_engine.generator.full_grid import generate_solved_grid
from sudoku_engine.search.counter import has_unique_solution
from sudoku_engine.search.order import shuffle_in_place
from sudoku_engine.utils.log import get_logger


class PuzzleCarver:
    """
    Generates puzzles with exactly one solution.

    - Builds a random complete grid
    - Visits every cell once, in random order, tentatively emptying it
    - Keeps a removal only if the puzzle still has a unique solution
    - Stops at the difficulty's clue target, or when the cells run out

    The whole attempt is bounded by `config.time_budget_ms`; running past it
    raises `PuzzleGenerationTimeout` and nothing is returned.

    Args:
        config (Optional[GeneratorConfig]): Generation settings.
        rng (Optional[random.Random]): Random source. Defaults to one seeded
            with `config.seed`.
        clock (Callable[[], float]): Returns the current time in seconds.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.logger = get_logger(__name__)
        self.config = validate_config(config if config is not None else GeneratorConfig())
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.clock = clock

    def _check_timeout(self, start: float) -> None:
        elapsed_ms = (self.clock() - start) * 1000
        if elapsed_ms > self.config.time_budget_ms:
            self.logger.error(
                f"Puzzle generation exceeded its budget "
                f"({elapsed_ms:.0f} ms > {self.config.time_budget_ms} ms)."
            )
            raise PuzzleGenerationTimeout(elapsed_ms, self.config.time_budget_ms)

    def generate(self, difficulty: Union[Difficulty, str, None] = None) -> Board:
        """Generate a puzzle.

        Args:
            difficulty: easy, medium or hard. Defaults to `config.difficulty`;
                unrecognized values fall back to medium.

        Returns:
            Board: A new puzzle with a unique solution and at least the
            target number of clues.

        Raises:
            PuzzleGenerationTimeout: The time budget ran out.
        """
        start = self.clock()
        difficulty = Difficulty.resolve(self.config.difficulty if difficulty is None else difficulty)
        target_clues = self.config.target_clues(difficulty)

        solved = generate_solved_grid(self.rng)
        self._check_timeout(start)
        self.logger.debug(f"Solved grid ready, carving down to {target_clues} clues.")

        puzzle = clone_board(solved)
        clues_remaining = TOTAL_CELLS
        cells = shuffle_in_place(all_coordinates(), self.rng)

        for r, c in cells:
            self._check_timeout(start)
            if clues_remaining <= target_clues:
                break

            removed = puzzle[r][c]
            puzzle[r][c] = EMPTY
            if has_unique_solution(puzzle):
                clues_remaining -= 1
            else:
                puzzle[r][c] = removed

        elapsed_ms = (self.clock() - start) * 1000
        if clues_remaining > target_clues:
            self.logger.warning(
                f"Only carved down to {clues_remaining} clues (target {target_clues}) "
                f"for `{difficulty.value}`."
            )
        self.logger.info(
            f"Generated `{difficulty.value}` puzzle with {count_clues(puzzle)} clues "
            f"in {elapsed_ms:.0f} ms."
        )
        return puzzle


def generate_puzzle(
    difficulty: Union[Difficulty, str, None] = Difficulty.MEDIUM,
    config: Optional[GeneratorConfig] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """Generate a puzzle of the given difficulty with a fresh `PuzzleCarver`."""
    return PuzzleCarver(config=config, rng=rng).generate(difficulty)
