import itertools
import random
import unittest

from sudoku_engine.common.board import count_clues
from sudoku_engine.common.config import GeneratorConfig
from sudoku_engine.common.exceptions import PuzzleGenerationTimeout, SudokuEngineError
from sudoku_engine.common.judge import SudokuJudge
from sudoku_engine.generator.carver import PuzzleCarver, generate_puzzle
from sudoku_engine.search.counter import has_unique_solution
from sudoku_engine.search.solver import solve_puzzle

# generous budget so slow machines do not hit the timeout
GENEROUS_BUDGET_MS = 600_000


def get_config(**kwargs) -> GeneratorConfig:
    kwargs.setdefault("time_budget_ms", GENEROUS_BUDGET_MS)
    return GeneratorConfig(**kwargs)


class TestPuzzleCarver(unittest.TestCase):
    def _check_puzzle(self, puzzle, min_clues):
        self.assertEqual(len(puzzle), 9)
        self.assertTrue(all(len(row) == 9 for row in puzzle))
        self.assertTrue(all(0 <= v <= 9 for row in puzzle for v in row))
        self.assertTrue(SudokuJudge.is_valid(puzzle))
        self.assertTrue(has_unique_solution(puzzle))
        self.assertGreaterEqual(count_clues(puzzle), min_clues)

        solution = solve_puzzle(puzzle)
        self.assertTrue(SudokuJudge.is_solved(solution))
        for r in range(9):
            for c in range(9):
                if puzzle[r][c] != 0:
                    self.assertEqual(puzzle[r][c], solution[r][c])

    def test_difficulties(self):
        carver = PuzzleCarver(get_config(), rng=random.Random(123))
        for difficulty, min_clues in [("easy", 55), ("medium", 45), ("hard", 30)]:
            with self.subTest(difficulty=difficulty):
                puzzle = carver.generate(difficulty)
                self._check_puzzle(puzzle, min_clues)

    def test_easy_reaches_target(self):
        # 26 removals out of 81 candidate cells
        puzzle = PuzzleCarver(get_config(), rng=random.Random(7)).generate("easy")
        self.assertEqual(count_clues(puzzle), 55)

    def test_unreachable_target_returns_best_effort(self):
        # random removal orders stop well above 17 clues
        config = get_config(clue_counts={"easy": 55, "medium": 45, "hard": 17})
        carver = PuzzleCarver(config, rng=random.Random(31))
        with self.assertLogs("sudoku_engine", level="WARNING") as cm:
            puzzle = carver.generate("hard")
        self.assertTrue(any("Only carved down to" in line for line in cm.output))
        self.assertGreater(count_clues(puzzle), 17)
        self._check_puzzle(puzzle, 17)

    def test_default_budget(self):
        for difficulty, min_clues in [("easy", 55), ("medium", 45), ("hard", 30)]:
            with self.subTest(difficulty=difficulty):
                self._check_puzzle(generate_puzzle(difficulty), min_clues)

    def test_unknown_difficulty_uses_medium(self):
        carver = PuzzleCarver(get_config(), rng=random.Random(5))
        with self.assertLogs("sudoku_engine", level="WARNING"):
            puzzle = carver.generate("extreme")
        self._check_puzzle(puzzle, 45)

    def test_default_difficulty_from_config(self):
        carver = PuzzleCarver(get_config(difficulty="easy"), rng=random.Random(8))
        puzzle = carver.generate()
        self._check_puzzle(puzzle, 55)
        self.assertEqual(count_clues(puzzle), 55)

    def test_seeded_generation_is_reproducible(self):
        a = PuzzleCarver(get_config(seed=17)).generate("medium")
        b = PuzzleCarver(get_config(seed=17)).generate("medium")
        self.assertEqual(a, b)

    def test_puzzles_vary(self):
        puzzles = [generate_puzzle("easy", config=get_config()) for _ in range(5)]
        self.assertEqual(len({str(p) for p in puzzles}), 5)

    def test_timeout(self):
        # every clock reading is one second after the previous one
        ticks = itertools.count()
        carver = PuzzleCarver(
            get_config(time_budget_ms=2500),
            rng=random.Random(0),
            clock=lambda: float(next(ticks)),
        )
        with self.assertLogs("sudoku_engine", level="ERROR"):
            with self.assertRaises(PuzzleGenerationTimeout) as cm:
                carver.generate("hard")
        self.assertEqual(cm.exception.budget_ms, 2500)
        self.assertGreater(cm.exception.elapsed_ms, 2500)
        self.assertIsInstance(cm.exception, TimeoutError)
        self.assertIsInstance(cm.exception, SudokuEngineError)

    def test_timeout_after_full_grid(self):
        ticks = iter([0.0, 5.0])
        carver = PuzzleCarver(
            get_config(time_budget_ms=2000), rng=random.Random(0), clock=lambda: next(ticks)
        )
        with self.assertLogs("sudoku_engine", level="ERROR"):
            with self.assertRaises(PuzzleGenerationTimeout):
                carver.generate()

    def test_frozen_clock_never_times_out(self):
        carver = PuzzleCarver(
            get_config(time_budget_ms=1), rng=random.Random(4), clock=lambda: 0.0
        )
        self._check_puzzle(carver.generate("easy"), 55)

    def test_invalid_config(self):
        with self.assertRaises(ValueError):
            PuzzleCarver(get_config(time_budget_ms=-1))
