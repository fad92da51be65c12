"""Exceptions raised by the engine."""


class SudokuEngineError(Exception):
    """Base class of all engine errors."""


class PuzzleGenerationTimeout(SudokuEngineError, TimeoutError):
    """Puzzle generation ran past its wall-clock budget.

    The attempt is abandoned as a whole; callers may simply try again.
    """

    def __init__(self, elapsed_ms: float, budget_ms: int):
        self.elapsed_ms = elapsed_ms
        self.budget_ms = budget_ms
        super().__init__(
            f"Puzzle generation timed out after {elapsed_ms:.0f} ms (budget: {budget_ms} ms)"
        )
