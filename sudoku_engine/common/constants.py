# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum, EnumMeta

from sudoku_engine.utils.log import get_logger

logger = get_logger(__name__)

# grid geometry

GRID_SIZE = 9
BOX_SIZE = 3
EMPTY = 0
TOTAL_CELLS = GRID_SIZE * GRID_SIZE
DIGITS = tuple(range(1, GRID_SIZE + 1))

# puzzle generation

DEFAULT_TIME_BUDGET_MS = 2000
MIN_CLUES = 17


class CaseInsensitiveEnumMeta(EnumMeta):
    def __getitem__(cls, name):
        return super().__getitem__(name.upper())

    def __call__(cls, value, *args, **kwargs):
        if isinstance(value, str):
            value = value.lower()
        return super().__call__(value, *args, **kwargs)


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class Difficulty(CaseInsensitiveEnum):
    """Puzzle difficulty."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def resolve(cls, value) -> "Difficulty":
        """Resolve `value` to a difficulty, falling back to MEDIUM."""
        if value is None:
            return cls.MEDIUM
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Unknown difficulty `{value}`, using `{cls.MEDIUM.value}` instead.")
            return cls.MEDIUM


DEFAULT_CLUE_COUNTS = {
    Difficulty.EASY.value: 55,
    Difficulty.MEDIUM.value: 45,
    Difficulty.HARD.value: 30,
}
