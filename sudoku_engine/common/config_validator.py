"""Validation of generator configs."""
from abc import ABC, abstractmethod
from typing import List

from sudoku_engine.common.config import GeneratorConfig
from sudoku_engine.common.constants import MIN_CLUES, TOTAL_CELLS, Difficulty
from sudoku_engine.utils.log import get_logger


class ConfigValidator(ABC):
    def __init__(self):
        self.logger = get_logger(__name__)

    @abstractmethod
    def validate(self, config: GeneratorConfig) -> None:
        pass


class TimeBudgetValidator(ConfigValidator):
    def validate(self, config: GeneratorConfig) -> None:
        if config.time_budget_ms <= 0:
            raise ValueError(f"`time_budget_ms` must be positive, got {config.time_budget_ms}")


class ClueCountValidator(ConfigValidator):
    def validate(self, config: GeneratorConfig) -> None:
        for name, clues in config.clue_counts.items():
            if not MIN_CLUES <= clues <= TOTAL_CELLS:
                raise ValueError(
                    f"Clue count for `{name}` must be in [{MIN_CLUES}, {TOTAL_CELLS}], got {clues}"
                )
        for difficulty in Difficulty:
            if difficulty.value not in config.clue_counts:
                self.logger.warning(
                    f"No clue count for `{difficulty.value}`, "
                    f"the `{Difficulty.MEDIUM.value}` target will be used."
                )


validators: List[ConfigValidator] = [
    TimeBudgetValidator(),
    ClueCountValidator(),
]


def validate_config(config: GeneratorConfig) -> GeneratorConfig:
    for validator in validators:
        validator.validate(config)
    return config
