# -*- coding: utf-8 -*-
"""Configs for puzzle generation."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from omegaconf import OmegaConf

from sudoku_engine.common.constants import (
    DEFAULT_CLUE_COUNTS,
    DEFAULT_TIME_BUDGET_MS,
    Difficulty,
)


@dataclass
class GeneratorConfig:
    """Config for `PuzzleCarver`."""

    difficulty: str = Difficulty.MEDIUM.value
    # wall-clock budget for one generation attempt
    time_budget_ms: int = DEFAULT_TIME_BUDGET_MS
    # difficulty name -> number of filled cells to carve down to
    clue_counts: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_CLUE_COUNTS))
    # seed for the random source; None draws fresh entropy
    seed: Optional[int] = None

    def target_clues(self, difficulty=None) -> int:
        """Clue target for `difficulty` (this config's difficulty when omitted)."""
        name = Difficulty.resolve(self.difficulty if difficulty is None else difficulty).value
        if name in self.clue_counts:
            return self.clue_counts[name]
        medium = Difficulty.MEDIUM.value
        return self.clue_counts.get(medium, DEFAULT_CLUE_COUNTS[medium])


def load_config(
    config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None
) -> GeneratorConfig:
    """Load a `GeneratorConfig` from a yaml file and apply `overrides`.

    Keys in `overrides` whose value is None are ignored.
    """
    schema = OmegaConf.structured(GeneratorConfig)
    sources = [schema]
    if config_path:
        sources.append(OmegaConf.load(config_path))
    if overrides:
        sources.append(OmegaConf.create({k: v for k, v in overrides.items() if v is not None}))
    merged = OmegaConf.merge(*sources)
    config: GeneratorConfig = OmegaConf.to_object(merged)
    return config
