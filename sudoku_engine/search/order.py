"""Orders in which candidate digits are tried at a cell."""
import random
from typing import List, MutableSequence, Optional, Sequence

from sudoku_engine.common.constants import DIGITS
from sudoku_engine.utils.registry import Registry

CANDIDATE_ORDERS = Registry("candidate_orders")


def shuffle_in_place(items: MutableSequence, rng: random.Random) -> MutableSequence:
    """Fisher-Yates shuffle of `items` using `rng`. Returns `items`."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


class CandidateOrder:
    """Produces the sequence of digits to try at each empty cell."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng

    def candidates(self) -> Sequence[int]:
        raise NotImplementedError


@CANDIDATE_ORDERS.register_module("ascending")
class AscendingOrder(CandidateOrder):
    """Always 1..9, which makes the search deterministic."""

    def candidates(self) -> Sequence[int]:
        return DIGITS


@CANDIDATE_ORDERS.register_module("shuffle")
class ShuffleOrder(CandidateOrder):
    """A fresh uniform permutation of 1..9 for every cell."""

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng if rng is not None else random.Random())

    def candidates(self) -> List[int]:
        return shuffle_in_place(list(DIGITS), self.rng)


def get_candidate_order(name: str, rng: Optional[random.Random] = None) -> CandidateOrder:
    order_cls = CANDIDATE_ORDERS.get(name)
    if order_cls is None:
        raise ValueError(
            f"Unknown candidate order `{name}`, available: {CANDIDATE_ORDERS.list_modules()}"
        )
    return order_cls(rng)
