from __future__ import annotations

import random
import typing

T = typing.TypeVar('T')


class PseudoRandom(object):
    """
    Seedable random source handed to each bot at construction so that a replay with the same seed makes the
    same decisions. Never reach for the module level `random` functions from bot code.
    """

    def __init__(self, seed: int | None = None):
        self.seed: int | None = seed
        self._rng: random.Random = random.Random(seed)

    def next_float(self) -> float:
        return self._rng.random()

    def next_int(self, low: int, high: int) -> int:
        """low inclusive, high exclusive."""
        return self._rng.randrange(low, high)

    def chance(self, odds: float) -> bool:
        """True with probability 1 / odds. chance(2) is a coin flip, chance(1.5) passes two times in three."""
        return self._rng.random() * odds < 1

    def shuffle_array(self, items: typing.Iterable[T]) -> typing.List[T]:
        """Returns a shuffled copy, the input is left alone."""
        shuffled = list(items)
        self._rng.shuffle(shuffled)
        return shuffled

    def rand_element(self, items: typing.Sequence[T]) -> T:
        if len(items) == 0:
            raise AssertionError('rand_element called with no elements to pick from')
        return items[self._rng.randrange(len(items))]
