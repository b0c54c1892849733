# file: src/module2_error_injection/random_source.py
"""
Injectable random sources for position selection.
"""

from typing import Optional, Protocol, Union, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Anything able to draw a uniform integer from a closed range."""

    def randint(self, low: int, high: int) -> int:
        """Return a uniform integer in [low, high], both inclusive."""
        ...


class NumpyRandomSource:
    """
    RandomSource backed by a numpy Generator.

    Args:
        seed: Seed for numpy.random.default_rng (None = fresh entropy)
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def randint(self, low: int, high: int) -> int:
        return int(self._rng.integers(low, high, endpoint=True))


def make_random_source(
    source: Union[None, int, RandomSource] = None
) -> RandomSource:
    """Normalise None, an integer seed or an existing source to a RandomSource."""
    if source is None or isinstance(source, (int, np.integer)):
        return NumpyRandomSource(None if source is None else int(source))
    if isinstance(source, RandomSource):
        return source
    raise TypeError(f"Expected None, an int seed or a RandomSource, got {type(source)}")
