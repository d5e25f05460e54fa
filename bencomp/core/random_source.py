"""Explicitly owned, optionally seeded source of uniform integers."""

from typing import List, Optional

import numpy as np


class RandomSource:
    """Uniform integer generator backed by a numpy ``Generator``.

    Every draw uses half-open intervals ``[start, stop)``. Pass a ``seed`` to
    make a run reproducible; without one the generator is seeded from OS
    entropy.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        generator: Optional[np.random.Generator] = None,
    ):
        self.seed = seed
        self._rng = generator if generator is not None else np.random.default_rng(seed)

    def randrange(self, start: int, stop: int) -> int:
        """Draw one integer uniformly from ``[start, stop)``."""
        if stop <= start:
            raise ValueError(f"Empty draw interval [{start}, {stop})")
        return int(self._rng.integers(start, stop))

    def randrange_many(self, start: int, stop: int, count: int) -> List[int]:
        """Draw ``count`` independent integers uniformly from ``[start, stop)``."""
        if stop <= start:
            raise ValueError(f"Empty draw interval [{start}, {stop})")
        if count <= 0:
            return []
        return self._rng.integers(start, stop, size=count).tolist()

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"
