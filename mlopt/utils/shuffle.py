"""Random visitation orders for stochastic optimizers."""

from typing import Optional

import numpy as np


class Shuffler:
    """Produces uniformly random permutations of term indices.

    Wraps a numpy Generator so that a run can be made reproducible by fixing `seed`.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """Initialize the shuffler."""
        self.rng = np.random.default_rng(seed)

    def permutation(self, n: int) -> np.ndarray:
        """Return a random permutation of [0, n)."""
        return self.rng.permutation(n)

    def shuffle(self, order: np.ndarray) -> np.ndarray:
        """Return a new random permutation of the entries of `order`. `order` is left untouched."""
        return self.rng.permutation(order)
