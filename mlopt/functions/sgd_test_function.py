"""Implementation of a small three-term benchmark objective."""

import numpy as np

from mlopt.constants import DType, DEFAULT_DTYPE
from mlopt.functions.base import DecomposableFunction


class SGDTestFunction(DecomposableFunction):
    """Implements f(x) = -exp(-|x_0|) + x_1^2 + (x_2^4 + 3 * x_2^2) over a (3, 1) iterate.

    Each coordinate is owned by exactly one term. The minimum is -1 at the origin.
    """

    def __init__(self, dtype: DType = DEFAULT_DTYPE) -> None:
        """Initialize the objective."""
        self.dtype = dtype

    def num_functions(self) -> int:
        """The number of additive terms in the objective."""
        return 3

    def evaluate(self, iterate: np.ndarray, i: int) -> float:
        """Evaluate term `i` at `iterate`."""
        if i == 0:
            return float(-np.exp(-np.abs(iterate[0, 0])))
        elif i == 1:
            return float(np.square(iterate[1, 0]))
        elif i == 2:
            return float(np.power(iterate[2, 0], 4) + 3 * np.square(iterate[2, 0]))
        raise IndexError(f"Term index {i} out of range for {self.num_functions()} terms")

    def gradient(self, iterate: np.ndarray, i: int, out: np.ndarray) -> None:
        """Write the gradient of term `i` with respect to `iterate` into `out`."""
        assert out.shape == iterate.shape == (3, 1)
        out[:] = 0
        if i == 0:
            out[0, 0] = np.sign(iterate[0, 0]) * np.exp(-np.abs(iterate[0, 0]))
        elif i == 1:
            out[1, 0] = 2 * iterate[1, 0]
        elif i == 2:
            out[2, 0] = 4 * np.power(iterate[2, 0], 3) + 6 * iterate[2, 0]
        else:
            raise IndexError(f"Term index {i} out of range for {self.num_functions()} terms")

    def get_initial_point(self) -> np.ndarray:
        """Return a starting iterate for the objective."""
        return np.array([[6.0], [-45.6], [6.2]], dtype=self.dtype)
