"""Implementation of the generalized Rosenbrock function."""

import numpy as np

from mlopt.constants import DType, DEFAULT_DTYPE
from mlopt.functions.base import DecomposableFunction


class GeneralizedRosenbrockFunction(DecomposableFunction):
    """Implements f(x) = sum_{i < n-1} 100 * (x_{i+1} - x_i^2)^2 + (1 - x_i)^2 over an (n, 1) iterate.

    The minimum is 0 at x = (1, ..., 1).
    """

    def __init__(self, n: int, dtype: DType = DEFAULT_DTYPE) -> None:
        """Initialize the objective for an `n`-dimensional iterate."""
        if n < 2:
            raise ValueError(f"The generalized Rosenbrock function needs n >= 2, got {n}")
        self.n = n
        self.dtype = dtype

    def num_functions(self) -> int:
        """The number of additive terms in the objective."""
        return self.n - 1

    def evaluate(self, iterate: np.ndarray, i: int) -> float:
        """Evaluate term `i` at `iterate`."""
        x_i = iterate[i, 0]
        x_next = iterate[i + 1, 0]
        return float(100 * np.square(x_next - np.square(x_i)) + np.square(1 - x_i))

    def gradient(self, iterate: np.ndarray, i: int, out: np.ndarray) -> None:
        """Write the gradient of term `i` with respect to `iterate` into `out`."""
        assert out.shape == iterate.shape == (self.n, 1)
        x_i = iterate[i, 0]
        x_next = iterate[i + 1, 0]
        out[:] = 0
        out[i, 0] = 400 * (np.power(x_i, 3) - x_next * x_i) + 2 * (x_i - 1)
        out[i + 1, 0] = 200 * (x_next - np.square(x_i))

    def get_initial_point(self) -> np.ndarray:
        """Return a starting iterate for the objective."""
        point = np.ones(shape=(self.n, 1), dtype=self.dtype)
        point[::2] = -1.2
        return point
