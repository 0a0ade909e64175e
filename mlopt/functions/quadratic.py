"""Implementation of a separable quadratic bowl."""

from typing import Optional

import numpy as np

from mlopt.constants import DType, DEFAULT_DTYPE
from mlopt.functions.base import DecomposableFunction


class SeparableQuadratic(DecomposableFunction):
    """Implements f(x) = sum_i s_i * ||x - c_i||^2.

    The minimum is at the scale-weighted mean of the centers. With a single zero center
    and unit scale this reduces to f(x) = x^2.
    """

    def __init__(
        self,
        centers: np.ndarray,
        scales: Optional[np.ndarray] = None,
        dtype: DType = DEFAULT_DTYPE,
    ) -> None:
        """Initialize the objective.

        Args:
            centers: Array of dimension (N, *shape), one center per term
            scales: Positive weights of dimension (N,). Defaults to all ones.
            dtype: The dtype of the initial point
        """
        if centers.ndim < 2:
            raise ValueError(f"Centers must have a leading term dimension, got shape {centers.shape}")
        if scales is None:
            scales = np.ones(shape=(centers.shape[0],))
        if scales.shape != (centers.shape[0],):
            raise ValueError(f"Expected {centers.shape[0]} scales, got shape {scales.shape}")
        self.centers = centers
        self.scales = scales
        self.dtype = dtype

    @property
    def minimizer(self) -> np.ndarray:
        """The point at which the objective attains its minimum."""
        weights = self.scales.reshape(-1, *([1] * (self.centers.ndim - 1)))
        return np.sum(weights * self.centers, axis=0) / np.sum(self.scales)

    def num_functions(self) -> int:
        """The number of additive terms in the objective."""
        return self.centers.shape[0]

    def evaluate(self, iterate: np.ndarray, i: int) -> float:
        """Evaluate term `i` at `iterate`."""
        diff = iterate - self.centers[i]
        return float(self.scales[i] * np.sum(np.square(diff)))

    def gradient(self, iterate: np.ndarray, i: int, out: np.ndarray) -> None:
        """Write the gradient of term `i` with respect to `iterate` into `out`."""
        assert out.shape == iterate.shape
        out[:] = 2 * self.scales[i] * (iterate - self.centers[i])

    def get_initial_point(self) -> np.ndarray:
        """Return a starting iterate for the objective."""
        return np.ones(shape=self.centers.shape[1:], dtype=self.dtype)
