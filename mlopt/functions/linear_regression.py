"""Implementation of a least-squares linear regression objective."""

import numpy as np

from mlopt.constants import DType, DEFAULT_DTYPE
from mlopt.functions.base import DecomposableFunction


class LinearRegressionFunction(DecomposableFunction):
    """Implements the squared error of a linear model, with one term per example.

    For predictors X of dimension (d, n) and responses y of dimension (n,), term i is
    (x_i^T theta - y_i)^2 for a parameter theta of dimension (d, 1).
    """

    def __init__(
        self,
        predictors: np.ndarray,
        responses: np.ndarray,
        dtype: DType = DEFAULT_DTYPE,
    ) -> None:
        """Initialize the objective."""
        if predictors.ndim != 2:
            raise ValueError(f"Predictors must be two-dimensional, got shape {predictors.shape}")
        if responses.shape != (predictors.shape[1],):
            raise ValueError(
                f"Expected {predictors.shape[1]} responses to match the predictors, got shape {responses.shape}"
            )
        self.predictors = predictors
        self.responses = responses
        self.dtype = dtype

    @property
    def n_dims(self) -> int:
        """The dimension of each example."""
        return self.predictors.shape[0]

    def num_functions(self) -> int:
        """The number of additive terms in the objective."""
        return self.predictors.shape[1]

    def _residual(self, iterate: np.ndarray, i: int) -> float:
        return float(np.dot(self.predictors[:, i], iterate[:, 0]) - self.responses[i])

    def evaluate(self, iterate: np.ndarray, i: int) -> float:
        """Evaluate term `i` at `iterate`."""
        return self._residual(iterate, i) ** 2

    def gradient(self, iterate: np.ndarray, i: int, out: np.ndarray) -> None:
        """Write the gradient of term `i` with respect to `iterate` into `out`."""
        assert out.shape == iterate.shape == (self.n_dims, 1)
        out[:, 0] = 2 * self._residual(iterate, i) * self.predictors[:, i]

    def get_initial_point(self) -> np.ndarray:
        """Return a starting iterate for the objective."""
        return np.zeros(shape=(self.n_dims, 1), dtype=self.dtype)

    def solve_exact(self) -> np.ndarray:
        """Return the closed-form least-squares solution, of dimension (d, 1)."""
        theta, *_ = np.linalg.lstsq(self.predictors.T, self.responses, rcond=None)
        return theta.reshape(-1, 1)
