"""Interface for objectives that decompose into a sum of separable terms."""

import abc

import numpy as np


class DecomposableFunction(abc.ABC):
    """Abstract base class for an objective of the form f(x) = sum_i f_i(x).

    Each term f_i is typically the loss of a single example (or batch). Optimizers
    visit the terms one at a time, so an objective only needs to know how to evaluate
    and differentiate a single term.
    """

    @abc.abstractmethod
    def num_functions(self) -> int:
        """The number of additive terms in the objective."""
        raise NotImplementedError

    @abc.abstractmethod
    def evaluate(self, iterate: np.ndarray, i: int) -> float:
        """Evaluate term `i` at `iterate`. Must not modify `iterate`."""
        raise NotImplementedError

    @abc.abstractmethod
    def gradient(self, iterate: np.ndarray, i: int, out: np.ndarray) -> None:
        """Write the gradient of term `i` with respect to `iterate` into `out`."""
        raise NotImplementedError

    def evaluate_all(self, iterate: np.ndarray) -> float:
        """Evaluate the full objective, summing every term in index order."""
        objective = 0.0
        for i in range(self.num_functions()):
            objective += self.evaluate(iterate, i)
        return objective

    def get_initial_point(self) -> np.ndarray:
        """Return a starting iterate for the objective."""
        raise NotImplementedError(f"{self.__class__.__name__} has no default initial point")
