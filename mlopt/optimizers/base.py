"""Interface for implementing optimizers."""

import abc
from dataclasses import dataclass
import enum

import numpy as np

from mlopt.functions.base import DecomposableFunction


class Outcome(enum.Enum):
    """How an optimization run terminated."""

    CONVERGED = "converged"
    DIVERGED = "diverged"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class OptimizationResult:
    """The final state of an optimization run."""

    objective: float
    """Final value of the objective"""

    outcome: Outcome
    """Why the run stopped"""

    iterations: int
    """Number of update steps applied to the iterate"""

    @property
    def succeeded(self) -> bool:
        """Whether the run converged within tolerance."""
        return self.outcome is Outcome.CONVERGED


class Optimizer(abc.ABC):
    """Abstract base class for an optimizer of a decomposable function.

    The optimizer borrows the caller's iterate for the duration of a single call and
    updates it in place. Numerical failure is reported through the returned value,
    never by raising.
    """

    def __init__(self, function: DecomposableFunction) -> None:
        """Initialize the optimizer."""
        self.function = function

    @abc.abstractmethod
    def minimize(self, iterate: np.ndarray) -> OptimizationResult:
        """Minimize the function starting from `iterate`, reporting how the run ended."""
        raise NotImplementedError

    def optimize(self, iterate: np.ndarray) -> float:
        """Minimize the function starting from `iterate` and return the final objective.

        A NaN or infinite return value means the run diverged.
        """
        return self.minimize(iterate).objective
