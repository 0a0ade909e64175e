"""Implements the Adam and AdaMax optimizers over decomposable functions.

Reference: Kingma, D. P., & Ba, J. (2014). Adam: A Method for Stochastic Optimization.
"""

import itertools
import logging
from typing import Iterator, Optional, Type

import numpy as np

from mlopt.constants import MAX_OBJECTIVE
from mlopt.functions.base import DecomposableFunction
from mlopt.optimizers.base import OptimizationResult, Optimizer, Outcome
from mlopt.optimizers.moments import FirstMoment, InfinityNorm, ScaleEstimate, SecondMoment
from mlopt.utils.shuffle import Shuffler


class Adam(Optimizer):
    """Implements the Adam optimizer, and optionally its AdaMax variant.

    Terms of the function are visited one at a time in passes of `num_functions()`
    steps. At the start of every pass the summed objective of the previous pass is
    checked: a non-finite value stops the run (diverged), and a change smaller than
    `tolerance` stops the run (converged). Otherwise the run stops after
    `max_iterations` steps, with 0 meaning no limit.

    Hyperparameters are not validated; out-of-range values show up as a non-finite
    objective rather than an error.
    """

    def __init__(
        self,
        function: DecomposableFunction,
        step_size: float = 0.001,
        beta_1: float = 0.9,
        beta_2: float = 0.999,
        eps: float = 1e-8,
        max_iterations: int = 100_000,
        tolerance: float = 1e-5,
        shuffle: bool = True,
        adamax: bool = False,
        shuffler: Optional[Shuffler] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the optimizer."""
        super().__init__(function=function)
        self.step_size = step_size
        self.beta_1 = beta_1
        self.beta_2 = beta_2
        self.eps = eps
        self.max_iterations = max_iterations
        self.tolerance = tolerance
        self.shuffle = shuffle
        self.shuffler = shuffler if shuffler is not None else Shuffler()
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        self._adamax = adamax
        self._scale_estimate_type: Type[ScaleEstimate] = InfinityNorm if adamax else SecondMoment

    @property
    def adamax(self) -> bool:
        """Whether the infinity norm (AdaMax) is used in place of the second moment (Adam)."""
        return self._adamax

    @property
    def name(self) -> str:
        """The name used in log messages."""
        return "AdaMax" if self._adamax else "Adam"

    def _iteration_range(self, max_iterations: int) -> Iterator[int]:
        if max_iterations == 0:
            return itertools.count(1)
        return iter(range(1, max_iterations))

    def minimize(self, iterate: np.ndarray) -> OptimizationResult:
        """Minimize the function starting from `iterate`, reporting how the run ended."""
        # Hold the configuration constant for the whole run
        step_size = self.step_size
        beta_1 = self.beta_1
        beta_2 = self.beta_2
        eps = self.eps
        max_iterations = self.max_iterations
        tolerance = self.tolerance
        shuffle = self.shuffle

        num_functions = self.function.num_functions()

        visitation_order: Optional[np.ndarray] = None
        if shuffle:
            visitation_order = self.shuffler.permutation(num_functions)

        current_function = 0
        overall_objective = self.function.evaluate_all(iterate)
        last_objective = MAX_OBJECTIVE

        gradient = np.zeros_like(iterate)
        first_moment = FirstMoment(shape=iterate.shape, beta_1=beta_1, dtype=iterate.dtype)
        scale_estimate = self._scale_estimate_type(shape=iterate.shape, beta_2=beta_2, dtype=iterate.dtype)

        for i in self._iteration_range(max_iterations):
            # Start of a pass over all terms
            if current_function % num_functions == 0:
                self.logger.info("%s: iteration %d, objective %s.", self.name, i, overall_objective)

                if np.isnan(overall_objective) or np.isinf(overall_objective):
                    self.logger.warning(
                        "%s: converged to %s; terminating with failure. Try a smaller step size?",
                        self.name,
                        overall_objective,
                    )
                    return OptimizationResult(
                        objective=float(overall_objective),
                        outcome=Outcome.DIVERGED,
                        iterations=i - 1,
                    )

                if np.abs(last_objective - overall_objective) < tolerance:
                    self.logger.info(
                        "%s: minimized within tolerance %s; terminating optimization.",
                        self.name,
                        tolerance,
                    )
                    return OptimizationResult(
                        objective=float(overall_objective),
                        outcome=Outcome.CONVERGED,
                        iterations=i - 1,
                    )

                last_objective = overall_objective
                overall_objective = 0.0
                current_function = 0

                if visitation_order is not None:
                    visitation_order = self.shuffler.shuffle(visitation_order)

            if visitation_order is not None:
                index = int(visitation_order[current_function])
            else:
                index = current_function

            self.function.gradient(iterate, index, gradient)

            first_moment.update(gradient)
            scale_estimate.update(gradient)

            bias_correction_1 = 1.0 - np.power(beta_1, float(i))
            bias_correction_2 = 1.0 - np.power(beta_2, float(i))
            scale_estimate.apply_update(
                iterate,
                first_moment,
                step_size=step_size,
                bias_correction_1=bias_correction_1,
                bias_correction_2=bias_correction_2,
                eps=eps,
            )

            overall_objective += self.function.evaluate(iterate, index)
            current_function += 1

        self.logger.info(
            "%s: maximum iterations (%d) reached; terminating optimization.",
            self.name,
            max_iterations,
        )
        return OptimizationResult(
            objective=float(self.function.evaluate_all(iterate)),
            outcome=Outcome.EXHAUSTED,
            iterations=max(max_iterations - 1, 0),
        )
