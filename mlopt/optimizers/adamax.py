"""Implements the AdaMax optimizer."""

import logging
from typing import Optional

from mlopt.functions.base import DecomposableFunction
from mlopt.optimizers.adam import Adam
from mlopt.utils.shuffle import Shuffler


class AdaMax(Adam):
    """Implements AdaMax, the variant of Adam based on the infinity norm of the gradients."""

    def __init__(
        self,
        function: DecomposableFunction,
        step_size: float = 0.002,
        beta_1: float = 0.9,
        beta_2: float = 0.999,
        eps: float = 1e-8,
        max_iterations: int = 100_000,
        tolerance: float = 1e-5,
        shuffle: bool = True,
        shuffler: Optional[Shuffler] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the optimizer."""
        super().__init__(
            function=function,
            step_size=step_size,
            beta_1=beta_1,
            beta_2=beta_2,
            eps=eps,
            max_iterations=max_iterations,
            tolerance=tolerance,
            shuffle=shuffle,
            adamax=True,
            shuffler=shuffler,
            logger=logger,
        )
