"""Moment estimates maintained by the Adam family of optimizers.

Adam and AdaMax share the first moment m, an exponential moving average of gradients.
They differ in the scale estimate used as the denominator of the update:

    Adam:   v = beta_2 * v + (1 - beta_2) * g^2,    step = m / (sqrt(v) + eps)
    AdaMax: u = max(beta_2 * u, |g|),               step = m / (u + eps)

Exactly one ScaleEstimate is allocated per run.
"""

import abc

import numpy as np

from mlopt.constants import DType


class FirstMoment:
    """Exponential moving average of gradient values."""

    def __init__(self, shape: tuple[int, ...], beta_1: float, dtype: DType) -> None:
        """Initialize the estimate to zero."""
        self.beta_1 = beta_1
        self.m = np.zeros(shape=shape, dtype=dtype)

    def update(self, gradient: np.ndarray) -> None:
        """Decay the estimate and fold in a new gradient."""
        assert gradient.shape == self.m.shape
        self.m *= self.beta_1
        self.m += (1 - self.beta_1) * gradient


class ScaleEstimate(abc.ABC):
    """Abstract base class for the per-element scale used to normalize the first moment."""

    def __init__(self, shape: tuple[int, ...], beta_2: float, dtype: DType) -> None:
        """Initialize the estimate to zero."""
        self.beta_2 = beta_2
        self.value = np.zeros(shape=shape, dtype=dtype)

    @abc.abstractmethod
    def update(self, gradient: np.ndarray) -> None:
        """Decay the estimate and fold in a new gradient."""
        raise NotImplementedError

    @abc.abstractmethod
    def apply_update(
        self,
        iterate: np.ndarray,
        first_moment: FirstMoment,
        step_size: float,
        bias_correction_1: float,
        bias_correction_2: float,
        eps: float,
    ) -> None:
        """Take a bias-corrected step on `iterate` in place."""
        raise NotImplementedError


class SecondMoment(ScaleEstimate):
    """Exponential moving average of squared gradient values (Adam)."""

    def update(self, gradient: np.ndarray) -> None:
        """Decay the estimate and fold in a new gradient."""
        assert gradient.shape == self.value.shape
        self.value *= self.beta_2
        self.value += (1 - self.beta_2) * np.square(gradient)

    def apply_update(
        self,
        iterate: np.ndarray,
        first_moment: FirstMoment,
        step_size: float,
        bias_correction_1: float,
        bias_correction_2: float,
        eps: float,
    ) -> None:
        """Take a bias-corrected step on `iterate` in place."""
        # NOTE: m / (sqrt(v) + eps) approximates the exact term m / (sqrt(v) + sqrt(bias_correction_2) * eps)
        effective_step_size = step_size * np.sqrt(bias_correction_2) / bias_correction_1
        iterate -= effective_step_size * first_moment.m / (np.sqrt(self.value) + eps)


class InfinityNorm(ScaleEstimate):
    """Exponentially weighted infinity norm of gradient values (AdaMax)."""

    def update(self, gradient: np.ndarray) -> None:
        """Decay the estimate and fold in a new gradient."""
        assert gradient.shape == self.value.shape
        self.value *= self.beta_2
        np.maximum(self.value, np.abs(gradient), out=self.value)

    def apply_update(
        self,
        iterate: np.ndarray,
        first_moment: FirstMoment,
        step_size: float,
        bias_correction_1: float,
        bias_correction_2: float,
        eps: float,
    ) -> None:
        """Take a bias-corrected step on `iterate` in place. A zero first correction is a no-op."""
        if bias_correction_1 == 0.0:
            return
        iterate -= (step_size / bias_correction_1) * first_moment.m / (self.value + eps)
