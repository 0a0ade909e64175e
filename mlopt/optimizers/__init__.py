"""Library implementation of various optimizers."""

from .base import Optimizer, OptimizationResult, Outcome
from .moments import FirstMoment, ScaleEstimate, SecondMoment, InfinityNorm
from .adam import Adam
from .adamax import AdaMax
