"""Library implementation of decomposable objective functions."""

from .base import DecomposableFunction
from .quadratic import SeparableQuadratic
from .sgd_test_function import SGDTestFunction
from .rosenbrock import GeneralizedRosenbrockFunction
from .linear_regression import LinearRegressionFunction
