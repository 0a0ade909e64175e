"""A set of integration tests of the optimizers on the benchmark functions, testing optimization end-to-end."""

import unittest

import numpy as np

from mlopt.functions import GeneralizedRosenbrockFunction, LinearRegressionFunction, SGDTestFunction
from mlopt.optimizers import Adam, AdaMax, Outcome
from mlopt.utils import Shuffler


class TestOptimizeEndToEnd(unittest.TestCase):
    """Tests full optimization runs for various functions/optimizers."""

    def setUp(self) -> None:
        rng = np.random.default_rng(0)
        self.predictors = rng.standard_normal(size=(3, 40))
        self.theta = np.array([[1.0], [-2.0], [0.5]])
        self.responses = self.predictors.T @ self.theta[:, 0]

    def test_linear_regression_with_adam(self) -> None:
        """Test that Adam recovers the parameters of a noise-free linear model."""
        function = LinearRegressionFunction(self.predictors, self.responses)
        iterate = function.get_initial_point()
        initial_objective = function.evaluate_all(iterate)

        optimizer = Adam(function, step_size=0.01, max_iterations=20_000, tolerance=1e-12, shuffler=Shuffler(seed=0))
        objective = optimizer.optimize(iterate)

        self.assertLess(objective, 0.01 * initial_objective)
        np.testing.assert_allclose(iterate, function.solve_exact(), atol=0.1)

    def test_linear_regression_with_adamax(self) -> None:
        """Test that AdaMax recovers the parameters of a noise-free linear model."""
        function = LinearRegressionFunction(self.predictors, self.responses)
        iterate = function.get_initial_point()

        optimizer = AdaMax(function, step_size=0.01, max_iterations=20_000, tolerance=1e-12, shuffler=Shuffler(seed=0))
        optimizer.optimize(iterate)

        np.testing.assert_allclose(iterate, function.solve_exact(), atol=0.1)

    def test_sgd_test_function_improves(self) -> None:
        """Test that Adam makes progress on the three-term benchmark for both variants."""
        function = SGDTestFunction()
        for adamax in (False, True):
            iterate = function.get_initial_point()
            initial_objective = function.evaluate_all(iterate)
            result = Adam(function, step_size=0.1, max_iterations=3_001, adamax=adamax).minimize(iterate)
            self.assertTrue(np.isfinite(result.objective))
            self.assertLess(result.objective, initial_objective)
            self.assertLess(abs(iterate[1, 0]), 45.6)

    def test_rosenbrock_large_step_stays_finite(self) -> None:
        """Test that a run on the Rosenbrock function ends with a finite objective below its start."""
        function = GeneralizedRosenbrockFunction(n=4)
        iterate = function.get_initial_point()
        initial_objective = function.evaluate_all(iterate)
        result = Adam(function, step_size=0.01, max_iterations=3_001, shuffle=False).minimize(iterate)
        self.assertIn(result.outcome, (Outcome.CONVERGED, Outcome.EXHAUSTED))
        self.assertLess(result.objective, initial_objective)


if __name__ == "__main__":
    unittest.main()
