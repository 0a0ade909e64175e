"""Unit tests for adamax.py."""

import unittest

import numpy as np

from mlopt.functions import SGDTestFunction, SeparableQuadratic
from mlopt.optimizers import Adam, AdaMax, Outcome
from mlopt.utils.shuffle import Shuffler


class TestAdaMax(unittest.TestCase):
    """Unit tests for AdaMax."""

    def test_defaults(self) -> None:
        """Test that AdaMax fixes the variant and uses its own default step size."""
        optimizer = AdaMax(SGDTestFunction())
        self.assertTrue(optimizer.adamax)
        self.assertEqual(optimizer.name, "AdaMax")
        self.assertEqual(optimizer.step_size, 0.002)

    def test_matches_adam_with_adamax_flag(self) -> None:
        """Test that AdaMax follows the same trajectory as Adam(adamax=True)."""
        function = SGDTestFunction()
        a = function.get_initial_point()
        b = function.get_initial_point()
        result_a = AdaMax(
            function, step_size=0.1, max_iterations=60, tolerance=-1.0, shuffler=Shuffler(seed=3)
        ).minimize(a)
        result_b = Adam(
            function, step_size=0.1, max_iterations=60, tolerance=-1.0, adamax=True, shuffler=Shuffler(seed=3)
        ).minimize(b)
        np.testing.assert_array_equal(a, b)
        self.assertEqual(result_a, result_b)

    def test_converges_on_bowl(self) -> None:
        """Test that AdaMax minimizes a separable quadratic with several terms."""
        centers = np.array([[[1.0, -1.0]], [[3.0, 1.0]]])  # minimizer at (2, 0)
        function = SeparableQuadratic(centers=centers)
        iterate = np.zeros((1, 2))
        with self.assertLogs("mlopt.optimizers.adam", level="INFO") as logs:
            result = AdaMax(function, step_size=0.01, tolerance=1e-10, shuffle=False).minimize(iterate)

        self.assertIs(result.outcome, Outcome.CONVERGED)
        np.testing.assert_allclose(iterate, function.minimizer, atol=1e-2)
        self.assertTrue(all(line.find("AdaMax") >= 0 for line in logs.output))


if __name__ == "__main__":
    unittest.main()
