"""Minimize a benchmark function with the Adam or AdaMax optimizer."""

import argparse

import numpy as np

from mlopt.functions import (
    DecomposableFunction,
    GeneralizedRosenbrockFunction,
    LinearRegressionFunction,
    SeparableQuadratic,
    SGDTestFunction,
)
from mlopt.optimizers import Adam
from mlopt.utils import Shuffler, setup_logger


FUNCTION_NAMES = ["quadratic", "sgd", "rosenbrock", "regression"]


def _make_function(name: str, seed: int) -> DecomposableFunction:
    rng = np.random.default_rng(seed)
    if name == "quadratic":
        return SeparableQuadratic(centers=rng.standard_normal(size=(8, 2, 2)))
    elif name == "sgd":
        return SGDTestFunction()
    elif name == "rosenbrock":
        return GeneralizedRosenbrockFunction(n=10)
    elif name == "regression":
        predictors = rng.standard_normal(size=(5, 200))
        theta = rng.standard_normal(size=(5,))
        responses = predictors.T @ theta + 0.01 * rng.standard_normal(size=(200,))
        return LinearRegressionFunction(predictors, responses)
    raise ValueError(f"Unknown function '{name}'. Choose from {FUNCTION_NAMES}")


def main(args: argparse.Namespace) -> None:
    """Entrypoint."""
    setup_logger(verbose=args.verbose)

    function = _make_function(args.function, args.seed)
    iterate = function.get_initial_point()
    print(
        f"Minimizing '{args.function}' with n_terms={function.num_functions():,} "
        f"from objective={function.evaluate_all(iterate):.6g}"
    )

    optimizer = Adam(
        function,
        step_size=args.step_size,
        beta_1=args.beta_1,
        beta_2=args.beta_2,
        eps=args.eps,
        max_iterations=args.max_iterations,
        tolerance=args.tolerance,
        shuffle=not args.no_shuffle,
        adamax=args.adamax,
        shuffler=Shuffler(seed=args.seed),
    )
    result = optimizer.minimize(iterate)

    print(f"-- {optimizer.name} finished: {result.outcome.value} --------------------------------------")
    print(f"  objective={result.objective:.6g}  iterations={result.iterations:,}")
    print(f"  iterate={np.array2string(iterate.ravel(), precision=4)}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Minimize a benchmark function with Adam or AdaMax.")
    parser.add_argument(
        "-f",
        "--function",
        type=str,
        choices=FUNCTION_NAMES,
        required=False,
        default="sgd",
        help="The benchmark function to minimize",
    )
    parser.add_argument(
        "-lr",
        "--step_size",
        type=float,
        required=False,
        default=0.001,
        help="The step size (learning rate)",
    )
    parser.add_argument(
        "-b1",
        "--beta_1",
        type=float,
        required=False,
        default=0.9,
        help="The decay rate of the first moment estimate",
    )
    parser.add_argument(
        "-b2",
        "--beta_2",
        type=float,
        required=False,
        default=0.999,
        help="The decay rate of the second moment (or infinity norm) estimate",
    )
    parser.add_argument(
        "--eps",
        type=float,
        required=False,
        default=1e-8,
        help="The constant added to the denominator for numerical stability",
    )
    parser.add_argument(
        "-n",
        "--max_iterations",
        type=int,
        required=False,
        default=100_000,
        help="The maximum number of iterations, or 0 for no limit",
    )
    parser.add_argument(
        "-t",
        "--tolerance",
        type=float,
        required=False,
        default=1e-5,
        help="Stop once the objective changes by less than this over a pass",
    )
    parser.add_argument(
        "--no_shuffle",
        action="store_true",
        help="Visit the terms in index order instead of a random order per pass",
    )
    parser.add_argument(
        "--adamax",
        action="store_true",
        help="Use the AdaMax variant",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        required=False,
        default=0,
        help="Seed for the generated data and the visitation order",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report the objective at every pass",
    )
    args = parser.parse_args()

    main(args)
