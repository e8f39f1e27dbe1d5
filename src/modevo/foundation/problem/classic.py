"""
Textbook test functions (Sphere, Booth, Rosenbrock, Schaffer N.1).

See https://en.wikipedia.org/wiki/Test_functions_for_optimization
"""

from __future__ import annotations

import numpy as np

from modevo.foundation.exceptions import InvalidParameterError
from modevo.foundation.individual import Individual

from .base import OptimizationProblem


class SphereProblem(OptimizationProblem):
    """Minimize the sum of squared genes; optimum 0 at the origin."""

    def __init__(self, n_var: int, rng: np.random.Generator) -> None:
        super().__init__(n_var=n_var, n_obj=1, xl=-5.0, xu=5.0, rng=rng)

    def objectives(self, x: np.ndarray) -> np.ndarray:
        return np.array([np.sum(x**2)])


class BoothProblem(OptimizationProblem):
    """Booth function; global minimum 0 at (1, 3)."""

    def __init__(self, rng: np.random.Generator, search_range: float = 10.0) -> None:
        if search_range <= 0:
            raise InvalidParameterError("search_range", search_range, "> 0")
        super().__init__(n_var=2, n_obj=1, xl=-search_range, xu=search_range, rng=rng)
        self.search_range = float(search_range)

    def objectives(self, x: np.ndarray) -> np.ndarray:
        return np.array([(x[0] + 2.0 * x[1] - 7.0) ** 2 + (2.0 * x[0] + x[1] - 5.0) ** 2])

    def is_feasible(self, individual: Individual) -> bool:
        return individual[0] >= -1.0 and individual[1] <= 10.0


class RosenbrockProblem(OptimizationProblem):
    """Rosenbrock valley; minimum 0 at (a, a^2, ...) which is all ones for a=1."""

    def __init__(self, n_var: int, rng: np.random.Generator, a: float = 1.0, b: float = 100.0) -> None:
        if n_var < 2:
            raise InvalidParameterError("n_var", n_var, ">= 2")
        super().__init__(n_var=n_var, n_obj=1, xl=-2.0, xu=2.0, rng=rng)
        self.a = float(a)
        self.b = float(b)

    def objectives(self, x: np.ndarray) -> np.ndarray:
        return np.array([np.sum(self.b * (x[1:] - x[:-1] ** 2) ** 2 + (self.a - x[:-1]) ** 2)])


class SchafferProblem(OptimizationProblem):
    """
    Schaffer function N.1 (two objectives over the first gene).

    The Pareto set is x0 in [0, 2]; the second gene does not influence fitness.
    """

    MIN_A = 10.0

    def __init__(self, rng: np.random.Generator, a: float = MIN_A) -> None:
        if a < self.MIN_A:
            raise InvalidParameterError("a", a, f">= {self.MIN_A}")
        super().__init__(n_var=2, n_obj=2, xl=-a, xu=a, rng=rng)
        self.a = float(a)

    def objectives(self, x: np.ndarray) -> np.ndarray:
        return np.array([x[0] ** 2, (x[0] - 2.0) ** 2])

    def is_feasible(self, individual: Individual) -> bool:
        return -self.a <= individual[0] <= self.a


__all__ = ["SphereProblem", "BoothProblem", "RosenbrockProblem", "SchafferProblem"]
