"""
Base class for class-based optimization problems.
"""

from __future__ import annotations

import numpy as np

from modevo.foundation.exceptions import EvaluationError, ProblemDimensionError
from modevo.foundation.individual import Individual


class OptimizationProblem:
    """Base class for fitness oracles over fixed-length real vectors.

    **Required:** set ``n_var``, ``n_obj``, ``xl``, ``xu`` (bounds used for
    random sampling) and override :meth:`objectives`.
    **Optional:** override :meth:`is_feasible` to reject candidates.

    The random source used by :meth:`create_random_individual` is passed in
    by the caller, so that sharing one seeded generator between the problem
    and the algorithm reproduces a run exactly.

    Example::

        import numpy as np
        from modevo import OptimizationProblem

        class TwoBowls(OptimizationProblem):
            def __init__(self, rng):
                super().__init__(n_var=2, n_obj=2, xl=-5.0, xu=5.0, rng=rng)

            def objectives(self, x: np.ndarray) -> np.ndarray:
                return np.array([np.sum(x ** 2), np.sum((x - 1.0) ** 2)])
    """

    def __init__(
        self,
        n_var: int,
        n_obj: int,
        xl: float | np.ndarray,
        xu: float | np.ndarray,
        rng: np.random.Generator,
    ) -> None:
        if n_var <= 0:
            raise ProblemDimensionError("n_var must be a positive integer.", n_var=n_var, n_obj=n_obj)
        if n_obj <= 0:
            raise ProblemDimensionError("n_obj must be a positive integer.", n_var=n_var, n_obj=n_obj)
        self.n_var = int(n_var)
        self.n_obj = int(n_obj)
        self.xl = np.broadcast_to(np.asarray(xl, dtype=float), (self.n_var,)).copy()
        self.xu = np.broadcast_to(np.asarray(xu, dtype=float), (self.n_var,)).copy()
        if np.any(self.xl > self.xu):
            raise ProblemDimensionError("Lower bounds must not exceed upper bounds.", n_var=n_var)
        self.rng = rng

    # ------------------------------------------------------------------
    # User-overridable interface
    # ------------------------------------------------------------------

    def objectives(self, x: np.ndarray) -> np.ndarray:
        """Objective values (to minimize) for one gene vector ``x`` of shape ``(n_var,)``."""
        raise NotImplementedError(f"{type(self).__name__} must implement objectives(self, x).")

    def is_feasible(self, individual: Individual) -> bool:
        return True

    def create_random_individual(self) -> Individual:
        return Individual(self.rng.uniform(self.xl, self.xu))

    # ------------------------------------------------------------------
    # Engine entry point
    # ------------------------------------------------------------------

    def calculate_fitness_values(self, individual: Individual) -> np.ndarray:
        """Evaluate ``individual`` through :meth:`objectives` and check the result shape."""
        if individual.n_var != self.n_var:
            raise ProblemDimensionError(
                f"{type(self).__name__} expects {self.n_var} genes, got {individual.n_var}.",
                n_var=self.n_var,
            )
        values = np.atleast_1d(np.asarray(self.objectives(individual.genes), dtype=float))
        if values.shape != (self.n_obj,):
            raise EvaluationError(
                f"{type(self).__name__}.objectives returned shape {values.shape}, expected ({self.n_obj},).",
                individual=individual,
            )
        return values

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_var={self.n_var}, n_obj={self.n_obj})"


__all__ = ["OptimizationProblem"]
