from __future__ import annotations

import numpy as np

from modevo.foundation.exceptions import InvalidParameterError
from modevo.foundation.individual import Individual

from .base import OptimizationProblem


class DTLZ2Problem(OptimizationProblem):
    """
    Scalable problem whose Pareto front is the unit sphere in the positive orthant.
    """

    def __init__(self, rng: np.random.Generator, n_obj: int = 3, n_var: int = 12) -> None:
        if n_obj < 2:
            raise InvalidParameterError("n_obj", n_obj, ">= 2")
        if n_var < n_obj:
            raise InvalidParameterError("n_var", n_var, f">= n_obj ({n_obj})")
        super().__init__(n_var=n_var, n_obj=n_obj, xl=0.0, xu=1.0, rng=rng)

    def objectives(self, x: np.ndarray) -> np.ndarray:
        M = self.n_obj
        g = np.sum((x[M - 1 :] - 0.5) ** 2)
        F = np.full(M, 1.0 + g)
        for i in range(M):
            F[i] *= np.prod(np.cos(x[: M - i - 1] * np.pi / 2.0))
            if i > 0:
                F[i] *= np.sin(x[M - i - 1] * np.pi / 2.0)
        return F

    def is_feasible(self, individual: Individual) -> bool:
        genes = individual.genes
        return bool(np.all((genes >= 0.0) & (genes <= 1.0)))


__all__ = ["DTLZ2Problem"]
