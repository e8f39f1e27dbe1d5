from __future__ import annotations

import numpy as np

from modevo.foundation.exceptions import InvalidParameterError
from modevo.foundation.individual import Individual

from .base import OptimizationProblem


class _ZDTBase(OptimizationProblem):
    def __init__(self, rng: np.random.Generator, n_var: int = 30) -> None:
        if n_var < 2:
            raise InvalidParameterError("n_var", n_var, ">= 2")
        super().__init__(n_var=n_var, n_obj=2, xl=0.0, xu=1.0, rng=rng)

    def _h(self, f1: float, g: float) -> float:
        raise NotImplementedError

    def objectives(self, x: np.ndarray) -> np.ndarray:
        f1 = x[0]
        g = 1.0 + 9.0 * np.sum(x[1:]) / (self.n_var - 1)
        # Out-of-box candidates are evaluated before the feasibility check rejects them.
        with np.errstate(invalid="ignore", divide="ignore"):
            f2 = g * self._h(f1, g)
        return np.array([f1, f2])

    def is_feasible(self, individual: Individual) -> bool:
        genes = individual.genes
        return bool(np.all((genes >= 0.0) & (genes <= 1.0)))


class ZDT1Problem(_ZDTBase):
    """Convex front: f2 = 1 - sqrt(f1) when x[1:] == 0."""

    def _h(self, f1: float, g: float) -> float:
        return 1.0 - np.sqrt(f1 / g)


class ZDT2Problem(_ZDTBase):
    """Concave front: f2 = 1 - f1^2 when x[1:] == 0."""

    def _h(self, f1: float, g: float) -> float:
        return 1.0 - (f1 / g) ** 2


__all__ = ["ZDT1Problem", "ZDT2Problem"]
