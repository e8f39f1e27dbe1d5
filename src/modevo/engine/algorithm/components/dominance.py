"""
Pareto dominance over fitness vectors (minimization).
"""

from __future__ import annotations

import math
from typing import Sequence

from modevo.foundation.exceptions import ProblemDimensionError


def dominates(a: Sequence[float], b: Sequence[float]) -> bool:
    """
    Return True iff ``a`` Pareto-dominates ``b``.

    ``a`` dominates ``b`` when it is no worse in every objective and strictly
    better in at least one. The scan stops at the first objective where ``a``
    is worse. With a single objective this is plain ``a[0] < b[0]``.
    """
    if len(a) != len(b):
        raise ProblemDimensionError(
            f"Cannot compare fitness vectors of different lengths ({len(a)} vs {len(b)}).",
            n_obj=len(a),
        )
    better = False
    for ai, bi in zip(a, b):
        if ai > bi:
            return False
        if ai < bi:
            better = True
    return better


def is_dominated_by(a: Sequence[float], b: Sequence[float]) -> bool:
    return dominates(b, a)


def squared_fitness_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return sum((ai - bi) * (ai - bi) for ai, bi in zip(a, b))


def fitness_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two fitness vectors."""
    return math.sqrt(squared_fitness_distance(a, b))


__all__ = ["dominates", "is_dominated_by", "fitness_distance", "squared_fitness_distance"]
