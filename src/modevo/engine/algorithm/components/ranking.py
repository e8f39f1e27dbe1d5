"""
Fast non-dominated sorting (Deb et al., NSGA-II).

Every unordered pair is compared once; each individual keeps a domination
count (how many others dominate it) and the list of individuals it dominates.
Fronts are then peeled off iteratively, for O(n^2) comparisons overall.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from modevo.foundation.exceptions import ProblemDimensionError
from modevo.foundation.individual import EvaluatedIndividual, ParetoEvaluatedIndividual

from .dominance import dominates


def _fitness_rows(population: Sequence[EvaluatedIndividual]) -> list[tuple[float, ...]]:
    rows = [tuple(ind.fitness.tolist()) for ind in population]
    n_obj = len(rows[0])
    for row in rows:
        if len(row) != n_obj:
            raise ProblemDimensionError(
                f"Inconsistent objective count in population ({len(row)} vs {n_obj}).",
                n_obj=n_obj,
            )
    return rows


def _total_order_fronts(values: list[float]) -> list[list[int]]:
    # Single objective: equal values share a front, fronts follow ascending value.
    by_value: dict[float, list[int]] = {}
    for idx, value in enumerate(values):
        by_value.setdefault(value, []).append(idx)
    return [by_value[value] for value in sorted(by_value)]


def fast_non_dominated_sort(population: Sequence[EvaluatedIndividual]) -> list[list[int]]:
    """
    Partition ``population`` into fronts.

    Returns:
        fronts: list of index lists, ``fronts[0]`` being the non-dominated set.
    """
    n = len(population)
    if n == 0:
        return []
    rows = _fitness_rows(population)
    if len(rows[0]) == 1:
        return _total_order_fronts([row[0] for row in rows])

    domination_count = [0] * n
    dominated: list[list[int]] = [[] for _ in range(n)]
    for i in range(n):
        fi = rows[i]
        for j in range(i + 1, n):
            fj = rows[j]
            if dominates(fi, fj):
                dominated[i].append(j)
                domination_count[j] += 1
            elif dominates(fj, fi):
                dominated[j].append(i)
                domination_count[i] += 1

    fronts: list[list[int]] = []
    current = [i for i in range(n) if domination_count[i] == 0]
    while current:
        fronts.append(current)
        next_front: list[int] = []
        for i in current:
            for j in dominated[i]:
                domination_count[j] -= 1
                if domination_count[j] == 0:
                    next_front.append(j)
        current = sorted(next_front)
    return fronts


def pareto_ranks(population: Sequence[EvaluatedIndividual]) -> np.ndarray:
    """Front index for each member of ``population``, in input order."""
    ranks = np.empty(len(population), dtype=int)
    for level, front in enumerate(fast_non_dominated_sort(population)):
        ranks[front] = level
    return ranks


def assign_pareto_ranks(population: Sequence[EvaluatedIndividual]) -> list[ParetoEvaluatedIndividual]:
    """Return new rank-carrying records for ``population``, preserving its order."""
    ranks = pareto_ranks(population)
    return [ind.with_rank(int(rank)) for ind, rank in zip(population, ranks)]


__all__ = ["fast_non_dominated_sort", "pareto_ranks", "assign_pareto_ranks"]
