"""
Survivor selection (offspring vs. its parents) and population truncation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from modevo.foundation.exceptions import ConfigurationError
from modevo.foundation.individual import EvaluatedIndividual, EvaluatedOffspring, ParetoEvaluatedIndividual
from modevo.foundation.problem.types import ProblemProtocol

from .crowding import crowding_distances
from .dominance import dominates


@dataclass(frozen=True)
class SurvivorDecision:
    """Outcome of comparing one offspring against its parents."""

    admitted: EvaluatedIndividual | None
    carried: tuple[EvaluatedIndividual, ...]
    feasible: bool = True

    def members(self) -> list[EvaluatedIndividual]:
        """Admitted offspring first, then the carried parents."""
        head = [self.admitted] if self.admitted is not None else []
        return head + list(self.carried)


def select_survivors(
    offspring: EvaluatedOffspring,
    pool: Sequence[EvaluatedIndividual],
    problem: ProblemProtocol,
) -> SurvivorDecision:
    """
    Decide what ``offspring`` and its parents contribute to the next pool.

    ``pool`` is the parent pool the offspring's ``parent_indices`` refer to.
    Infeasible offspring are dropped and every parent carried over without any
    comparison. Otherwise parents dominated by the offspring are dropped, the
    offspring is admitted iff at least one parent was dropped, and every other
    parent is carried over.
    """
    parents = offspring.parents_in(pool)
    if not problem.is_feasible(offspring):
        return SurvivorDecision(admitted=None, carried=parents, feasible=False)

    carried = tuple(parent for parent in parents if not dominates(offspring.fitness, parent.fitness))
    admitted = offspring.as_evaluated() if len(carried) < len(parents) else None
    return SurvivorDecision(admitted=admitted, carried=carried)


def truncate_by_fronts(
    ranked: Sequence[ParetoEvaluatedIndividual],
    population_size: int,
) -> list[ParetoEvaluatedIndividual]:
    """
    Admit whole fronts in ascending rank while they fit; fill the remainder
    from the first overflowing front by descending crowding distance.
    """
    if ranked and ranked[0].n_obj < 2:
        raise ConfigurationError(
            "Front-based truncation needs at least 2 objectives.",
            suggestion="Use truncate_population(), which sorts single-objective pools by fitness.",
        )
    fronts: dict[int, list[ParetoEvaluatedIndividual]] = {}
    for ind in ranked:
        fronts.setdefault(ind.rank, []).append(ind)

    selected: list[ParetoEvaluatedIndividual] = []
    for rank in sorted(fronts):
        front = fronts[rank]
        if len(selected) + len(front) <= population_size:
            selected.extend(front)
            continue
        remaining = population_size - len(selected)
        if remaining > 0:
            distances = crowding_distances(front)
            order = sorted(range(len(front)), key=lambda i: distances[i], reverse=True)
            selected.extend(front[i] for i in order[:remaining])
        break
    return selected


def truncate_population(
    ranked: Sequence[ParetoEvaluatedIndividual],
    population_size: int,
) -> list[ParetoEvaluatedIndividual]:
    """
    Cap a ranked candidate pool at ``population_size``.

    Single objective: keep the ``population_size`` lowest fitness values.
    Multiple objectives: keep everyone when the pool already fits, otherwise
    truncate front by front (see :func:`truncate_by_fronts`).
    """
    if not ranked:
        return []
    if ranked[0].n_obj == 1:
        return sorted(ranked, key=lambda ind: float(ind.fitness[0]))[:population_size]
    if len(ranked) <= population_size:
        return list(ranked)
    return truncate_by_fronts(ranked, population_size)


__all__ = ["SurvivorDecision", "select_survivors", "truncate_by_fronts", "truncate_population"]
