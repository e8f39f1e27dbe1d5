"""Survivor selection and population truncation."""

from __future__ import annotations

import numpy as np
import pytest

from modevo.engine.algorithm.components.crowding import BOUNDARY_DISTANCE, crowding_distances
from modevo.engine.algorithm.components.survival import (
    select_survivors,
    truncate_by_fronts,
    truncate_population,
)
from modevo.foundation.exceptions import ConfigurationError
from modevo.foundation.individual import EvaluatedOffspring
from modevo.foundation.problem import SchafferProblem


@pytest.fixture
def problem(rng):
    return SchafferProblem(rng)


def _child(genes, fitness, parent_indices=(0,)):
    return EvaluatedOffspring(np.asarray(genes, dtype=float), parent_indices, np.asarray(fitness, dtype=float))


class TestSelectSurvivors:
    def test_dominating_offspring_replaces_parent(self, problem, ranked):
        parent = ranked(4.0, 4.0, genes=(2.0, 0.0))
        child = _child((1.0, 0.0), (1.0, 1.0))

        decision = select_survivors(child, [parent], problem)

        assert decision.feasible
        assert decision.carried == ()
        assert decision.admitted is not None
        assert np.array_equal(decision.admitted.genes, child.genes)
        assert decision.members() == [decision.admitted]

    def test_non_dominating_offspring_is_discarded(self, problem, ranked):
        parent = ranked(1.0, 1.0, genes=(1.0, 0.0))
        child = _child((3.0, 0.0), (9.0, 1.0))

        decision = select_survivors(child, [parent], problem)

        assert decision.admitted is None
        assert decision.carried == (parent,)

    def test_mutually_non_dominated_offspring_is_discarded(self, problem, ranked):
        parent = ranked(0.0, 4.0, genes=(0.0, 0.0))
        child = _child((2.0, 0.0), (4.0, 0.0))

        decision = select_survivors(child, [parent], problem)

        assert decision.admitted is None
        assert decision.carried == (parent,)

    def test_infeasible_offspring_keeps_parents_without_comparison(self, problem, ranked):
        parent = ranked(100.0, 100.0, genes=(-10.0, 0.0))
        child = _child((50.0, 0.0), (0.0, 0.0))

        decision = select_survivors(child, [parent], problem)

        assert not decision.feasible
        assert decision.admitted is None
        assert decision.carried == (parent,)

    def test_parent_indices_select_from_the_pool(self, problem, ranked):
        pool = [ranked(1.0, 1.0), ranked(5.0, 5.0), ranked(0.5, 9.0)]
        child = _child((0.0, 0.0), (2.0, 2.0), parent_indices=(1, 2))

        decision = select_survivors(child, pool, problem)

        assert decision.admitted is not None
        assert decision.carried == (pool[2],)
        assert decision.members()[1:] == [pool[2]]


class TestTruncation:
    def test_pool_that_fits_is_returned_whole(self, ranked):
        pool = [ranked(1.0, 2.0, rank=0), ranked(3.0, 3.0, rank=1)]
        assert truncate_population(pool, 5) == pool

    def test_empty_pool(self):
        assert truncate_population([], 3) == []

    def test_single_objective_keeps_lowest_fitness(self, ranked):
        pool = [ranked(v, rank=r) for r, v in enumerate([5.0, 1.0, 3.0, 2.0])]
        kept = truncate_population(pool, 2)
        assert [float(ind.fitness[0]) for ind in kept] == [1.0, 2.0]

    def test_whole_fronts_first_then_crowding(self, ranked):
        front0 = [ranked(0.0, 1.0, rank=0), ranked(1.0, 0.0, rank=0)]
        front1 = [ranked(float(k), float(4 - k), rank=1) for k in range(5)]
        front2 = [ranked(9.0, 9.0, rank=2)]

        kept = truncate_population(front2 + front1 + front0, 4)

        assert len(kept) == 4
        assert kept[:2] == front0
        assert kept[2:] == [front1[0], front1[4]]

    def test_no_member_of_an_earlier_front_is_lost(self, rng, ranked):
        pool = [ranked(*rng.uniform(size=2), rank=int(r)) for r in rng.integers(0, 4, size=40)]
        size = 25
        kept = truncate_population(pool, size)
        ids = {id(ind) for ind in kept}
        cut = max(ind.rank for ind in kept)
        assert len(kept) == size
        assert all(id(ind) in ids for ind in pool if ind.rank < cut)
        assert not any(ind.rank > cut for ind in kept)

    def test_overflowing_front_prefers_larger_distances(self, rng, ranked):
        front = [ranked(*row, rank=0) for row in rng.uniform(size=(12, 2))]
        kept = truncate_by_fronts(front, 6)
        distances = crowding_distances(front)
        kept_ids = {id(ind) for ind in kept}
        worst_kept = min(distances[i] for i, ind in enumerate(front) if id(ind) in kept_ids)
        best_dropped = max(distances[i] for i, ind in enumerate(front) if id(ind) not in kept_ids)
        assert worst_kept >= best_dropped
        assert sum(1 for v in distances.values() if v == BOUNDARY_DISTANCE) <= 6

    def test_front_truncation_rejects_single_objective(self, ranked):
        with pytest.raises(ConfigurationError):
            truncate_by_fronts([ranked(1.0), ranked(2.0)], 1)
