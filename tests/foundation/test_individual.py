"""Immutable individual records and generation snapshots."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from modevo.foundation.exceptions import ProblemDimensionError
from modevo.foundation.individual import (
    EvaluatedIndividual,
    EvaluatedOffspring,
    Generation,
    Individual,
    Offspring,
    ParetoEvaluatedIndividual,
    frozen_vector,
)


class TestFrozenVector:
    def test_copies_and_freezes(self):
        source = np.array([1.0, 2.0])
        frozen = frozen_vector(source)
        source[0] = 99.0
        assert frozen.tolist() == [1.0, 2.0]
        assert not frozen.flags.writeable
        with pytest.raises(ValueError):
            frozen[0] = 5.0

    def test_accepts_generators(self):
        assert frozen_vector(float(i) for i in range(3)).tolist() == [0.0, 1.0, 2.0]

    def test_reuses_already_frozen_arrays(self):
        frozen = frozen_vector([1, 2])
        assert frozen_vector(frozen) is frozen
        assert frozen.dtype == np.float64

    def test_rejects_matrices(self):
        with pytest.raises(ProblemDimensionError):
            frozen_vector([[1.0, 2.0]], name="genes")


class TestIndividual:
    def test_sequence_protocol(self):
        ind = Individual([0.5, -1.5, 2.0])
        assert len(ind) == ind.n_var == 3
        assert ind[1] == -1.5
        assert isinstance(ind[0], float)

    def test_identity_not_value_equality(self):
        a, b = Individual([1.0]), Individual([1.0])
        assert a != b
        assert a == a
        assert len({a, b}) == 2

    def test_frozen(self):
        ind = Individual([1.0])
        with pytest.raises(FrozenInstanceError):
            ind.genes = np.array([2.0])

    def test_evaluation_chain(self):
        ind = Individual([1.0, 2.0])
        evaluated = ind.with_fitness([3.0, 4.0])
        ranked = evaluated.with_rank(2)

        assert isinstance(evaluated, EvaluatedIndividual)
        assert isinstance(ranked, ParetoEvaluatedIndividual)
        assert evaluated.n_obj == 2
        assert ranked.rank == 2
        assert ranked.genes is ind.genes
        assert ranked.fitness is evaluated.fitness

    def test_repr(self):
        ind = Individual([1.0, 2.5]).with_fitness([3.0]).with_rank(0)
        assert repr(ind) == "ParetoEvaluatedIndividual([1;2.5]) -> [3] (0)"


class TestOffspring:
    def test_requires_a_parent(self):
        with pytest.raises(ValueError):
            Offspring(np.array([0.0]), ())

    def test_parents_resolve_against_pool(self):
        pool = [EvaluatedIndividual([0.0], [1.0]), EvaluatedIndividual([1.0], [2.0])]
        child = Offspring([0.5], [1]).with_fitness([0.1])

        assert isinstance(child, EvaluatedOffspring)
        assert child.parent_indices == (1,)
        assert child.parents_in(pool) == (pool[1],)

    def test_as_evaluated_drops_parent_bookkeeping(self):
        child = Offspring([0.5], (0,)).with_fitness([0.1])
        plain = child.as_evaluated()
        assert type(plain) is EvaluatedIndividual
        assert plain.fitness.tolist() == [0.1]


class TestGeneration:
    @pytest.fixture
    def generation(self):
        return Generation(
            [
                ParetoEvaluatedIndividual([0.0, 1.0], [1.0, 2.0], 0),
                ParetoEvaluatedIndividual([2.0, 3.0], [3.0, 3.0], 1),
                ParetoEvaluatedIndividual([4.0, 5.0], [2.0, 1.0], 0),
            ]
        )

    def test_population_is_a_tuple(self, generation):
        assert isinstance(generation.population, tuple)
        assert len(generation) == 3
        assert list(generation) == list(generation.population)

    def test_front(self, generation):
        assert generation.front() == (generation[0], generation[2])
        assert generation.front(1) == (generation[1],)
        assert generation.front(5) == ()

    def test_matrices(self, generation):
        assert generation.X.shape == (3, 2)
        assert generation.F.tolist() == [[1.0, 2.0], [3.0, 3.0], [2.0, 1.0]]
        assert generation.ranks.tolist() == [0, 1, 0]

    def test_empty_generation(self):
        empty = Generation(())
        assert len(empty) == 0
        assert empty.X.shape == (0, 0)
