import numpy as np
import pytest

from modevo.foundation.individual import EvaluatedIndividual, ParetoEvaluatedIndividual


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def evaluated():
    """Factory: ``evaluated(f1, f2, ..., genes=...)`` builds an evaluated individual."""

    def _make(*fitness, genes=(0.0,)):
        return EvaluatedIndividual(np.asarray(genes, dtype=float), np.asarray(fitness, dtype=float))

    return _make


@pytest.fixture
def ranked():
    """Factory: ``ranked(f1, f2, ..., rank=0, genes=...)`` builds a rank-carrying individual."""

    def _make(*fitness, rank=0, genes=(0.0,)):
        return ParetoEvaluatedIndividual(np.asarray(genes, dtype=float), np.asarray(fitness, dtype=float), rank)

    return _make
