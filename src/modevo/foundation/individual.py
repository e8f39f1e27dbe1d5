"""
Individuals and generation snapshots.

All records are immutable and compare by identity: two individuals carrying the
same genes are still distinct entities, which is what parent/offspring
bookkeeping relies on. Gene and fitness vectors are stored as read-only float64
arrays.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

import numpy as np

from .exceptions import ProblemDimensionError


def frozen_vector(values: Iterable[float] | np.ndarray, *, name: str = "vector") -> np.ndarray:
    """Return ``values`` as a read-only 1-D float64 array (copied unless already frozen)."""
    if isinstance(values, np.ndarray) and values.dtype == np.float64 and values.ndim == 1 and not values.flags.writeable:
        return values
    if not isinstance(values, (np.ndarray, list, tuple)):
        values = list(values)
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ProblemDimensionError(f"{name} must be one-dimensional, got shape {arr.shape}.")
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class Individual:
    """A candidate solution: a fixed-length vector of real genes."""

    genes: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "genes", frozen_vector(self.genes, name="genes"))

    @property
    def n_var(self) -> int:
        return int(self.genes.shape[0])

    def __len__(self) -> int:
        return self.n_var

    def __getitem__(self, index: int) -> float:
        return float(self.genes[index])

    def with_fitness(self, fitness: Iterable[float] | np.ndarray) -> EvaluatedIndividual:
        return EvaluatedIndividual(self.genes, frozen_vector(fitness, name="fitness"))

    def __repr__(self) -> str:
        genes = ";".join(f"{g:.6g}" for g in self.genes)
        return f"{type(self).__name__}([{genes}])"


@dataclass(frozen=True, eq=False, repr=False)
class EvaluatedIndividual(Individual):
    """An individual together with its fitness vector (objectives to minimize)."""

    fitness: np.ndarray

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "fitness", frozen_vector(self.fitness, name="fitness"))

    @property
    def n_obj(self) -> int:
        return int(self.fitness.shape[0])

    def with_rank(self, rank: int) -> ParetoEvaluatedIndividual:
        return ParetoEvaluatedIndividual(self.genes, self.fitness, int(rank))

    def __repr__(self) -> str:
        fitness = ";".join(f"{f:.6g}" for f in self.fitness)
        return f"{Individual.__repr__(self)} -> [{fitness}]"


@dataclass(frozen=True, eq=False, repr=False)
class ParetoEvaluatedIndividual(EvaluatedIndividual):
    """An evaluated individual with its front rank (0 = non-dominated)."""

    rank: int

    def __repr__(self) -> str:
        return f"{EvaluatedIndividual.__repr__(self)} ({self.rank})"


@dataclass(frozen=True, eq=False, repr=False)
class Offspring(Individual):
    """
    A bred candidate plus the positions of the individuals that produced it.

    ``parent_indices`` index into the parent pool the offspring was bred from;
    the offspring does not hold the parents themselves.
    """

    parent_indices: tuple[int, ...]

    def __post_init__(self) -> None:
        super().__post_init__()
        indices = tuple(int(i) for i in self.parent_indices)
        if not indices:
            raise ValueError("Offspring requires at least one parent index.")
        object.__setattr__(self, "parent_indices", indices)

    def with_fitness(self, fitness: Iterable[float] | np.ndarray) -> EvaluatedOffspring:
        return EvaluatedOffspring(self.genes, self.parent_indices, frozen_vector(fitness, name="fitness"))


@dataclass(frozen=True, eq=False, repr=False)
class EvaluatedOffspring(Offspring):
    """Offspring with its fitness vector, used transiently during survivor selection."""

    fitness: np.ndarray

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "fitness", frozen_vector(self.fitness, name="fitness"))

    @property
    def n_obj(self) -> int:
        return int(self.fitness.shape[0])

    def parents_in(self, pool: Sequence[EvaluatedIndividual]) -> tuple[EvaluatedIndividual, ...]:
        return tuple(pool[i] for i in self.parent_indices)

    def as_evaluated(self) -> EvaluatedIndividual:
        """Drop the parent bookkeeping once the offspring has been admitted."""
        return EvaluatedIndividual(self.genes, self.fitness)


@dataclass(frozen=True, eq=False)
class Generation:
    """Immutable, ordered snapshot of the population at one point of a run."""

    population: tuple[ParetoEvaluatedIndividual, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "population", tuple(self.population))

    def __len__(self) -> int:
        return len(self.population)

    def __iter__(self) -> Iterator[ParetoEvaluatedIndividual]:
        return iter(self.population)

    def __getitem__(self, index: int) -> ParetoEvaluatedIndividual:
        return self.population[index]

    def front(self, rank: int = 0) -> tuple[ParetoEvaluatedIndividual, ...]:
        return tuple(ind for ind in self.population if ind.rank == rank)

    @property
    def X(self) -> np.ndarray:
        """Gene matrix of shape (N, n_var)."""
        if not self.population:
            return np.empty((0, 0))
        return np.vstack([ind.genes for ind in self.population])

    @property
    def F(self) -> np.ndarray:
        """Fitness matrix of shape (N, n_obj)."""
        if not self.population:
            return np.empty((0, 0))
        return np.vstack([ind.fitness for ind in self.population])

    @property
    def ranks(self) -> np.ndarray:
        return np.array([ind.rank for ind in self.population], dtype=int)


__all__ = [
    "frozen_vector",
    "Individual",
    "EvaluatedIndividual",
    "ParetoEvaluatedIndividual",
    "Offspring",
    "EvaluatedOffspring",
    "Generation",
]
