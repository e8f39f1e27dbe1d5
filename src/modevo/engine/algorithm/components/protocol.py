"""
Breeding-strategy protocol and driver lifecycle states.

The generational loop is generic over the breeding strategy: any object
implementing :class:`BreedingStrategy` can be plugged into
:class:`~modevo.engine.algorithm.base.EvolutionaryAlgorithm`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from modevo.engine.algorithm.base import EvolutionaryAlgorithm
    from modevo.foundation.individual import Generation, Offspring, ParetoEvaluatedIndividual


class AlgorithmState(str, Enum):
    """Lifecycle of the generational loop."""

    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    TERMINATED = "terminated"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class BreedingStrategy(Protocol):
    """
    Capabilities a breeding scheme provides to the generational loop.

    Attributes:
        population_size: Number of individuals kept per generation.
    """

    population_size: int

    def initialize_first_generation(self, algorithm: EvolutionaryAlgorithm) -> Generation:
        """Sample, evaluate and rank generation 0."""
        ...

    def select_parents(self, algorithm: EvolutionaryAlgorithm) -> Sequence[ParetoEvaluatedIndividual]:
        """Parent pool for the next breeding step."""
        ...

    def create_offspring(self, parents: Sequence[ParetoEvaluatedIndividual]) -> list[Offspring]:
        """Breed candidates whose ``parent_indices`` refer to ``parents``."""
        ...

    def should_continue(self, algorithm: EvolutionaryAlgorithm) -> bool:
        """Whether another generation should be bred."""
        ...


__all__ = ["AlgorithmState", "BreedingStrategy"]
